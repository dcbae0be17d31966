"""
pURL resolver service.

Resolves Package URL (pURL) identifiers of type "oci" to fully-qualified OCI
image references. The service never contacts a registry; resolution is a pure
mapping of the pURL fields and qualifiers.

Endpoints:
    - GET /resolve?purl=<percent-encoded pURL> - Resolve a pURL
    - GET /healthz - Health check

Environment Variables:
    LOG_LEVEL, FLASK_HOST, FLASK_PORT

Example:
    $ LOG_LEVEL=DEBUG python app.py serve --port 8080
    $ curl 'localhost:8080/resolve?purl=pkg%3Aoci%2Fnginx'
    {"oci_reference":"docker.io/nginx:latest","purl":"pkg:oci/nginx"}

See README.md for full documentation.
"""

import argparse
import logging

from purl_resolver.config import config
from purl_resolver.routes import app

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="purl-resolver",
        description="Service for resolving pURL identifiers to an OCI artifact",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser(
        "serve",
        help="Start the HTTP web server",
        description="Start the HTTP web server that provides the pURL resolver API endpoints.",
    )
    serve.add_argument("-p", "--port",
                       dest="port",
                       help=f"Port to run the HTTP server on (default: {config.FLASK_PORT})",
                       action="store",
                       type=int,
                       default=config.FLASK_PORT)

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the resolver application."""
    args = parse_args(argv)
    debug_mode = logger.getEffectiveLevel() == logging.DEBUG
    logger.info(f"Starting pURL resolver service on {config.FLASK_HOST}:{args.port}")
    logger.info(f"Configuration: {config}")
    logger.info(f"Log level: {logging.getLevelName(logger.getEffectiveLevel())}")
    if debug_mode:
        logger.info("Flask debug mode enabled")
    app.run(host=config.FLASK_HOST, port=args.port, debug=debug_mode)


if __name__ == "__main__":
    main()
