"""
Flask application and resolver endpoints.

Exposes pURL to OCI reference resolution over HTTP.
"""

import logging
from flask import Flask, Response, jsonify, request

from .errors import MissingParameter, ResolverError
from .purl import decode_purl
from .reference import resolve

logger = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)


# -------------------------------
# Error Handling
# -------------------------------


@app.errorhandler(ResolverError)
def handle_resolver_error(error):
    """Serialize any resolution failure as a JSON error envelope."""
    logger.info(f"Resolve rejected ({error.status_code}): {error.message}")
    return jsonify(error.to_dict()), error.status_code


# -------------------------------
# Endpoints
# -------------------------------


@app.route("/healthz")
def healthz():
    """
    Health check endpoint.

    Returns:
        Response with status 200 and body "OK"
    """
    return Response("OK", status=200, mimetype="text/plain")


@app.route("/resolve")
def resolve_purl():
    """
    Resolve a pURL into an OCI image reference.

    Query Parameters:
        purl: Percent-encoded pURL of type "oci" (required)

    Returns:
        200 with JSON body:
        {
            "purl": "pkg:oci/nginx",
            "oci_reference": "docker.io/nginx:latest"
        }

    Errors (all 400, JSON body {"error": ..., "purl": ...}):
        - missing purl parameter
        - purl parameter is not valid percent-encoding
        - purl does not follow the pURL grammar
        - purl type is not "oci"
        - purl has no name

    Example:
        GET /resolve?purl=pkg%3Aoci%2Fdebian%40sha256%3A244fd47%3Frepository_url%3Ddocker.io%2Flibrary%2Fdebian
        -> {"purl": "pkg:oci/debian@sha256:244fd47?repository_url=docker.io/library/debian",
            "oci_reference": "docker.io/library/debian@sha256:244fd47"}
    """
    purl_param = request.args.get("purl", "")
    if not purl_param:
        logger.warning("Resolve requested without purl parameter")
        raise MissingParameter("purl")

    logger.info(f"Resolve requested: purl='{purl_param}'")

    decoded_purl = decode_purl(purl_param)
    result = resolve(decoded_purl)

    return jsonify(result), 200
