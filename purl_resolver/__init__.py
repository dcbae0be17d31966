"""
pURL resolver service.

Translates a Package URL (pURL) identifying an OCI artifact into a
fully-qualified OCI image reference usable by any OCI registry client.

Resolution Rules:
    Base reference:
        - repository_url qualifier, with a leading https:// or http:// removed
        - otherwise docker.io/<name>

    Tag or digest (first match wins):
        - @<version> (for oci pURLs the version is a digest)
        - :<tag> from the tag qualifier
        - :latest

    Examples:
        pkg:oci/nginx                                   -> docker.io/nginx:latest
        pkg:oci/app?repository_url=ghcr.io/myorg/app    -> ghcr.io/myorg/app:latest
        pkg:oci/debian@sha256:244fd47?repository_url=docker.io/library/debian
                                                        -> docker.io/library/debian@sha256:244fd47

See README.md for full documentation.
"""

__version__ = "0.1.0"

# Import key components for convenience
from .config import Config
from .errors import (
    ResolverError,
    MissingParameter,
    DecodeError,
    ParseError,
    UnsupportedType,
    MissingComponent,
)
from .purl import PackageIdentifier, decode_purl, parse_purl
from .reference import validate_identifier, resolve_reference, resolve

__all__ = [
    "Config",
    "ResolverError",
    "MissingParameter",
    "DecodeError",
    "ParseError",
    "UnsupportedType",
    "MissingComponent",
    "PackageIdentifier",
    "decode_purl",
    "parse_purl",
    "validate_identifier",
    "resolve_reference",
    "resolve",
]
