"""
Reference resolution module.

Maps a parsed ``oci`` pURL onto an OCI image reference of the form
``registry/repository[:tag|@digest]``.
"""

import logging

from .errors import MissingComponent, UnsupportedType
from .purl import PackageIdentifier, parse_purl

logger = logging.getLogger(__name__)

SUPPORTED_TYPE = "oci"
DEFAULT_REGISTRY = "docker.io"
DEFAULT_TAG = "latest"

# Checked in this order, exact and case-sensitive
SCHEME_PREFIXES = ("https://", "http://")


def _strip_scheme(repository_url: str) -> str:
    for prefix in SCHEME_PREFIXES:
        if repository_url.startswith(prefix):
            repository_url = repository_url[len(prefix):]
    return repository_url


def validate_identifier(identifier: PackageIdentifier, purl: str | None = None) -> None:
    """
    Check that the identifier can be resolved.

    Raises:
        UnsupportedType: type is not "oci"
        MissingComponent: name is empty
    """
    if identifier.type != SUPPORTED_TYPE:
        logger.warning(f"Unsupported purl type: {identifier.type}")
        raise UnsupportedType(identifier.type, purl=purl)

    if not identifier.name:
        logger.warning("Purl is missing name")
        raise MissingComponent("name", purl=purl)


def resolve_reference(identifier: PackageIdentifier, purl: str | None = None) -> str:
    """
    Build the OCI reference for a pURL.

    Args:
        identifier: Parsed pURL
        purl: Original pURL string, attached to any error raised

    Returns:
        Reference string, e.g. "docker.io/nginx:latest"

    Rules:
        Base:
            - repository_url qualifier, minus a leading https:// or http://
            - otherwise docker.io/<name>
        Suffix (first match wins):
            - @<version> when version is set (digest)
            - :<tag> when the tag qualifier is set
            - :latest

    Examples:
        >>> resolve_reference(PackageIdentifier(type="oci", name="nginx"))
        'docker.io/nginx:latest'
        >>> resolve_reference(PackageIdentifier(
        ...     type="oci", name="app", qualifiers={"repository_url": "https://ghcr.io/myorg/app"}))
        'ghcr.io/myorg/app:latest'
    """
    validate_identifier(identifier, purl)

    qualifiers = identifier.qualifiers
    if "repository_url" in qualifiers:
        base = _strip_scheme(qualifiers["repository_url"])
    else:
        base = f"{DEFAULT_REGISTRY}/{identifier.name}"

    if identifier.version:
        suffix = "@" + identifier.version
    elif "tag" in qualifiers:
        suffix = ":" + qualifiers["tag"]
    else:
        suffix = ":" + DEFAULT_TAG

    reference = base + suffix
    logger.debug(f"Resolved base={base}, suffix={suffix}")
    return reference


def resolve(decoded_purl: str) -> dict:
    """
    Resolve a decoded pURL string into a response envelope.

    This is the single entry point used by the HTTP layer.

    Returns:
        {"purl": <decoded_purl>, "oci_reference": <reference>}

    Raises:
        ResolverError: ParseError, UnsupportedType or MissingComponent, each
            carrying the decoded pURL
    """
    identifier = parse_purl(decoded_purl)
    reference = resolve_reference(identifier, purl=decoded_purl)
    logger.info(f"Resolved purl '{decoded_purl}' to '{reference}'")
    return {"purl": decoded_purl, "oci_reference": reference}
