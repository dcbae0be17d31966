"""
pURL decoding and parsing module.

Turns the raw ``purl`` query parameter into a ``PackageIdentifier`` using the
packageurl-python implementation of the pURL grammar.
"""

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from urllib.parse import unquote_plus

from packageurl import PackageURL

from .errors import DecodeError, ParseError

logger = logging.getLogger(__name__)

# "%" not followed by two hex digits
_INVALID_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")


@dataclass(frozen=True)
class PackageIdentifier:
    """
    Parsed pURL.

    For ``oci`` pURLs ``version`` holds a content digest (e.g. ``sha256:<hex>``),
    not a version number.
    """

    type: str
    name: str
    version: str | None = None
    qualifiers: Mapping[str, str] = field(default_factory=dict)
    namespace: str | None = None
    subpath: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "qualifiers", MappingProxyType(dict(self.qualifiers)))

    @classmethod
    def from_package_url(cls, purl: PackageURL) -> "PackageIdentifier":
        data = purl.to_dict(encode=False)
        return cls(
            type=data["type"] or "",
            name=data["name"] or "",
            version=data["version"] or None,
            qualifiers=data["qualifiers"] or {},
            namespace=data["namespace"] or None,
            subpath=data["subpath"] or None,
        )


def decode_purl(raw: str) -> str:
    """
    Strictly query-unescape the raw ``purl`` parameter.

    Args:
        raw: Parameter value as received

    Returns:
        Decoded pURL string ("+" becomes a space)

    Raises:
        DecodeError: "%" not followed by two hex digits

    Examples:
        >>> decode_purl("pkg%3Aoci%2Fnginx")
        'pkg:oci/nginx'
        >>> decode_purl("pkg:oci/nginx%zz")
        Traceback (most recent call last):
        ...
        purl_resolver.errors.DecodeError: failed to decode purl parameter: invalid URL escape "%zz"
    """
    match = _INVALID_ESCAPE.search(raw)
    if match:
        escape = raw[match.start():match.start() + 3]
        logger.warning(f"Invalid escape {escape!r} in purl parameter: {raw}")
        raise DecodeError(f'invalid URL escape "{escape}"', purl=raw)

    return unquote_plus(raw)


def parse_purl(decoded: str) -> PackageIdentifier:
    """
    Parse a decoded pURL string.

    Percent-encoded qualifier values and version are decoded by the parser.

    Raises:
        ParseError: string does not follow the pURL grammar
    """
    try:
        purl = PackageURL.from_string(decoded)
    except ValueError as e:
        logger.warning(f"Invalid purl format: {decoded}: {e}")
        raise ParseError(str(e), purl=decoded) from e

    identifier = PackageIdentifier.from_package_url(purl)
    logger.debug(f"Parsed purl: {identifier}")
    return identifier
