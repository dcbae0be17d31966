"""Tests for pURL decoding and parsing."""

import pytest

from purl_resolver.errors import DecodeError, ParseError
from purl_resolver.purl import PackageIdentifier, decode_purl, parse_purl


class TestDecodePurl:
    """Tests for strict query-unescaping of the purl parameter."""

    def test_plain_string_unchanged(self):
        assert decode_purl("pkg:oci/nginx") == "pkg:oci/nginx"

    def test_percent_escapes_decoded(self):
        assert decode_purl("pkg%3Aoci%2Fnginx%40sha256%3Aabc") == "pkg:oci/nginx@sha256:abc"

    def test_plus_becomes_space(self):
        assert decode_purl("a+b") == "a b"

    @pytest.mark.parametrize("raw,escape", [
        ("pkg:oci/nginx%zz", "%zz"),
        ("pkg:oci/nginx%4", "%4"),
        ("pkg:oci/nginx%", "%"),
        ("pkg:oci/%g1nginx", "%g1"),
    ])
    def test_invalid_escape(self, raw, escape):
        with pytest.raises(DecodeError) as exc:
            decode_purl(raw)
        assert exc.value.detail == f'invalid URL escape "{escape}"'
        assert exc.value.message == f'failed to decode purl parameter: invalid URL escape "{escape}"'
        assert exc.value.purl == raw


class TestParsePurl:
    """Tests for pURL grammar parsing."""

    def test_minimal(self):
        identifier = parse_purl("pkg:oci/nginx")
        assert identifier.type == "oci"
        assert identifier.name == "nginx"
        assert identifier.version is None
        assert dict(identifier.qualifiers) == {}

    def test_version_and_qualifiers(self):
        identifier = parse_purl("pkg:oci/debian@sha256:244fd47?repository_url=docker.io/library/debian&tag=12")
        assert identifier.version == "sha256:244fd47"
        assert identifier.qualifiers["repository_url"] == "docker.io/library/debian"
        assert identifier.qualifiers["tag"] == "12"

    def test_qualifier_values_percent_decoded(self):
        identifier = parse_purl("pkg:oci/app?repository_url=ghcr.io%2Fmyorg%2Fapp")
        assert identifier.qualifiers["repository_url"] == "ghcr.io/myorg/app"

    def test_other_types_parse(self):
        identifier = parse_purl("pkg:npm/express@4.0.0")
        assert identifier.type == "npm"
        assert identifier.version == "4.0.0"

    @pytest.mark.parametrize("raw", ["not-a-valid-purl", "http:oci/nginx", "pkg:oci/"])
    def test_invalid(self, raw):
        with pytest.raises(ParseError) as exc:
            parse_purl(raw)
        assert exc.value.message.startswith("invalid purl format: ")
        assert exc.value.purl == raw


class TestPackageIdentifier:
    """Tests for the parsed identifier value."""

    def test_immutable(self):
        identifier = PackageIdentifier(type="oci", name="nginx")
        with pytest.raises(AttributeError):
            identifier.name = "other"

    def test_qualifiers_read_only(self):
        identifier = PackageIdentifier(type="oci", name="nginx", qualifiers={"tag": "1"})
        with pytest.raises(TypeError):
            identifier.qualifiers["tag"] = "2"

    def test_qualifiers_copied(self):
        qualifiers = {"tag": "1"}
        identifier = PackageIdentifier(type="oci", name="nginx", qualifiers=qualifiers)
        qualifiers["tag"] = "2"
        assert identifier.qualifiers["tag"] == "1"
