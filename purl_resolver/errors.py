"""
Error taxonomy for pURL resolution.

Every error is scoped to a single request and maps to HTTP 400.
"""


class ResolverError(Exception):
    """Base class for all resolution failures."""

    status_code = 400

    def __init__(self, message: str, purl: str | None = None):
        super().__init__(message)
        self.message = message
        self.purl = purl

    def to_dict(self) -> dict:
        """Error response envelope; `purl` is omitted when empty."""
        body = {"error": self.message}
        if self.purl:
            body["purl"] = self.purl
        return body


class MissingParameter(ResolverError):
    def __init__(self, parameter: str = "purl"):
        super().__init__(f"missing required parameter: {parameter}")
        self.parameter = parameter


class DecodeError(ResolverError):
    def __init__(self, detail: str, purl: str | None = None):
        super().__init__(f"failed to decode purl parameter: {detail}", purl)
        self.detail = detail


class ParseError(ResolverError):
    def __init__(self, detail: str, purl: str | None = None):
        super().__init__(f"invalid purl format: {detail}", purl)
        self.detail = detail


class UnsupportedType(ResolverError):
    def __init__(self, got: str, purl: str | None = None):
        super().__init__(f"unsupported purl type '{got}', only 'oci' is supported", purl)
        self.got = got


class MissingComponent(ResolverError):
    def __init__(self, component: str, purl: str | None = None):
        super().__init__(f"purl is missing required component: {component}", purl)
        self.component = component
