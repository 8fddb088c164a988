"""Failures raised while talking to the CMS.

None of these reach a page handler: :class:`~app.services.resolver.ContentResolver`
catches every :class:`CmsError` and serves the static fallback instead.
"""


class CmsError(Exception):
    """Base class for CMS fetch/mapping failures."""


class ConfigurationMissing(CmsError):
    """The CMS base URL is not configured."""


class NetworkError(CmsError):
    """The request never produced a response (DNS, connect, timeout, ...)."""


class HttpError(CmsError):
    """The CMS answered with a non-2xx status."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"CMS returned HTTP {status} {reason}".rstrip())


class DecodeError(CmsError):
    """The response body is not valid JSON."""


class ShapeMismatch(CmsError):
    """The JSON does not match the schema expected for the resource."""
