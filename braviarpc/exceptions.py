"""Exceptions raised by the BRAVIA client."""


class BraviaException(Exception):
    """Base exception for BRAVIA client errors."""


class BraviaConstructionError(BraviaException):
    """The client could not be created (discovery failed or found nothing)."""


class BraviaCapabilityError(BraviaException):
    """The requested API is not advertised by the device."""

    def __init__(self, message: str, service: str, method: str | None = None,
                 version: str | None = None) -> None:
        super().__init__(message)
        self.service = service
        self.method = method
        self.version = version


class BraviaServiceNotFound(BraviaCapabilityError):
    """The device does not expose the requested service."""


class BraviaMethodNotFound(BraviaCapabilityError):
    """The service exists but does not provide the requested API."""


class BraviaVersionUnsupported(BraviaCapabilityError):
    """The API exists but not at the requested version."""


class BraviaAuthLevelError(BraviaException):
    """A protected API was called without a pre-shared key."""


class BraviaNetworkError(BraviaException):
    """Cannot reach the BRAVIA device."""


class BraviaBadStatus(BraviaException):
    """The device answered with a non-2xx HTTP status."""

    def __init__(self, status: int, url: str) -> None:
        super().__init__(f"HTTP {status} from {url}")
        self.status = status
        self.url = url


class BraviaInvalidResponse(BraviaException):
    """The response body is not a valid BRAVIA envelope."""


class BraviaMissingValue(BraviaException):
    """An expected value was missing from the response."""


class BraviaError(BraviaException):
    """The device rejected the call with an error code.

    Error codes are listed at
    https://pro-bravia.sony.net/develop/integrate/rest-api/spec/errorcode-list/
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"#{code}: {message}")
        self.code = code
        self.message = message


class BraviaDeserializeError(BraviaException):
    """A payload did not have the expected shape."""
