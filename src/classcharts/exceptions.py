from __future__ import annotations

from typing import Any


class ClassChartsException(Exception):
    """Base exception class for classcharts API errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "kind": self.__class__.__name__}


# =============================================================================
# Request errors
# =============================================================================


class ClassChartsRequestError(ClassChartsException):
    """An authenticated round trip to the API failed."""


class ClassChartsTransportError(ClassChartsRequestError):
    """The request could not be sent or no response was received."""


class ClassChartsReadError(ClassChartsRequestError):
    """A response was received but its body could not be read as text."""


class ClassChartsEnvelopeError(ClassChartsRequestError):
    """The body does not contain the `{"success": ...}` status envelope."""


class ClassChartsError(ClassChartsRequestError):
    """ClassCharts reported a failure together with an error message."""

    def __init__(self, code: int, message: str):
        super().__init__(f"ClassCharts returned the error code: {code} and message {message}")
        self.code = code
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["code"] = self.code
        return result


class ClassChartsStatusError(ClassChartsRequestError):
    """ClassCharts reported a failure without an error message."""

    def __init__(self, code: int):
        super().__init__(f"ClassCharts returned the error code: {code}")
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["code"] = self.code
        return result


class ClassChartsParsingError(ClassChartsRequestError):
    """The envelope reported success but the payload did not match its model."""


# =============================================================================
# Client creation errors
# =============================================================================


class ClassChartsClientCreationError(ClassChartsException):
    """Logging in and building a client failed."""


class ClassChartsAuthenticationError(ClassChartsClientCreationError):
    """No redirect or no cookies on login: wrong code/date of birth, or ClassCharts is down."""

    def __init__(self, message: str = "Unauthenticated, either your code or date of birth is wrong. No cookies were provided."):
        super().__init__(message)


class ClassChartsMissingSessionCookie(ClassChartsClientCreationError):
    """The session cookie is missing from the cookies returned on login."""


class ClassChartsCookieParsingError(ClassChartsClientCreationError):
    """The session cookie does not hold the expected JSON document."""


class ClassChartsHeaderDecodingError(ClassChartsClientCreationError):
    """A `set-cookie` header could not be read as a string."""


class ClassChartsCookieDecodingError(ClassChartsClientCreationError):
    """The session cookie could not be percent-decoded."""


class ClassChartsIdentityError(ClassChartsClientCreationError):
    """Login succeeded but fetching the student info afterwards failed."""
