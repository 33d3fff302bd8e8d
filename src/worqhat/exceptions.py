"""
Custom exceptions for the WorqHat client.
"""

from typing import Dict, Any, Optional


class WorqHatError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(WorqHatError):
    """Raised when a required parameter is missing or malformed."""

    pass


class ImageDimensionError(InvalidInputError):
    """Raised when an image does not fit the size rules of an endpoint."""

    pass


class UnsupportedFormatError(InvalidInputError):
    """Raised for unknown enumeration values or unsupported input shapes."""

    pass


class ConfigurationError(WorqHatError):
    """Raised when the client configuration is missing or invalid."""

    pass


class APIError(WorqHatError):
    """
    Normalized error for a failed remote call.

    Carries the HTTP status (None when no response was received), the
    response payload, the status text and the diagnostic headers that
    identify the client environment.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        data: Any = None,
        status_text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(
            message,
            {"status": status, "data": data, "status_text": status_text},
        )
        self.status = status
        self.data = data
        self.status_text = status_text
        self.headers = headers or {}

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{"error": {...}}`` envelope for this failure."""
        return {
            "error": {
                "status": self.status,
                "data": self.data,
                "statusText": self.status_text,
                "headers": dict(self.headers),
            }
        }


class BadRequestError(APIError):
    pass


class AuthenticationError(APIError):
    pass


class PermissionDeniedError(APIError):
    pass


class NotFoundError(APIError):
    pass


class ConflictError(APIError):
    pass


class UnprocessableEntityError(APIError):
    pass


class RateLimitError(APIError):
    pass


class InternalServerError(APIError):
    pass


class NetworkError(APIError):
    """Raised when no response could be obtained from the server."""

    def to_dict(self) -> Dict[str, Any]:
        return {"error": {"message": self.message, "headers": dict(self.headers)}}


class TimeoutError(NetworkError):
    """Raised when the transport times out."""

    pass
