"""
Pure functions for remote API operations.

Functions for building request headers, reshaping responses, normalizing
failures and deciding on retries without I/O dependencies.
"""

import platform
import uuid
from datetime import datetime, timezone
from typing import Dict, Any, Optional

import httpx

from ..config import SDK_VERSION
from ..exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    InternalServerError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    TimeoutError,
    UnprocessableEntityError,
)

NETWORK_ERROR_MESSAGE = (
    "Network Error. This might happen because of Network Connectivity, Socket "
    "Connectivity Mismatch or Unable to connect with the Cloud Servers."
)

_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def build_auth_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Build authentication headers."""
    if not api_key:
        raise ConfigurationError("API Key is required")
    return {
        "User-Agent": f"worqhat-python/{SDK_VERSION}",
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def build_diagnostic_headers() -> Dict[str, str]:
    """Describe the client environment for error reports."""
    return {
        "X-WorqHat-Lang": "python",
        "X-WorqHat-Package-Version": SDK_VERSION,
        "X-WorqHat-OS": platform.system().lower(),
        "X-WorqHat-Arch": platform.machine(),
        "X-WorqHat-Request-Id": str(uuid.uuid4()),
        "X-WorqHat-Timestamp": datetime.now(timezone.utc).isoformat(),
        "X-WorqHat-Runtime": platform.python_implementation().lower(),
        "X-WorqHat-Runtime-Version": platform.python_version(),
    }


def parse_success_response(body: Any) -> Dict[str, Any]:
    """Merge a successful response body into the ``{code: 200, ...}`` envelope."""
    if isinstance(body, dict):
        return {"code": 200, **body}
    return {"code": 200, "data": body}


def extract_error_message(data: Any, status: int, status_text: Optional[str]) -> str:
    """Pick the most descriptive message out of an error payload."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if data.get("message"):
            return str(data["message"])
    elif isinstance(data, str) and data:
        return data
    return f"HTTP {status}: {status_text or 'Unknown error occurred'}"


def make_api_error(
    status: int,
    data: Any,
    status_text: Optional[str],
    headers: Optional[Dict[str, str]] = None,
) -> APIError:
    """Map an HTTP failure to the matching APIError subclass."""
    message = extract_error_message(data, status, status_text)
    headers = headers or build_diagnostic_headers()

    if status >= 500:
        error_class = InternalServerError
    else:
        error_class = _STATUS_ERRORS.get(status, APIError)

    return error_class(
        message, status=status, data=data, status_text=status_text, headers=headers
    )


def classify_request_exception(exception: Exception) -> str:
    """Classify exception type for error handling logic."""
    if isinstance(exception, httpx.TimeoutException):
        return "timeout"
    elif isinstance(
        exception, (httpx.TransportError, ConnectionError, OSError)
    ):
        return "network"
    else:
        return "unknown"


def normalize_transport_error(exception: Exception) -> NetworkError:
    """Convert a transport failure (no response) into a NetworkError."""
    headers = build_diagnostic_headers()
    details = {"cause": str(exception)}

    if classify_request_exception(exception) == "timeout":
        error: NetworkError = TimeoutError(
            "Request timed out.", headers=headers, data=details
        )
    else:
        error = NetworkError(NETWORK_ERROR_MESSAGE, headers=headers, data=details)
    error.__cause__ = exception
    return error


def should_retry_request(attempt: int, max_retries: int, exception: Exception) -> bool:
    """Determine if request should be retried based on attempt count and exception type.

    HTTP failures and transport failures share one retry limit; usage and
    validation errors are never retried.
    """
    if attempt >= max_retries:
        return False

    return isinstance(exception, APIError)


def calculate_retry_delay(attempt: int, base_delay: float) -> float:
    """Calculate exponential backoff delay for retry attempts."""
    return base_delay * (2**attempt)
