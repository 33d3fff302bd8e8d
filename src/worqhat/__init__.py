"""
WorqHat SDK

Python client for the WorqHat AI and document database API.
"""

from .client import WorqHatClient
from .config import SDK_VERSION, Configuration
from .models import ArrayAdd, ArrayRemove, Increment, Orientation, OutputType, WhereClause
from .exceptions import (
    WorqHatError,
    InvalidInputError,
    ImageDimensionError,
    UnsupportedFormatError,
    ConfigurationError,
    APIError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    ConflictError,
    UnprocessableEntityError,
    RateLimitError,
    InternalServerError,
    NetworkError,
    TimeoutError,
)

__version__ = SDK_VERSION

__all__ = [
    "WorqHatClient",
    "Configuration",
    "ArrayAdd",
    "ArrayRemove",
    "Increment",
    "Orientation",
    "OutputType",
    "WhereClause",
    "WorqHatError",
    "InvalidInputError",
    "ImageDimensionError",
    "UnsupportedFormatError",
    "ConfigurationError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "InternalServerError",
    "NetworkError",
    "TimeoutError",
]
