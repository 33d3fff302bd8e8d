"""
Core pure functions for the client.

This package contains I/O-free functions for request headers, response
reshaping, error normalization, retry decisions and input validation.
"""

from .remote import (
    build_auth_headers,
    build_diagnostic_headers,
    parse_success_response,
    extract_error_message,
    make_api_error,
    classify_request_exception,
    normalize_transport_error,
    should_retry_request,
    calculate_retry_delay,
)

from .validation import (
    is_missing,
    require_fields,
    validate_choice,
    validate_output_type,
    resolve_orientation,
    validate_small_family,
    validate_enumerated_family,
    validate_upscale,
    validate_collection_schema,
    MAX_PIXEL_COUNT,
    MIN_UPSCALE_DIMENSION,
)

__all__ = [
    # Remote functions
    "build_auth_headers",
    "build_diagnostic_headers",
    "parse_success_response",
    "extract_error_message",
    "make_api_error",
    "classify_request_exception",
    "normalize_transport_error",
    "should_retry_request",
    "calculate_retry_delay",
    # Validation functions
    "is_missing",
    "require_fields",
    "validate_choice",
    "validate_output_type",
    "resolve_orientation",
    "validate_small_family",
    "validate_enumerated_family",
    "validate_upscale",
    "validate_collection_schema",
    "MAX_PIXEL_COUNT",
    "MIN_UPSCALE_DIMENSION",
]
