"""
Pure functions for validation operations.

Required-field checks, enumeration checks and the image size rules of the
image endpoints, all raised before any request is sent.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import (
    ImageDimensionError,
    InvalidInputError,
    UnsupportedFormatError,
)
from ..models import Orientation, OutputType

ORIENTATION_SIZES: Dict[Orientation, Tuple[int, int]] = {
    Orientation.SQUARE: (512, 512),
    Orientation.LANDSCAPE: (768, 512),
    Orientation.PORTRAIT: (512, 768),
}

SMALL_FAMILY_MIN_SIDE = 128
SMALL_FAMILY_MAX_WIDTH = 896
SMALL_FAMILY_MAX_HEIGHT = 512
SMALL_FAMILY_CO_BOUND = 512

# Width x height pairs; the rotated pair is accepted as well.
ENUMERATED_SIZES: Tuple[Tuple[int, int], ...] = (
    (1024, 1024),
    (1152, 896),
    (1216, 832),
    (1344, 768),
    (1536, 640),
    (1344, 1024),
)

MAX_PIXEL_COUNT = 4_194_304
MIN_UPSCALE_DIMENSION = 64

SCHEMA_TYPES = frozenset(
    {
        "string",
        "number",
        "float",
        "boolean",
        "date",
        "timestamp",
        "json",
        "map",
        "array",
        "geopoint",
        "uuid",
        "ip",
    }
)


def is_missing(value: Any) -> bool:
    """Return True for None, empty strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict)) and len(value) == 0:
        return True
    return False


def require_fields(fields: Iterable[Tuple[str, Any]]) -> None:
    """Raise for the first missing field, in the order given."""
    for label, value in fields:
        if is_missing(value):
            raise InvalidInputError(f"{label} is required", {"field": label})


def validate_choice(label: str, value: str, choices: Sequence[str]) -> str:
    """Validate an enumeration value case-insensitively."""
    normalized = str(getattr(value, "value", value)).strip().lower()
    if normalized not in choices:
        raise UnsupportedFormatError(
            f"{label} is invalid. Expected one of: {', '.join(choices)}",
            {"field": label, "value": value},
        )
    return normalized


def validate_output_type(value: Union[str, OutputType, None]) -> str:
    if value is None:
        return OutputType.URL.value
    return validate_choice("Output type", value, [t.value for t in OutputType])


def resolve_orientation(orientation: Union[str, Orientation, None]) -> Tuple[int, int]:
    """Map an orientation name to its (width, height) pair."""
    if orientation is None:
        return ORIENTATION_SIZES[Orientation.SQUARE]

    name = str(getattr(orientation, "value", orientation)).strip().lower()
    try:
        return ORIENTATION_SIZES[Orientation(name)]
    except ValueError:
        raise UnsupportedFormatError(
            "Orientation is invalid", {"orientation": orientation}
        ) from None


def validate_small_family(width: int, height: int) -> None:
    """Size rules for the v2 image modification model."""
    if width < SMALL_FAMILY_MIN_SIDE or width > SMALL_FAMILY_MAX_WIDTH:
        raise ImageDimensionError(
            "Invalid image width. Width should be at least 128 and maximum "
            "supported width is 896.",
            {"width": width, "height": height},
        )

    if height < SMALL_FAMILY_MIN_SIDE or height > SMALL_FAMILY_MAX_HEIGHT:
        raise ImageDimensionError(
            "Invalid image height. Height should be at least 128 and maximum "
            "supported height is 512.",
            {"width": width, "height": height},
        )

    # Unreachable while the height cap equals the co-bound; kept to match the
    # server-side rule set
    if width > SMALL_FAMILY_CO_BOUND and height > SMALL_FAMILY_CO_BOUND:
        raise ImageDimensionError(
            "Invalid image dimensions. Only one of width or height can be above 512.",
            {"width": width, "height": height},
        )


def validate_enumerated_family(width: int, height: int) -> None:
    """Size rules for the v3 image modification model."""
    for allowed_width, allowed_height in ENUMERATED_SIZES:
        if (width, height) in (
            (allowed_width, allowed_height),
            (allowed_height, allowed_width),
        ):
            return

    allowed = ", ".join(f"{w}x{h}" for w, h in ENUMERATED_SIZES)
    raise ImageDimensionError(
        "Invalid image dimensions. The dimensions of the image should be one "
        f"of the following: {allowed}.",
        {"width": width, "height": height},
    )


def validate_upscale(
    width: int,
    height: int,
    scale: Union[int, float],
    max_pixels: int = MAX_PIXEL_COUNT,
    min_dimension: int = MIN_UPSCALE_DIMENSION,
) -> Tuple[int, int]:
    """Validate an upscale request and return the output (width, height)."""
    if isinstance(scale, bool) or not isinstance(scale, (int, float)) or scale <= 0:
        raise InvalidInputError(
            "Scale must be a positive number", {"scale": scale}
        )

    out_width = width * scale
    out_height = height * scale

    if out_width < min_dimension or out_height < min_dimension:
        raise ImageDimensionError(
            f"Invalid upscale. Output width and height must be at least {min_dimension}px.",
            {"width": out_width, "height": out_height},
        )

    if out_width * out_height > max_pixels:
        raise ImageDimensionError(
            f"Invalid upscale. Output of {out_width:g}x{out_height:g} exceeds the "
            f"maximum of {max_pixels} pixels.",
            {"width": out_width, "height": out_height, "max_pixels": max_pixels},
        )

    return int(out_width), int(out_height)


def validate_collection_schema(schema: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Check that every schema value is a supported column type."""
    validated = {}
    for key, value in (schema or {}).items():
        if value not in SCHEMA_TYPES:
            raise UnsupportedFormatError(
                f"The data type {value} is not allowed as a Collection Schema value",
                {"column": key, "type": value},
            )
        validated[key] = value
    return validated
