"""
Tests for pure functions in core.validation.
"""

import pytest

from worqhat.core.validation import (
    MAX_PIXEL_COUNT,
    MIN_UPSCALE_DIMENSION,
    is_missing,
    require_fields,
    resolve_orientation,
    validate_choice,
    validate_collection_schema,
    validate_enumerated_family,
    validate_output_type,
    validate_small_family,
    validate_upscale,
)
from worqhat.exceptions import ImageDimensionError, InvalidInputError, UnsupportedFormatError
from worqhat.models import Orientation, OutputType


class TestRequiredFields:
    @pytest.mark.parametrize("value", [None, "", b"", [], (), {}])
    def test_missing_values(self, value):
        assert is_missing(value) is True

    @pytest.mark.parametrize("value", ["x", 0, False, [1], {"a": 1}, 0.0])
    def test_present_values(self, value):
        assert is_missing(value) is False

    def test_first_missing_field_reported(self):
        with pytest.raises(InvalidInputError) as exc_info:
            require_fields([("Image data", "ok"), ("Modification", None), ("Similarity", None)])

        assert str(exc_info.value) == "Modification is required"
        assert exc_info.value.details == {"field": "Modification"}

    def test_all_present(self):
        require_fields([("Question", "hi"), ("Similarity", 0)])


class TestChoices:
    def test_case_insensitive(self):
        assert validate_choice("Response type", "JSON", ("json", "text")) == "json"

    def test_accepts_enum_members(self):
        assert validate_choice("Output type", OutputType.BLOB, ("url", "blob")) == "blob"

    def test_invalid(self):
        with pytest.raises(UnsupportedFormatError, match="Response type is invalid"):
            validate_choice("Response type", "xml", ("json", "text"))

    def test_output_type_default(self):
        assert validate_output_type(None) == "url"
        assert validate_output_type("Blob") == "blob"

    def test_output_type_invalid(self):
        with pytest.raises(UnsupportedFormatError):
            validate_output_type("png")


class TestOrientation:
    @pytest.mark.parametrize(
        "orientation,size",
        [
            (None, (512, 512)),
            ("Square", (512, 512)),
            ("landscape", (768, 512)),
            ("PORTRAIT", (512, 768)),
            (Orientation.LANDSCAPE, (768, 512)),
        ],
    )
    def test_sizes(self, orientation, size):
        assert resolve_orientation(orientation) == size

    def test_invalid(self):
        with pytest.raises(UnsupportedFormatError, match="Orientation is invalid"):
            resolve_orientation("diagonal")


class TestSmallFamily:
    @pytest.mark.parametrize(
        "width,height",
        [(128, 128), (896, 512), (512, 512), (896, 128), (300, 400)],
    )
    def test_accepted(self, width, height):
        validate_small_family(width, height)

    @pytest.mark.parametrize(
        "width,height",
        [(127, 200), (897, 200), (200, 127), (200, 513), (600, 600)],
    )
    def test_rejected(self, width, height):
        with pytest.raises(ImageDimensionError):
            validate_small_family(width, height)

    def test_both_sides_above_512_fail_on_height(self):
        with pytest.raises(ImageDimensionError, match="Invalid image height"):
            validate_small_family(513, 513)


class TestEnumeratedFamily:
    @pytest.mark.parametrize(
        "width,height",
        [
            (1024, 1024),
            (1152, 896),
            (896, 1152),
            (1216, 832),
            (832, 1216),
            (1344, 768),
            (768, 1344),
            (1536, 640),
            (640, 1536),
            (1344, 1024),
            (1024, 1344),
        ],
    )
    def test_accepted(self, width, height):
        validate_enumerated_family(width, height)

    @pytest.mark.parametrize("width,height", [(1000, 1000), (512, 512), (1152, 895)])
    def test_rejected(self, width, height):
        with pytest.raises(ImageDimensionError) as exc_info:
            validate_enumerated_family(width, height)
        assert "1024x1024" in str(exc_info.value)


class TestUpscale:
    def test_constants(self):
        assert MAX_PIXEL_COUNT == 4_194_304
        assert MIN_UPSCALE_DIMENSION == 64

    def test_returns_output_size(self):
        assert validate_upscale(512, 256, 2) == (1024, 512)

    def test_exactly_at_pixel_limit_accepted(self):
        assert validate_upscale(1024, 1024, 2) == (2048, 2048)

    def test_above_pixel_limit_rejected(self):
        with pytest.raises(ImageDimensionError, match="exceeds the maximum"):
            validate_upscale(1025, 1024, 2)

    def test_exactly_at_minimum_accepted(self):
        assert validate_upscale(32, 32, 2) == (64, 64)

    def test_below_minimum_rejected(self):
        with pytest.raises(ImageDimensionError, match="at least 64px"):
            validate_upscale(31, 100, 2)

    def test_custom_limits(self):
        with pytest.raises(ImageDimensionError):
            validate_upscale(100, 100, 2, max_pixels=10_000)

    @pytest.mark.parametrize("scale", [0, -2, "2", None, True])
    def test_invalid_scale(self, scale):
        with pytest.raises(InvalidInputError, match="Scale must be a positive number"):
            validate_upscale(100, 100, scale)


class TestCollectionSchema:
    def test_valid_schema(self):
        schema = {"name": "string", "age": "number", "tags": "array", "where": "geopoint"}
        assert validate_collection_schema(schema) == schema

    def test_empty_schema(self):
        assert validate_collection_schema(None) == {}

    def test_invalid_type(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            validate_collection_schema({"name": "string", "blob": "binary"})

        assert str(exc_info.value) == (
            "The data type binary is not allowed as a Collection Schema value"
        )
