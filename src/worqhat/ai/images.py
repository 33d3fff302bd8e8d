"""
Image generation and image-to-image models (ImageCon).
"""

from typing import Any, Callable, Dict, List, Optional, Union

from ..config import get_logger
from ..core.validation import (
    require_fields,
    resolve_orientation,
    validate_enumerated_family,
    validate_output_type,
    validate_small_family,
    validate_upscale,
)
from ..models import Orientation, OutputType
from ..uploads import image_size
from .base import Endpoint

logger = get_logger("ai.images")

Prompt = Union[str, List[str]]


def build_generation_payload(
    prompt: Prompt,
    orientation: Union[str, Orientation, None] = None,
    image_style: Optional[str] = None,
    output_type: Union[str, OutputType, None] = None,
) -> Dict[str, Any]:
    """Validate generation options and build the JSON body."""
    prompts = [prompt] if isinstance(prompt, str) else list(prompt or [])
    require_fields([("Prompt", [p for p in prompts if p])])

    width, height = resolve_orientation(orientation)
    return {
        "prompt": prompts,
        "height": height,
        "width": width,
        "image_style": image_style or "default",
        "output_type": validate_output_type(output_type),
    }


class ImageGeneration(Endpoint):
    """
    Text-to-image generation.

    Orientation maps to a fixed canvas: Square 512x512, Landscape 768x512,
    Portrait 512x768.
    """

    async def _generate(self, version: str, prompt: Optional[Prompt], **options: Any) -> Dict[str, Any]:
        logger.debug("Image Generation %s: starting with prompt %s", version, prompt)
        body = build_generation_payload(prompt, **options)
        return await self._post_json(
            f"/api/ai/images/generate/{version}",
            body,
            action=f"Image Generation {version}",
            timed=True,
        )

    async def v2(
        self,
        prompt: Optional[Prompt] = None,
        orientation: Union[str, Orientation, None] = None,
        image_style: Optional[str] = None,
        output_type: Union[str, OutputType, None] = None,
    ) -> Dict[str, Any]:
        return await self._generate(
            "v2", prompt, orientation=orientation, image_style=image_style, output_type=output_type
        )

    async def v3(
        self,
        prompt: Optional[Prompt] = None,
        orientation: Union[str, Orientation, None] = None,
        image_style: Optional[str] = None,
        output_type: Union[str, OutputType, None] = None,
    ) -> Dict[str, Any]:
        return await self._generate(
            "v3", prompt, orientation=orientation, image_style=image_style, output_type=output_type
        )


class ImageVariations(Endpoint):
    """Image-to-image modification, background and text removal."""

    async def _modify(
        self,
        version: str,
        existing_image: Any,
        modification: Optional[str],
        similarity: Optional[int],
        output_type: Union[str, OutputType, None],
        check_size: Callable[[int, int], None],
    ) -> Dict[str, Any]:
        action = f"Image Modification {version}"
        require_fields(
            [
                ("Image data", existing_image),
                ("Modification", modification),
                ("Similarity", similarity),
            ]
        )
        output = validate_output_type(output_type)

        content = await self._client.read_file(existing_image)
        check_size(*image_size(content))

        logger.debug("%s: uploading image", action)
        return await self._post_form(
            f"/api/ai/images/modify/{version}",
            [("existing_image", ("image.jpg", content, "image/jpeg"))],
            action=action,
            fields={
                "modifications": modification,
                "outputType": output,
                "similarity": similarity,
            },
            timed=True,
        )

    async def v2(
        self,
        existing_image: Any = None,
        modification: Optional[str] = None,
        similarity: Optional[int] = None,
        output_type: Union[str, OutputType, None] = None,
    ) -> Dict[str, Any]:
        """Modify an image with the small model (sides 128-896 x 128-512)."""
        return await self._modify(
            "v2", existing_image, modification, similarity, output_type, validate_small_family
        )

    async def v3(
        self,
        existing_image: Any = None,
        modification: Optional[str] = None,
        similarity: Optional[int] = None,
        output_type: Union[str, OutputType, None] = None,
    ) -> Dict[str, Any]:
        """Modify an image with the large model (fixed sizes, either orientation)."""
        return await self._modify(
            "v3", existing_image, modification, similarity, output_type, validate_enumerated_family
        )

    async def _single_image_edit(
        self, route: str, action: str, existing_image: Any, output_type: Union[str, OutputType, None]
    ) -> Dict[str, Any]:
        require_fields([("Image data", existing_image)])
        output = validate_output_type(output_type)
        part = await self._image_part("existing_image", existing_image)
        return await self._post_form(route, [part], action=action, fields={"output_type": output})

    async def remove_background(
        self, existing_image: Any = None, output_type: Union[str, OutputType, None] = None
    ) -> Dict[str, Any]:
        return await self._single_image_edit(
            "/api/ai/images/modify/v3/remove-background",
            "Remove Background",
            existing_image,
            output_type,
        )

    async def remove_text(
        self, existing_image: Any = None, output_type: Union[str, OutputType, None] = None
    ) -> Dict[str, Any]:
        return await self._single_image_edit(
            "/api/ai/images/modify/v3/remove-text",
            "Remove Text",
            existing_image,
            output_type,
        )


class ImageUpscale(Endpoint):
    """AI upscaling bounded by a maximum output pixel count."""

    async def v2(
        self,
        existing_image: Any = None,
        scale: Union[int, float] = 2,
        output_type: Union[str, OutputType, None] = None,
    ) -> Dict[str, Any]:
        require_fields([("Image data", existing_image)])
        output = validate_output_type(output_type)

        content = await self._client.read_file(existing_image)
        width, height = image_size(content)
        out_width, out_height = validate_upscale(width, height, scale)
        logger.debug("Image Upscale: %dx%d -> %dx%d", width, height, out_width, out_height)

        return await self._post_form(
            "/api/ai/images/upscale/v2",
            [("existing_image", ("image.jpg", content, "image/jpeg"))],
            action="Image Upscale v2",
            fields={"scale": scale, "output_type": output},
        )
