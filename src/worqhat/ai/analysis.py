"""
Image analysis and face detection / comparison.
"""

from typing import Any, List, Optional, Union

from ..config import get_logger
from ..core.validation import require_fields, validate_choice
from .base import Endpoint, FilePart

logger = get_logger("ai.analysis")

ANALYSIS_OUTPUT_TYPES = ("text", "json")


class ImageAnalysis(Endpoint):
    """
    Vision models for describing images and working with faces.

    ``analyse`` accepts a single image source or a list of them; every image
    is uploaded as its own ``image`` part. With ``stream_data`` set the call
    returns an async iterator of text chunks.
    """

    async def analyse(
        self,
        image: Union[Any, List[Any]] = None,
        question: Optional[str] = None,
        training_data: Optional[str] = None,
        output_type: Optional[str] = None,
        stream_data: bool = False,
    ):
        require_fields([("Image data", image)])
        output = validate_choice("Output type", output_type or "text", ANALYSIS_OUTPUT_TYPES)

        sources = image if isinstance(image, (list, tuple)) else [image]
        parts: List[FilePart] = []
        for index, source in enumerate(sources):
            parts.append(await self._image_part("image", source, filename=f"image{index}.jpg"))

        logger.debug("Image Analysis: uploading %d image(s)", len(parts))
        return await self._post_form(
            "/api/ai/images/v2/image-analysis",
            parts,
            action="Image Analysis",
            fields={
                "output_type": output,
                "question": question,
                "training_data": training_data,
                "stream_data": bool(stream_data),
            },
            stream=bool(stream_data),
        )

    async def detect_faces(self, image: Any = None):
        require_fields([("Image data", image)])
        part = await self._image_part("image", image)
        return await self._post_form(
            "/api/ai/images/v2/face-detection", [part], action="Face Detection"
        )

    async def compare_faces(self, source_image: Any = None, target_image: Any = None):
        require_fields(
            [("Source image data", source_image), ("Target image data", target_image)]
        )
        source = await self._image_part("source_image", source_image, filename="source.jpg")
        target = await self._image_part("target_image", target_image, filename="target.jpg")
        return await self._post_form(
            "/api/ai/images/v2/facial-comparison", [source, target], action="Facial Comparison"
        )
