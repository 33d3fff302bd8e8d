from typing import Any, Dict, Optional

from ..config import get_logger
from ..core.validation import require_fields
from .base import Endpoint

logger = get_logger("ai.moderation")


class Moderation(Endpoint):
    """Text and image content moderation."""

    async def content(self, text_content: Optional[str] = None) -> Dict[str, Any]:
        require_fields([("Text Content", text_content)])
        logger.debug("Content Moderation called with text: %s", text_content)
        return await self._post_json(
            "/api/ai/content-moderation/v1",
            {"text_content": text_content},
            action="Content Moderation",
            timed=True,
        )

    async def image(self, image: Any = None) -> Dict[str, Any]:
        require_fields([("Image data", image)])
        part = await self._image_part("image", image)
        return await self._post_form(
            "/api/ai/images/v2/image-moderation",
            [part],
            action="Image Moderation",
            timed=True,
        )
