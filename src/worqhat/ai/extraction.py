"""
Text extraction from web pages, PDFs, images and speech.
"""

from typing import Any, Dict, Optional

from ..config import get_logger
from ..core.validation import require_fields, validate_choice
from .base import Endpoint

logger = get_logger("ai.extraction")

IMAGE_OUTPUT_TYPES = ("json", "text")


class TextExtraction(Endpoint):
    async def web(
        self,
        url_path: Optional[str] = None,
        code_blocks: bool = False,
        headline: bool = False,
        inline_code: bool = False,
        references: bool = False,
        tables: bool = False,
    ) -> Dict[str, Any]:
        """Extract the readable text of a web page, optionally keeping markup elements."""
        require_fields([("URL", url_path)])
        logger.debug("Web Extraction: %s", url_path)
        return await self._post_json(
            "/api/ai/v2/web-extract",
            {
                "code_blocks": bool(code_blocks),
                "headline": bool(headline),
                "inline_code": bool(inline_code),
                "references": bool(references),
                "tables": bool(tables),
                "url_path": url_path,
            },
            action="Web Extraction",
        )

    async def pdf(self, file: Any = None) -> Dict[str, Any]:
        require_fields([("File", file)])
        content = await self._client.read_file(file)
        return await self._post_form(
            "/api/ai/v2/pdf-extract",
            [("file", ("file.pdf", content, "application/pdf"))],
            action="PDF Extraction",
        )

    async def image(self, image: Any = None, output_type: Optional[str] = None) -> Dict[str, Any]:
        require_fields([("Image data", image)])
        output = validate_choice("Output type", output_type or "json", IMAGE_OUTPUT_TYPES)
        part = await self._image_part("image", image)
        return await self._post_form(
            "/api/ai/images/v2/image-text-detection",
            [part],
            action="Image Text Extraction",
            fields={"output_type": output},
        )

    async def speech(self, audio: Any = None) -> Dict[str, Any]:
        """Transcribe an audio file; the MIME type follows its extension."""
        require_fields([("Audio data", audio)])
        part = await self._file_part("audio", audio, "audio.mp3", "audio/mpeg")
        logger.debug("Speech Extraction: uploading %s as %s", part[1][0], part[1][2])
        return await self._post_form("/api/ai/speech-text", [part], action="Speech Extraction")
