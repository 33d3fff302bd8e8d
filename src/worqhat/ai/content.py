"""
Content generation models (AiCon).
"""

from typing import Any, Dict, List, Optional

from ..config import get_logger
from ..core.validation import require_fields, validate_choice
from .base import Endpoint

logger = get_logger("ai.content")

DEFAULT_RANDOMNESS = 0.2
RESPONSE_TYPES = ("json", "text")


def build_content_payload(
    question: str,
    conversation_history: Optional[List[Dict[str, Any]]] = None,
    preserve_history: bool = False,
    training_data: Optional[str] = None,
    randomness: Optional[float] = None,
    stream_data: bool = False,
    response_type: str = "json",
) -> Dict[str, Any]:
    """Build the JSON body shared by the AiCon v2 / v3 models."""
    return {
        "question": question,
        "history_object": list(conversation_history or []),
        "preserve_history": bool(preserve_history),
        "training_data": training_data or "",
        "randomness": DEFAULT_RANDOMNESS if randomness is None else randomness,
        "stream_data": bool(stream_data),
        "response_type": validate_choice("Response type", response_type, RESPONSE_TYPES),
    }


class ContentGeneration(Endpoint):
    """
    Text generation with the AiCon family of models.

    ``v2`` targets business content, ``v3`` creative and situational
    content, ``alpha`` uses recent data and ``large`` answers on top of a
    trained dataset. When ``stream_data`` is set the call returns an async
    iterator of text chunks instead of the response envelope.
    """

    async def _generate(self, version: str, question: Optional[str], **options: Any):
        logger.debug("AiCon %s called with question: %s", version, question)
        require_fields([("Question", question)])
        body = build_content_payload(question, **options)
        return await self._post_json(
            f"/api/ai/content/{version}",
            body,
            action=f"AiCon {version}",
            stream=body["stream_data"],
            timed=True,
        )

    async def v2(
        self,
        question: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, Any]]] = None,
        preserve_history: bool = False,
        training_data: Optional[str] = None,
        randomness: Optional[float] = None,
        stream_data: bool = False,
        response_type: str = "json",
    ):
        return await self._generate(
            "v2",
            question,
            conversation_history=conversation_history,
            preserve_history=preserve_history,
            training_data=training_data,
            randomness=randomness,
            stream_data=stream_data,
            response_type=response_type,
        )

    async def v3(
        self,
        question: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, Any]]] = None,
        preserve_history: bool = False,
        training_data: Optional[str] = None,
        randomness: Optional[float] = None,
        stream_data: bool = False,
        response_type: str = "json",
    ):
        return await self._generate(
            "v3",
            question,
            conversation_history=conversation_history,
            preserve_history=preserve_history,
            training_data=training_data,
            randomness=randomness,
            stream_data=stream_data,
            response_type=response_type,
        )

    async def alpha(self, question: Optional[str] = None) -> Dict[str, Any]:
        """Content generation backed by the 2023 data snapshot."""
        require_fields([("Question", question)])
        return await self._post_json(
            "/api/ai/content/v2/new/alpha",
            {"question": question},
            action="AiCon v2 Alpha",
            timed=True,
        )

    async def large(
        self,
        dataset_id: Optional[str] = None,
        question: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, Any]]] = None,
        preserve_history: bool = False,
        instructions: Optional[str] = None,
        randomness: Optional[float] = None,
        stream_data: bool = False,
        response_type: str = "json",
    ):
        """Answer a question using a custom trained dataset."""
        require_fields([("Question", question), ("Dataset ID", dataset_id)])

        body = build_content_payload(
            question,
            conversation_history=conversation_history,
            preserve_history=preserve_history,
            randomness=randomness,
            stream_data=stream_data,
            response_type=response_type,
        )
        del body["training_data"]
        body["datasetId"] = dataset_id
        body["instructions"] = instructions or ""

        return await self._post_json(
            "/api/ai/content/v2-large/answering",
            body,
            action="AiCon v2 Large",
            stream=body["stream_data"],
            timed=True,
        )
