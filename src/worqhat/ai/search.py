"""
Web search backed answers (AlphaSearch).
"""

from typing import Any, Dict, Optional

from ..config import get_logger
from ..core.validation import require_fields
from .base import Endpoint

logger = get_logger("ai.search")

DEFAULT_SEARCH_COUNT = 3


def _strip_timing(result: Dict[str, Any]) -> Dict[str, Any]:
    result.pop("time_taken", None)
    return result


class Search(Endpoint):
    async def v2(self, question: Optional[str] = None, training_data: Optional[str] = None) -> Dict[str, Any]:
        require_fields([("Question", question)])
        logger.debug("Search v2 called with question: %s", question)
        result = await self._post_json(
            "/api/ai/search/v2",
            {"question": question, "training_data": training_data or ""},
            action="Search v2",
            timed=True,
        )
        return _strip_timing(result)

    async def v3(
        self,
        question: Optional[str] = None,
        training_data: Optional[str] = None,
        search_count: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Search with a configurable number of results (default 3)."""
        require_fields([("Question", question)])
        logger.debug("Search v3 called with question: %s", question)
        result = await self._post_json(
            "/api/ai/search/v3",
            {
                "question": question,
                "training_data": training_data or "",
                "search_count": search_count or DEFAULT_SEARCH_COUNT,
            },
            action="Search v3",
            timed=True,
        )
        return _strip_timing(result)
