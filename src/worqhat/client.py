"""
WorqHat API client.

The client binds one immutable Configuration, owns an httpx.AsyncClient
and routes every remote call through a single retrying request function.
"""

import asyncio
import time
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError

from .ai import AI
from .config import Configuration, get_logger
from .core.remote import (
    build_auth_headers,
    calculate_retry_delay,
    make_api_error,
    normalize_transport_error,
    parse_success_response,
    should_retry_request,
)
from .db import Database
from .exceptions import APIError, ConfigurationError
from .sync import SyncClientMixin
from .uploads import read_as_bytes

logger = get_logger("client")

Result = Union[Dict[str, Any], "TextStream"]


def _resolve_config(
    config: Optional[Configuration], api_key: Optional[str], overrides: Dict[str, Any]
) -> Configuration:
    settings = dict(overrides)
    if api_key is not None:
        settings["api_key"] = api_key

    if config is not None:
        if not settings:
            return config
        # model_copy(update=...) would skip validation
        settings = {**config.model_dump(), **settings}

    try:
        return Configuration(**settings)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        if "api_key" in fields:
            message = "API Key is required"
        else:
            message = f"Invalid configuration: {', '.join(fields)}"
        raise ConfigurationError(message, {"errors": e.errors()}) from e


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class TextStream:
    """Async iterator over the text chunks of a streamed response.

    The response is closed when iteration ends or fails. Callers that stop
    early must call ``aclose()``.
    """

    def __init__(self, response: httpx.Response):
        self._response = response
        self._chunks = response.aiter_text()

    def __aiter__(self) -> "TextStream":
        return self

    async def __anext__(self) -> str:
        try:
            return await self._chunks.__anext__()
        except StopAsyncIteration:
            await self.aclose()
            raise
        except httpx.HTTPError as e:
            await self.aclose()
            raise normalize_transport_error(e) from e

    async def aclose(self) -> None:
        await self._response.aclose()


class WorqHatClient(SyncClientMixin):
    """
    Client for the WorqHat API.

    Examples:
        >>> async with WorqHatClient(api_key="sk-...") as client:
        ...     result = await client.ai.content_generation.v2(question="Hello")
        ...     print(result["content"])

        With an explicit configuration:
        >>> config = Configuration(api_key="sk-...", max_retries=3)
        >>> client = WorqHatClient(config)
    """

    def __init__(
        self,
        config: Optional[Configuration] = None,
        *,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **settings: Any,
    ):
        self.config = _resolve_config(config, api_key, settings)
        if self.config.debug:
            self.config.setup_logging()

        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.timeout),
            headers=build_auth_headers(self.config.api_key),
            transport=transport,
        )

        self.ai = AI(self)
        self.db = Database(self)

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def max_retries(self) -> int:
        return self.config.max_retries

    @property
    def retry_delay(self) -> float:
        return self.config.retry_delay

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def check_authentication(self) -> Dict[str, Any]:
        """Verify the API key against the authentication endpoint."""
        return await self.request("POST", "/authentication", json={}, action="Authentication")

    async def read_file(self, source: Any) -> bytes:
        """Normalize an upload source into raw bytes."""
        return await read_as_bytes(source, timeout=self.config.timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: Optional[Dict[str, Any]] = None,
        files: Any = None,
        stream: bool = False,
        timed: bool = False,
        action: Optional[str] = None,
    ) -> Result:
        """Send a request, retrying failed attempts with exponential backoff.

        Returns the ``{"code": 200, ...}`` envelope, or an async iterator of
        text chunks when ``stream`` is set. The stream holds the connection
        open until it is exhausted or its ``aclose()`` is called.
        With ``timed`` the envelope also carries ``processingTime``, the
        milliseconds spent in this call including retries. Raises an
        APIError subclass once the retries are used up.
        """
        action = action or f"{method} {path}"
        started = time.monotonic()

        for attempt in range(self.max_retries + 1):
            try:
                logger.debug("%s: sending request (attempt %d)", action, attempt + 1)
                result = await self._send(method, path, json, data, files, stream)
                logger.debug("%s: completed successfully", action)
                if timed and isinstance(result, dict):
                    elapsed = int((time.monotonic() - started) * 1000)
                    result = {"code": 200, "processingTime": elapsed, **result}
                return result
            except APIError as e:
                if not should_retry_request(attempt, self.max_retries, e):
                    logger.error(
                        "%s failed after %d attempt(s): %s", action, attempt + 1, e.message
                    )
                    raise

                await self._wait_before_retry(action, attempt, e)

        # This should never be reached due to max_retries check above
        raise RuntimeError("Retry logic exhausted - this should not be reached")

    async def _wait_before_retry(self, action: str, attempt: int, error: APIError) -> None:
        delay = calculate_retry_delay(attempt, self.retry_delay)
        logger.warning(
            "%s failed, retrying (%d) in %.2fs: %s", action, attempt + 1, delay, error.message
        )
        if delay > 0:
            await asyncio.sleep(delay)

    async def _send(
        self,
        method: str,
        path: str,
        json: Any,
        data: Optional[Dict[str, Any]],
        files: Any,
        stream: bool,
    ) -> Result:
        try:
            if stream:
                request = self._client.build_request(
                    method, path, json=json, data=data, files=files
                )
                response = await self._client.send(request, stream=True)
            else:
                response = await self._client.request(
                    method, path, json=json, data=data, files=files
                )
        except (httpx.HTTPError, OSError) as e:
            raise normalize_transport_error(e) from e

        if response.status_code >= 400:
            if stream:
                await response.aread()
                await response.aclose()
            raise make_api_error(
                response.status_code, _response_body(response), response.reason_phrase
            )

        if stream:
            return TextStream(response)

        return parse_success_response(_response_body(response))
