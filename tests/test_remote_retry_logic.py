"""
Test retry mechanism of the client.

Every remote failure goes through one retry loop: N configured retries
mean N + 1 attempts, with exponential backoff between them.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from worqhat import WorqHatClient
from worqhat.exceptions import (
    BadRequestError,
    InternalServerError,
    InvalidInputError,
    NetworkError,
)
from tests.helpers.http import mock_response


class TestRemoteRetryLogic:
    @pytest.fixture
    def client_with_retries(self):
        return WorqHatClient(api_key="test-api-key", max_retries=3, retry_delay=0)

    @pytest.fixture
    def client_no_retries(self):
        return WorqHatClient(api_key="test-api-key", max_retries=0, retry_delay=0)

    @pytest.mark.asyncio
    async def test_retry_on_transient_failure(self, client_with_retries):
        """Two failures followed by a success give three attempts."""
        responses = [
            mock_response(500, {"message": "busy"}, reason_phrase="Internal Server Error"),
            mock_response(502, {"message": "busy"}, reason_phrase="Bad Gateway"),
            mock_response(200, {"content": "Paris"}),
        ]

        with patch.object(client_with_retries._client, "request", side_effect=responses) as mocked:
            result = await client_with_retries.ai.content_generation.v2(question="Capital?")

        assert result.pop("processingTime") >= 0
        assert result == {"code": 200, "content": "Paris"}
        assert mocked.call_count == 3

    @pytest.mark.asyncio
    async def test_retry_exhaustion_makes_n_plus_one_attempts(self, client_with_retries):
        error = mock_response(503, {"message": "Service unavailable"}, reason_phrase="Service Unavailable")

        with patch.object(client_with_retries._client, "request", return_value=error) as mocked:
            with pytest.raises(InternalServerError) as exc_info:
                await client_with_retries.ai.search.v2(question="Anything")

        assert mocked.call_count == 4
        assert exc_info.value.status == 503
        assert exc_info.value.message == "Service unavailable"

    @pytest.mark.asyncio
    async def test_client_errors_are_retried(self, client_with_retries):
        error = mock_response(400, {"message": "Bad question"}, reason_phrase="Bad Request")

        with patch.object(client_with_retries._client, "request", return_value=error) as mocked:
            with pytest.raises(BadRequestError):
                await client_with_retries.ai.moderation.content(text_content="hello")

        assert mocked.call_count == 4

    @pytest.mark.asyncio
    async def test_transport_errors_are_retried(self, client_with_retries):
        side_effect = [httpx.ConnectError("refused"), mock_response(200, {"ok": True})]

        with patch.object(client_with_retries._client, "request", side_effect=side_effect) as mocked:
            result = await client_with_retries.check_authentication()

        assert result == {"code": 200, "ok": True}
        assert mocked.call_count == 2

    @pytest.mark.asyncio
    async def test_no_retries(self, client_no_retries):
        with patch.object(
            client_no_retries._client, "request", side_effect=httpx.ConnectError("refused")
        ) as mocked:
            with pytest.raises(NetworkError):
                await client_no_retries.check_authentication()

        assert mocked.call_count == 1

    @pytest.mark.asyncio
    async def test_validation_errors_never_reach_network(self, client_with_retries):
        with patch.object(client_with_retries._client, "request") as mocked:
            with pytest.raises(InvalidInputError, match="Question is required"):
                await client_with_retries.ai.content_generation.v2()

        mocked.assert_not_called()

    @pytest.mark.asyncio
    async def test_exponential_backoff_delays(self):
        client = WorqHatClient(api_key="test-api-key", max_retries=2, retry_delay=0.5)
        error = mock_response(500, {"message": "down"}, reason_phrase="Internal Server Error")

        with patch.object(client._client, "request", return_value=error):
            with patch("worqhat.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
                with pytest.raises(InternalServerError):
                    await client.check_authentication()

        assert [c.args[0] for c in sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_zero_delay_skips_sleep(self, client_with_retries):
        error = mock_response(500, {"message": "down"}, reason_phrase="Internal Server Error")

        with patch.object(client_with_retries._client, "request", return_value=error):
            with patch("worqhat.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
                with pytest.raises(InternalServerError):
                    await client_with_retries.check_authentication()

        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retried_call_is_idempotent(self, client_with_retries):
        """Each attempt sends the same request."""
        responses = [
            mock_response(500, {"message": "busy"}, reason_phrase="Internal Server Error"),
            mock_response(200, {"content": "ok"}),
        ]

        with patch.object(client_with_retries._client, "request", side_effect=responses) as mocked:
            await client_with_retries.ai.search.v3(question="q", search_count=5)

        first, second = mocked.call_args_list
        assert first == second
        assert first.args == ("POST", "/api/ai/search/v3")
