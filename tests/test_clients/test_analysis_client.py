"""Tests for AnalysisClient (remote analysis service wrapper)."""

from __future__ import annotations

import httpx
import pytest

from resume_roaster.clients.analysis_client import AnalysisClient
from resume_roaster.exceptions import NetworkError, ServerError
from resume_roaster.models.documents import AnalysisMode, AnalysisResult

BASE_URL = "https://roast.example.com"


def _client(handler) -> AnalysisClient:
    return AnalysisClient(BASE_URL, timeout=5, transport=httpx.MockTransport(handler))


class TestAnalysisClientRequest:
    @pytest.mark.asyncio
    async def test_posts_multipart_to_analyze(self, pdf_file):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"resume_text": "r", "feedback": "f"})

        await _client(handler).analyze(pdf_file, AnalysisMode.PROFESSIONAL)

        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/analyze"
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.content
        assert b'name="mode"' in body
        assert b"professional" in body
        assert b'name="file"; filename="resume.pdf"' in body
        assert b"application/pdf" in body
        assert pdf_file.data in body

    def test_trailing_slash_in_base_url(self):
        client = AnalysisClient(BASE_URL + "/")
        assert client.analyze_url == f"{BASE_URL}/analyze"

    @pytest.mark.asyncio
    async def test_accepts_plain_string_mode(self, pdf_file):
        def handler(request: httpx.Request) -> httpx.Response:
            assert b"roast" in request.content
            return httpx.Response(200, json={"resume_text": "r", "feedback": "f"})

        result = await _client(handler).analyze(pdf_file, "roast")
        assert result.feedback == "f"


class TestAnalysisClientResponses:
    @pytest.mark.asyncio
    async def test_returns_parsed_result(self, pdf_file):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"resume_text": "Experience", "feedback": "**Summary**:ok"}
            )

        result = await _client(handler).analyze(pdf_file, AnalysisMode.ROAST)
        assert result == AnalysisResult(resume_text="Experience", feedback="**Summary**:ok")

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    @pytest.mark.asyncio
    async def test_non_2xx_raises_server_error(self, pdf_file, status):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text="nope")

        with pytest.raises(ServerError) as exc_info:
            await _client(handler).analyze(pdf_file, AnalysisMode.ROAST)
        assert exc_info.value.status_code == status
        assert exc_info.value.user_message

    @pytest.mark.asyncio
    async def test_connection_error_raises_network_error(self, pdf_file):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(NetworkError):
            await _client(handler).analyze(pdf_file, AnalysisMode.ROAST)

    @pytest.mark.asyncio
    async def test_timeout_raises_network_error(self, pdf_file):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(NetworkError):
            await _client(handler).analyze(pdf_file, AnalysisMode.ROAST)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_network_error(self, pdf_file):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(NetworkError, match="Malformed response"):
            await _client(handler).analyze(pdf_file, AnalysisMode.ROAST)

    @pytest.mark.asyncio
    async def test_missing_fields_raise_network_error(self, pdf_file):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"feedback": "only feedback"})

        with pytest.raises(NetworkError):
            await _client(handler).analyze(pdf_file, AnalysisMode.ROAST)
