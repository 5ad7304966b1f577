"""Async client for the remote resume analysis service."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from resume_roaster.exceptions import NetworkError, ServerError
from resume_roaster.models.documents import (
    PDF_MEDIA_TYPE,
    AnalysisMode,
    AnalysisResult,
    UploadedResume,
)

logger = logging.getLogger(__name__)


class AnalysisClient:
    """Uploads a resume to ``POST {base_url}/analyze``.

    One request per call, no retries. A timeout is always applied.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def analyze_url(self) -> str:
        return f"{self.base_url}/analyze"

    async def analyze(self, file: UploadedResume, mode: AnalysisMode) -> AnalysisResult:
        """Send the PDF and mode, and return the parsed response.

        Raises:
            ServerError: the service answered with a non-2xx status.
            NetworkError: transport failure, timeout, or malformed body.
        """
        mode = AnalysisMode(mode)
        logger.info("Uploading %s (%d bytes, mode=%s)", file.filename, len(file.data), mode.value)
        files = {"file": (file.filename, file.data, PDF_MEDIA_TYPE)}
        data = {"mode": mode.value}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.analyze_url, files=files, data=data)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error("Analysis service returned HTTP %d", e.response.status_code)
                raise ServerError(e.response.status_code) from e
            except httpx.RequestError as e:
                logger.error("Request to %s failed", self.analyze_url, exc_info=True)
                raise NetworkError(f"Request failed: {e}") from e

        try:
            result = AnalysisResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("Malformed response from analysis service", exc_info=True)
            raise NetworkError(f"Malformed response: {e}") from e

        logger.info(
            "Analysis received: %d chars resume, %d chars feedback",
            len(result.resume_text),
            len(result.feedback),
        )
        return result
