"""Upload orchestrator - owns the single in-flight analysis request."""

from __future__ import annotations

import asyncio
import logging

from resume_roaster.clients.analysis_client import AnalysisClient
from resume_roaster.exceptions import UPLOAD_FAILED_MESSAGE, InvalidFileType, RoasterError
from resume_roaster.models.documents import (
    AnalysisMode,
    AnalysisResult,
    ResumeDocument,
    RoastDocument,
    UploadedResume,
)
from resume_roaster.pipeline.state import (
    Session,
    UploadCancelled,
    UploadFailed,
    UploadStarted,
    UploadSucceeded,
)

logger = logging.getLogger(__name__)


class UploadOrchestrator:
    """Validates the file, sends it, and drives ``Session`` transitions.

    Starting a new upload cancels the one in flight; only the latest
    request may update the session.
    """

    def __init__(self, client: AnalysisClient, session: Session):
        self.client = client
        self.session = session
        self._inflight: asyncio.Task | None = None

    @property
    def is_uploading(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def submit(
        self,
        file: UploadedResume | None,
        mode: AnalysisMode = AnalysisMode.ROAST,
    ) -> AnalysisResult:
        """Upload ``file`` for analysis in ``mode``.

        Raises:
            InvalidFileType: no file, or not declared as a PDF. No request
                is made and any upload in flight is cancelled.
            ServerError, NetworkError: from the client. The session is left
                in the failed state.
            asyncio.CancelledError: a newer submit or ``cancel()`` took over.
        """
        if file is None or not file.is_pdf:
            err = InvalidFileType(
                f"Expected application/pdf, got {file.content_type if file else None}"
            )
            logger.warning("Rejected upload: %s", err)
            self._cancel_inflight()
            self.session.dispatch(UploadFailed(err.user_message))
            raise err

        mode = AnalysisMode(mode)
        self._cancel_inflight()
        self.session.dispatch(UploadStarted(mode))

        task = asyncio.ensure_future(self.client.analyze(file, mode))
        self._inflight = task
        try:
            result = await task
        except asyncio.CancelledError:
            logger.info("Upload of %s cancelled", file.filename)
            if self._inflight is task:
                # Cancelled from outside (wait_for, shutdown), not superseded
                task.cancel()
                self._inflight = None
                self.session.dispatch(UploadCancelled())
            raise
        except Exception as e:
            if not isinstance(e, RoasterError):
                logger.error("Unexpected upload failure", exc_info=True)
            if self._inflight is task:
                message = e.user_message if isinstance(e, RoasterError) else UPLOAD_FAILED_MESSAGE
                self.session.dispatch(UploadFailed(message))
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

        if task is not self._inflight and self._inflight is not None:
            # A newer submit owns the session now.
            raise asyncio.CancelledError()

        self.session.dispatch(
            UploadSucceeded(
                resume=ResumeDocument(raw_text=result.resume_text),
                roast=RoastDocument(raw_text=result.feedback),
            )
        )
        return result

    def cancel(self) -> None:
        """Abort the in-flight request, if any, and return to idle."""
        if self._cancel_inflight():
            self.session.dispatch(UploadCancelled())

    def _cancel_inflight(self) -> bool:
        if self.is_uploading:
            self._inflight.cancel()
            self._inflight = None
            return True
        return False
