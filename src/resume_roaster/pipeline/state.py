"""UI state machine: pages, upload status and a pure transition function.

``reduce`` has no side effects and knows nothing about Streamlit, so every
transition can be tested on its own. ``Session`` owns the single live
``AppState`` and notifies a callback after each change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict

from resume_roaster.models.documents import AnalysisMode, ResumeDocument, RoastDocument

logger = logging.getLogger(__name__)


class Page(str, Enum):
    LANDING = "landing"
    UPLOAD = "upload"
    RESULT = "result"


class UploadStatus(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class UploadState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: UploadStatus = UploadStatus.IDLE
    resume: ResumeDocument | None = None
    roast: RoastDocument | None = None
    error: str | None = None

    @classmethod
    def idle(cls) -> UploadState:
        return cls()

    @classmethod
    def uploading(cls) -> UploadState:
        return cls(status=UploadStatus.UPLOADING)

    @classmethod
    def succeeded(cls, resume: ResumeDocument, roast: RoastDocument) -> UploadState:
        return cls(status=UploadStatus.SUCCEEDED, resume=resume, roast=roast)

    @classmethod
    def failed(cls, message: str) -> UploadState:
        return cls(status=UploadStatus.FAILED, error=message)

    @property
    def is_uploading(self) -> bool:
        return self.status is UploadStatus.UPLOADING


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Page = Page.LANDING
    mode: AnalysisMode = AnalysisMode.ROAST
    upload: UploadState = UploadState()


# --- Events ---


@dataclass(frozen=True)
class StartRequested:
    pass


@dataclass(frozen=True)
class ModeSelected:
    mode: AnalysisMode


@dataclass(frozen=True)
class UploadStarted:
    mode: AnalysisMode


@dataclass(frozen=True)
class UploadSucceeded:
    resume: ResumeDocument
    roast: RoastDocument


@dataclass(frozen=True)
class UploadFailed:
    message: str


@dataclass(frozen=True)
class UploadCancelled:
    pass


@dataclass(frozen=True)
class ResetRequested:
    pass


Event = Union[
    StartRequested,
    ModeSelected,
    UploadStarted,
    UploadSucceeded,
    UploadFailed,
    UploadCancelled,
    ResetRequested,
]


def reduce(state: AppState, event: Event) -> AppState:
    """Return the state that follows ``event``."""
    if isinstance(event, StartRequested):
        return state.model_copy(update={"page": Page.UPLOAD, "upload": UploadState.idle()})

    if isinstance(event, ModeSelected):
        if state.upload.is_uploading:
            return state
        return state.model_copy(update={"mode": AnalysisMode(event.mode)})

    if isinstance(event, UploadStarted):
        return state.model_copy(
            update={
                "page": Page.UPLOAD,
                "mode": AnalysisMode(event.mode),
                "upload": UploadState.uploading(),
            }
        )

    if isinstance(event, UploadSucceeded):
        return state.model_copy(
            update={
                "page": Page.RESULT,
                "upload": UploadState.succeeded(event.resume, event.roast),
            }
        )

    if isinstance(event, UploadFailed):
        return state.model_copy(
            update={"page": Page.UPLOAD, "upload": UploadState.failed(event.message)}
        )

    if isinstance(event, UploadCancelled):
        if not state.upload.is_uploading:
            return state
        return state.model_copy(update={"upload": UploadState.idle()})

    if isinstance(event, ResetRequested):
        # Mode survives "upload another"
        return AppState(mode=state.mode)

    raise TypeError(f"Unknown event: {event!r}")


class Session:
    """Holds the one live ``AppState`` for a user session."""

    def __init__(
        self,
        state: AppState | None = None,
        on_change: Callable[[AppState], None] | None = None,
    ):
        self.state = state or AppState()
        self.on_change = on_change

    def dispatch(self, event: Event) -> AppState:
        previous = self.state
        self.state = reduce(previous, event)
        logger.debug(
            "%s: %s/%s -> %s/%s",
            type(event).__name__,
            previous.page.value,
            previous.upload.status.value,
            self.state.page.value,
            self.state.upload.status.value,
        )
        if self.on_change and self.state != previous:
            self.on_change(self.state)
        return self.state
