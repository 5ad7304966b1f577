"""Pydantic models for the resume, the critique and the upload payload."""

from __future__ import annotations

import mimetypes
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

PDF_MEDIA_TYPE = "application/pdf"


class AnalysisMode(str, Enum):
    """Critique style requested from the analysis service."""

    ROAST = "roast"
    PROFESSIONAL = "professional"

    @property
    def result_title(self) -> str:
        if self is AnalysisMode.ROAST:
            return "Your Resume Got Flame-Grilled"
        return "Your Resume Review"

    @property
    def feedback_title(self) -> str:
        if self is AnalysisMode.ROAST:
            return "The Roast"
        return "Professional Feedback"

    @property
    def icon(self) -> str:
        return "🔥" if self is AnalysisMode.ROAST else "🎯"

    @property
    def label(self) -> str:
        if self is AnalysisMode.ROAST:
            return "🔥 Roast Mode"
        return "🎯 Professional Mode"


class ResumeDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str


class RoastDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str

    @property
    def plain_text(self) -> str:
        """Clipboard form of the critique: the raw text, untouched."""
        return self.raw_text


class ResumeSection(BaseModel):
    title: str
    content_lines: list[str] = []


class ContactBlock(BaseModel):
    lines: list[str]

    @property
    def name(self) -> str:
        return self.lines[0] if self.lines else ""

    @property
    def details(self) -> list[str]:
        return self.lines[1:]


class SegmentedResume(BaseModel):
    sections: list[ResumeSection] = []
    contact: ContactBlock | None = None

    @property
    def is_empty(self) -> bool:
        return not self.sections and self.contact is None


class UploadedResume(BaseModel):
    """A file selected in the UI, ready to be sent."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content_type: str | None = None
    data: bytes

    @property
    def is_pdf(self) -> bool:
        return self.content_type == PDF_MEDIA_TYPE

    @classmethod
    def from_path(cls, path: str | Path) -> UploadedResume:
        """Read a file from disk, guessing its media type from the suffix."""
        p = Path(path)
        content_type, _ = mimetypes.guess_type(p.name)
        return cls(filename=p.name, content_type=content_type, data=p.read_bytes())


class AnalysisResult(BaseModel):
    """JSON body returned by ``POST /analyze``."""

    resume_text: str
    feedback: str
