"""Data models for the resume roaster."""

from resume_roaster.models.documents import (
    AnalysisMode,
    AnalysisResult,
    ContactBlock,
    ResumeDocument,
    ResumeSection,
    RoastDocument,
    SegmentedResume,
    UploadedResume,
)
from resume_roaster.models.fragments import (
    BulletItem,
    ContactCard,
    Fragment,
    Heading,
    HeadingGroup,
    Paragraph,
    TableRow,
    TagList,
    TextRun,
)

__all__ = [
    "AnalysisMode",
    "AnalysisResult",
    "BulletItem",
    "ContactBlock",
    "ContactCard",
    "Fragment",
    "Heading",
    "HeadingGroup",
    "Paragraph",
    "ResumeDocument",
    "ResumeSection",
    "RoastDocument",
    "SegmentedResume",
    "TableRow",
    "TagList",
    "TextRun",
    "UploadedResume",
]
