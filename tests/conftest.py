"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from resume_roaster.clients.analysis_client import AnalysisClient
from resume_roaster.models.documents import AnalysisResult, UploadedResume
from resume_roaster.pipeline.state import Session


@pytest.fixture
def sample_resume_text() -> str:
    return """Profile
Backend engineer with eight years of experience.
Experience
Senior Engineer | Acme Corp | 2020-2023
• Led migration of billing services to Kubernetes
Reduced p99 latency by 40% across all services.
  Mentored four junior engineers
Technical Skills
Go, Rust, TypeScript, Python, Kubernetes
Languages
English (native), German (B2), French
Jane Doe
jane.doe@example.com
+1 555 0100"""


@pytest.fixture
def sample_roast_text() -> str:
    return (
        "**Summary**: Your resume reads like a **grocery list**.\n\n"
        "You over-used adjectives.\n\n\n"
        "**Verdict**:Fix the **bullets** and **metrics**."
    )


@pytest.fixture
def pdf_file() -> UploadedResume:
    return UploadedResume(
        filename="resume.pdf",
        content_type="application/pdf",
        data=b"%PDF-1.4\n%fake\n",
    )


@pytest.fixture
def analysis_result() -> AnalysisResult:
    return AnalysisResult(
        resume_text="Experience\nEngineer | Acme Corp | 2020-2023",
        feedback="**Summary**:Great start.",
    )


@pytest.fixture
def mock_analysis_client(analysis_result) -> AsyncMock:
    client = AsyncMock(spec=AnalysisClient)
    client.analyze.return_value = analysis_result
    return client


@pytest.fixture
def session() -> Session:
    return Session()
