"""Streamlit Web UI for resume-roaster.

Three views driven by the session state machine:
  landing -> upload (PDF + mode) -> result (critique | reformatted resume)
"""

from __future__ import annotations

import asyncio
import logging
import os
import warnings

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets -> os.environ so load_config can read it
for key in ("RESUME_ROASTER_API_URL",):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from resume_roaster.clients.analysis_client import AnalysisClient
from resume_roaster.config import load_config
from resume_roaster.exceptions import ParseWarning, RoasterError
from resume_roaster.formatting import format_roast, render_resume
from resume_roaster.models.documents import AnalysisMode, UploadedResume
from resume_roaster.pipeline.orchestrator import UploadOrchestrator
from resume_roaster.pipeline.state import (
    ModeSelected,
    Page,
    ResetRequested,
    Session,
    StartRequested,
)
from resume_roaster.templates.renderer import render_panel_html

TESTIMONIALS = [
    ("A Developer", "My resume cried. 10/10."),
    ("HR Manager", "Savage but accurate. I hired the person after they fixed everything."),
    ("Recent Grad", "I didn't know my resume was that bad. Now I do."),
]

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Resume Roaster",
    page_icon=":fire:",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session wiring
# ---------------------------------------------------------------------------


def _get_config():
    return load_config()


def _get_session() -> Session:
    if "session" not in st.session_state:
        st.session_state.session = Session()
    return st.session_state.session


def _get_orchestrator() -> UploadOrchestrator:
    if "orchestrator" not in st.session_state:
        config = _get_config()
        client = AnalysisClient(
            config.service.base_url,
            timeout=config.service.timeout,
        )
        st.session_state.orchestrator = UploadOrchestrator(client, _get_session())
    return st.session_state.orchestrator


def _dispatch(event) -> None:
    _get_session().dispatch(event)
    st.rerun()


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


def _landing_page():
    st.markdown(
        "<h2 style='text-align:center'>Think your resume's fire?<br/>"
        "Let us roast it anyway.</h2>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "<p style='text-align:center'>Upload your resume and get a brutally honest, "
        "yet strangely helpful critique. It might hurt, but so does rejection emails.</p>",
        unsafe_allow_html=True,
    )
    if st.button("Upload & Get Roasted", type="primary", use_container_width=True):
        _dispatch(StartRequested())

    st.divider()
    for col, (name, quote) in zip(st.columns(len(TESTIMONIALS)), TESTIMONIALS):
        with col, st.container(border=True):
            st.markdown(f"*\"{quote}\"*")
            st.caption(f"- {name}")


def _upload_page():
    session = _get_session()
    state = session.state
    config = _get_config()

    st.header("Upload Your Resume")

    uploaded = st.file_uploader(
        "Drag & drop your resume here, or browse",
        type=["pdf"],
        help="PDF files only, please.",
    )
    if uploaded is not None:
        if uploaded.size > config.upload.max_file_bytes:
            st.error(f"Resume file exceeds {config.upload.max_file_mb}MB.")
            st.stop()
        st.success(f"{uploaded.name} - Ready to roast!")

    if state.upload.error:
        st.error(state.upload.error)

    modes = list(AnalysisMode)
    selected = st.radio(
        "Mode",
        modes,
        index=modes.index(state.mode),
        format_func=lambda m: m.label,
        horizontal=True,
        disabled=state.upload.is_uploading,
    )
    if selected != state.mode:
        _dispatch(ModeSelected(selected))

    if st.button(
        "Roast Me",
        type="primary",
        disabled=uploaded is None or state.upload.is_uploading,
    ):
        file = UploadedResume(
            filename=uploaded.name,
            content_type=uploaded.type,
            data=uploaded.getvalue(),
        )
        orchestrator = _get_orchestrator()
        with st.spinner("Analyzing Resume..."):
            try:
                asyncio.run(orchestrator.submit(file, state.mode))
            except RoasterError:
                logger.exception("Resume upload failed")
            except asyncio.CancelledError:
                logger.info("Resume upload superseded")
        st.rerun()


def _result_page():
    state = _get_session().state
    mode = state.mode
    resume = state.upload.resume
    roast = state.upload.roast

    st.header(mode.result_title)

    col_roast, col_resume = st.columns(2)
    with col_roast:
        st.subheader(f"{mode.icon} {mode.feedback_title}")
        st.html(render_panel_html(format_roast(roast.raw_text)))
        with st.expander("Copy to clipboard"):
            st.code(roast.plain_text, language=None, wrap_lines=True)
        st.download_button(
            label="Download critique (.txt)",
            data=roast.plain_text.encode("utf-8"),
            file_name="resume_roast.txt",
            mime="text/plain",
            type="secondary",
        )

    with col_resume:
        st.subheader("Your Resume")
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ParseWarning)
            resume_fragments = render_resume(resume)
        if caught:
            st.caption("Couldn't detect resume sections; showing the extracted text as-is.")
        st.html(render_panel_html(resume_fragments))

    st.divider()
    if st.button("Upload Another Resume", type="primary"):
        _get_orchestrator().cancel()
        _dispatch(ResetRequested())


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

st.title(":fire: Resume Roaster")

page = _get_session().state.page
if page is Page.LANDING:
    _landing_page()
elif page is Page.UPLOAD:
    _upload_page()
else:
    _result_page()

st.caption("Resume Roaster - Burning bad resumes since 2025")
