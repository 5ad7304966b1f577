"""Fragment builders for the resume and critique panels."""

from resume_roaster.formatting.roast_formatter import format_roast, parse_emphasis
from resume_roaster.formatting.section_renderer import (
    LINE_RULES,
    render_contact,
    render_line,
    render_resume,
    render_section,
)

__all__ = [
    "LINE_RULES",
    "format_roast",
    "parse_emphasis",
    "render_contact",
    "render_line",
    "render_resume",
    "render_section",
]
