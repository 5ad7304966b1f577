"""Render display fragments to HTML through autoescaping jinja2 templates."""

from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from resume_roaster.models.fragments import Fragment

HTML_TEMPLATES_DIR = Path(__file__).parent / "html"

# Text from the analysis service is untrusted; autoescape keeps it inert.
_env = Environment(
    loader=FileSystemLoader(str(HTML_TEMPLATES_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_fragments_html(fragments: Sequence[Fragment]) -> str:
    """Render fragments to an HTML snippet."""
    template = _env.get_template("fragments.html")
    return template.render(fragments=fragments)


def render_panel_html(fragments: Sequence[Fragment], title: str = "") -> str:
    """Render fragments inside a styled panel, ready for ``st.markdown``."""
    template = _env.get_template("panel.html")
    return template.render(fragments=fragments, title=title)
