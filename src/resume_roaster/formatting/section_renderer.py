"""Turn segmented resume sections into display fragments.

Each content line is classified by ``LINE_RULES``, an ordered list of pure
functions. The first rule returning a fragment wins.
"""

from __future__ import annotations

import logging
import re
import warnings
from typing import Callable, Optional

from resume_roaster.exceptions import ParseWarning
from resume_roaster.models.documents import (
    ContactBlock,
    ResumeDocument,
    ResumeSection,
)
from resume_roaster.models.fragments import (
    BulletItem,
    ContactCard,
    Fragment,
    Heading,
    Paragraph,
    TableRow,
    TagList,
)
from resume_roaster.parsers.resume_segmenter import extract_contact, segment_resume

logger = logging.getLogger(__name__)

BULLET = "•"
TAG_SECTIONS = frozenset({"Technical Skills", "Languages", "Certificates"})
LEADING_LETTER = re.compile(r"[A-Za-z]")

LineRule = Callable[[str, str], Optional[Fragment]]


def table_row_rule(line: str, section_title: str) -> TableRow | None:
    """``Engineer | Acme Corp | 2020-2023`` -> title plus details."""
    if "|" not in line:
        return None
    parts = [part.strip() for part in line.split("|")]
    return TableRow(title=parts[0], details=parts[1:])


def bullet_rule(line: str, section_title: str) -> BulletItem | None:
    if line.startswith(BULLET):
        return BulletItem(text=line[len(BULLET):].strip())
    if LEADING_LETTER.match(line) and line.endswith("."):
        return BulletItem(text=line.strip())
    return None


def tag_list_rule(line: str, section_title: str) -> TagList | None:
    if section_title not in TAG_SECTIONS:
        return None
    tags = [tag.strip() for tag in line.split(",")]
    return TagList(tags=[tag for tag in tags if tag])


def paragraph_rule(line: str, section_title: str) -> Paragraph | None:
    if not line.strip():
        return None
    return Paragraph.plain(line)


LINE_RULES: list[LineRule] = [
    table_row_rule,
    bullet_rule,
    tag_list_rule,
    paragraph_rule,
]


def render_line(line: str, section_title: str) -> Fragment | None:
    """Apply ``LINE_RULES`` in order; blank lines render as nothing."""
    if not line.strip():
        return None
    for rule in LINE_RULES:
        fragment = rule(line, section_title)
        if fragment is not None:
            return fragment
    return None


def render_section(section: ResumeSection) -> list[Fragment]:
    fragments: list[Fragment] = [Heading(text=section.title)]
    for line in section.content_lines:
        fragment = render_line(line, section.title)
        if fragment is not None:
            fragments.append(fragment)
    return fragments


def render_contact(contact: ContactBlock) -> ContactCard:
    return ContactCard(name=contact.name, details=contact.details)


def render_resume(document: ResumeDocument) -> list[Fragment]:
    """Render a whole resume: sections in order, then the contact card.

    When no section header is detected, a ``ParseWarning`` is emitted and
    the text left after contact extraction becomes a single paragraph,
    followed by the contact card if one was found.
    """
    if not document.raw_text.strip():
        return []

    segmented = segment_resume(document.raw_text)
    fragments: list[Fragment] = []
    if not segmented.sections:
        body_lines, _ = extract_contact(document.raw_text.split("\n"))
        body = "\n".join(body_lines).strip()
        if body:
            logger.warning("No sections detected in resume text (%d chars)", len(body))
            warnings.warn(
                "No section headers detected; showing raw text",
                ParseWarning,
                stacklevel=2,
            )
            fragments.append(Paragraph.plain(body))

    for section in segmented.sections:
        fragments.extend(render_section(section))
    if segmented.contact is not None:
        fragments.append(render_contact(segmented.contact))
    return fragments
