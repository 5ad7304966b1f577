"""Split extracted resume text into titled sections and a contact block."""

from __future__ import annotations

import logging
import re

from resume_roaster.models.documents import ContactBlock, ResumeSection, SegmentedResume

logger = logging.getLogger(__name__)

# Two capitalized words, e.g. "Jane Doe"
NAME_PATTERN = re.compile(r"\b[A-Z][a-z]+\s[A-Z][a-z]+\b")

MAX_HEADER_LENGTH = 30


def is_contact_line(line: str) -> bool:
    """Return True for lines that look like name, email or phone details."""
    return "@" in line or "+" in line or NAME_PATTERN.search(line) is not None


def is_section_header(line: str) -> bool:
    """Return True for short, unindented lines without list or date markers."""
    stripped = line.strip()
    if not stripped or line[0] in (" ", "\t"):
        return False
    if len(stripped) >= MAX_HEADER_LENGTH:
        return False
    if "|" in stripped or "-" in stripped:
        return False
    return not stripped[0].isdigit()


def extract_contact(lines: list[str]) -> tuple[list[str], ContactBlock | None]:
    """Split trailing contact lines off the end of ``lines``.

    Scans backwards and stops at the first line that does not qualify.
    Returns the remaining lines and the contact block, if any.
    """
    cut = len(lines)
    while cut > 0 and is_contact_line(lines[cut - 1]):
        cut -= 1
    if cut == len(lines):
        return lines, None
    return lines[:cut], ContactBlock(lines=lines[cut:])


def segment_resume(raw_text: str) -> SegmentedResume:
    """Segment raw resume text.

    Lines before the first header are dropped. The last section is kept
    only if it collected content; earlier sections are kept even if empty.
    """
    if not raw_text:
        return SegmentedResume()

    lines, contact = extract_contact(raw_text.split("\n"))

    sections: list[ResumeSection] = []
    current: ResumeSection | None = None
    for line in lines:
        if is_section_header(line):
            if current is not None:
                sections.append(current)
            current = ResumeSection(title=line.strip())
        elif current is not None:
            current.content_lines.append(line.strip())

    if current is not None and current.content_lines:
        sections.append(current)

    logger.debug(
        "Segmented resume: %d sections, contact=%s", len(sections), contact is not None
    )
    return SegmentedResume(sections=sections, contact=contact)
