"""Format critique text that uses ``**bold**`` emphasis markers."""

from __future__ import annotations

import re

from resume_roaster.models.fragments import Fragment, Heading, HeadingGroup, Paragraph, TextRun

PARAGRAPH_BREAK = re.compile(r"\n{2,}")
TITLE_PATTERN = re.compile(r"^\*\*([^*]+)\*\*:")
EMPHASIS_PATTERN = re.compile(r"\*\*([^*]+)\*\*")


def parse_emphasis(text: str) -> list[TextRun]:
    """Split text into plain and emphasized runs.

    Markers do not nest; spans are matched left to right and never overlap.
    Unmatched ``**`` stays in the plain text.
    """
    runs: list[TextRun] = []
    pos = 0
    for match in EMPHASIS_PATTERN.finditer(text):
        if match.start() > pos:
            runs.append(TextRun(text=text[pos:match.start()]))
        runs.append(TextRun(text=match.group(1), emphasized=True))
        pos = match.end()
    if pos < len(text):
        runs.append(TextRun(text=text[pos:]))
    return runs


def format_paragraph(paragraph: str) -> Fragment:
    title_match = TITLE_PATTERN.match(paragraph)
    if title_match:
        body = paragraph[title_match.end():].strip()
        return HeadingGroup(
            heading=Heading(text=title_match.group(1)),
            body=Paragraph(segments=parse_emphasis(body)),
        )
    return Paragraph(segments=parse_emphasis(paragraph))


def format_roast(raw_text: str) -> list[Fragment]:
    """Format critique text into headed groups and paragraphs, in order."""
    if not raw_text:
        return []
    paragraphs = (p.strip() for p in PARAGRAPH_BREAK.split(raw_text))
    return [format_paragraph(p) for p in paragraphs if p]
