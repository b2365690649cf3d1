"""Checkbox selection on OCR'd forms.

Tesseract and Textract do not report check state. What they do produce is a
short junk token where a ticked box was ("wy", "w", "y", "Y", "Cf", "&"),
while empty boxes come out as "O"/"OQ" or nothing at all. A marked option is
therefore a line fragment that starts with one of the tick tokens.

Option labels sit side by side on the same OCR line, so each line is first
cut into fragments right before every box token (the boundary regex of the
rule), then each fragment is classified by its leading token.
"""

import re
from typing import Optional

from correction_forms.extraction.tag_span import extract_between

# Longer tokens first: "wy" must never be read as "w" or "y".
MARKER_PRIORITY: tuple[str, ...] = ("wy", "w", "y", "Y", "Cf", "&")

# Form timestamps printed inside the option block
_DATE_LINE = re.compile(r"\d{1,2}/\d{1,2}/\d{4}", re.ASCII)


def split_candidates(span: str, boundary_regex: str) -> list[str]:
    """Cut a span into trimmed, non-empty fragments in reading order.

    Lines that are only a date are skipped.
    """
    boundary = re.compile(boundary_regex, re.ASCII)
    candidates: list[str] = []
    for line in span.split("\n"):
        if _DATE_LINE.fullmatch(line.strip()):
            continue
        for segment in boundary.split(line):
            segment = segment.strip()
            if segment:
                candidates.append(segment)
    return candidates


def classify_candidate(candidate: str) -> Optional[str]:
    """Return the tick token a fragment starts with, or None for plain label text."""
    for marker in MARKER_PRIORITY:
        if candidate.startswith(marker):
            return marker
    return None


def resolve_checked(text: str, start_tag: str, end_tag: str, boundary_regex: str) -> str:
    """Return the label of the first ticked option between start_tag and end_tag.

    The tick token is stripped from the label. Returns "" when no fragment in
    the span carries a tick token, including when start_tag is missing.
    """
    span = extract_between(text, start_tag, end_tag)

    # dict keeps first-seen order; a repeated fragment keeps its first position
    marked: dict[str, str] = {}
    for candidate in split_candidates(span, boundary_regex):
        marker = classify_candidate(candidate)
        if marker is not None:
            marked[candidate] = marker

    first = next(iter(marked.items()), None)
    if first is None:
        return ""
    candidate, marker = first
    return candidate[len(marker):].strip()
