"""Last-match regex lookup.

Some forms repeat a marker (an ampersand-style check glyph) and only the
final occurrence is the real answer, so the last match wins.
"""

import re


def find_last(text: str, pattern: str, trim_prefix: str) -> str:
    """Return the last match of pattern in text with trim_prefix removed.

    Only the first match of trim_prefix inside the retained match is removed,
    and the result is trimmed. Returns "" when pattern does not match.
    Both patterns run with re.ASCII, so character classes stop at non-ASCII
    letters ("& Société" yields "Soci").
    """
    last = ""
    for match in re.finditer(pattern, text, re.ASCII):
        last = match.group()

    return re.sub(trim_prefix, "", last, count=1, flags=re.ASCII).strip()
