"""Text between two literal labels on a scanned form."""

from correction_forms.common.models import NOT_FOUND


def extract_between(text: str, start_tag: str, end_tag: str) -> str:
    """Return the trimmed text between the first start_tag and the next end_tag.

    Both tags are matched literally and case-sensitively. If start_tag is
    absent the result is NOT_FOUND; if end_tag does not follow it, the span
    runs to the end of the text.
    """
    start = text.find(start_tag)
    if start == -1:
        return NOT_FOUND

    start += len(start_tag)
    end = text.find(end_tag, start)
    if end == -1:
        end = len(text)

    return text[start:end].strip()
