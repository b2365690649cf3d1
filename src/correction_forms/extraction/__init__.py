"""Field extraction primitives and the per-form mapper.

Every function here is a pure function of its text input. Missing labels
and unmarked checkboxes come back as NOT_FOUND or "", never as exceptions.
"""

from .tag_span import extract_between
from .regex_finder import find_last
from .checkbox import resolve_checked, split_candidates, classify_candidate, MARKER_PRIORITY
from .mapper import map_fields, apply_rule, format_request_date

__all__ = [
    "extract_between",
    "find_last",
    "resolve_checked",
    "split_candidates",
    "classify_candidate",
    "MARKER_PRIORITY",
    "map_fields",
    "apply_rule",
    "format_request_date",
]
