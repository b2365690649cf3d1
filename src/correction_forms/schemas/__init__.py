"""Correction form extraction schemas."""

from .rules import (
    ExtractionMethod,
    FieldRule,
    FormSchema,
)
from .registry import (
    get_schema,
    find_schema,
    get_all_schemas,
    get_form_type_codes,
)

__all__ = [
    # Rules
    "ExtractionMethod",
    "FieldRule",
    "FormSchema",
    # Registry
    "get_schema",
    "find_schema",
    "get_all_schemas",
    "get_form_type_codes",
]
