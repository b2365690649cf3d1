"""Field rule definitions for each correction form type.

A form type is described entirely by data: an ordered list of FieldRule
entries, each naming one output field and the extraction method that fills
it. The mapper walks the list; adding a form type means adding a schema
module under forms/, not a new code path.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..common.models import ExtractedFields


class ExtractionMethod(str, Enum):
    """Methods for pulling a field value out of OCR text."""

    TAG_SPAN = "tag_span"  # Text between two literal labels
    CHECKBOX = "checkbox"  # Marked option among several in a tag span
    REGEX = "regex"  # Last regex match, prefix stripped
    CONSTANT = "constant"  # Fixed value for the form type


@dataclass(frozen=True)
class FieldRule:
    """Definition of how to fill a single output field."""

    field: str  # ExtractedFields attribute name
    method: ExtractionMethod
    start_tag: Optional[str] = None
    end_tag: Optional[str] = None
    boundary_regex: Optional[str] = None  # Split points before checkbox markers
    pattern: Optional[str] = None
    trim_prefix: Optional[str] = None
    constant: Optional[str] = None
    # REGEX only: when the result equals fallback_value, take the tag span
    # fallback_start_tag..fallback_end_tag of the same scope instead.
    fallback_value: Optional[str] = None
    fallback_start_tag: Optional[str] = None
    fallback_end_tag: Optional[str] = None

    def __post_init__(self) -> None:
        if self.field not in ExtractedFields.field_names():
            raise ValueError(f"Unknown output field '{self.field}'")
        if self.field == "request_date":
            raise ValueError("request_date is stamped by the mapper, not extracted")

        if self.method in (ExtractionMethod.TAG_SPAN, ExtractionMethod.CHECKBOX):
            if self.start_tag is None or self.end_tag is None:
                raise ValueError(
                    f"{self.method.value} rule for '{self.field}' needs start_tag and end_tag"
                )
        if self.method == ExtractionMethod.CHECKBOX:
            _require_regex(self.field, "boundary_regex", self.boundary_regex)
        if self.method == ExtractionMethod.REGEX:
            _require_regex(self.field, "pattern", self.pattern)
            _require_regex(self.field, "trim_prefix", self.trim_prefix)
            if self.start_tag is not None and self.end_tag is None:
                raise ValueError(f"regex rule for '{self.field}' has a start_tag but no end_tag")
            if self.fallback_value is not None and (
                self.fallback_start_tag is None or self.fallback_end_tag is None
            ):
                raise ValueError(
                    f"regex rule for '{self.field}' needs fallback_start_tag and fallback_end_tag"
                )
        if self.method == ExtractionMethod.CONSTANT and self.constant is None:
            raise ValueError(f"constant rule for '{self.field}' needs a constant")


def _require_regex(field_name: str, param: str, value: Optional[str]) -> None:
    if value is None:
        raise ValueError(f"Rule for '{field_name}' needs {param}")
    try:
        re.compile(value, re.ASCII)
    except re.error as e:
        raise ValueError(f"Rule for '{field_name}' has an invalid {param}: {e}") from e


@dataclass(frozen=True)
class FormSchema:
    """Complete extraction schema for one form type."""

    form_type: str  # Form-type code, e.g. "01721"
    name: str
    description: str
    rules: tuple[FieldRule, ...]

    def __post_init__(self) -> None:
        if not self.form_type:
            raise ValueError("form_type is required")
        seen: set[str] = set()
        for rule in self.rules:
            if rule.field in seen:
                raise ValueError(
                    f"Form {self.form_type} declares field '{rule.field}' more than once"
                )
            seen.add(rule.field)

    @property
    def field_names(self) -> list[str]:
        return [rule.field for rule in self.rules]


def tag_span(field: str, start_tag: str, end_tag: str) -> FieldRule:
    return FieldRule(field, ExtractionMethod.TAG_SPAN, start_tag=start_tag, end_tag=end_tag)


def checkbox(field: str, start_tag: str, end_tag: str, boundary_regex: str) -> FieldRule:
    return FieldRule(
        field,
        ExtractionMethod.CHECKBOX,
        start_tag=start_tag,
        end_tag=end_tag,
        boundary_regex=boundary_regex,
    )


def constant(field: str, value: str) -> FieldRule:
    return FieldRule(field, ExtractionMethod.CONSTANT, constant=value)
