"""Field Mapper - turns one form's OCR text into ExtractedFields.

Looks up the rule table for the form-type code and runs each rule in
declared order. Unknown form types are not an error: the caller is
iterating a batch and must keep going, so they yield a record whose fields
are all NOT_FOUND apart from the request date.
"""

from datetime import date
from typing import Optional

from correction_forms.common.models import ExtractedFields
from correction_forms.extraction.checkbox import resolve_checked
from correction_forms.extraction.regex_finder import find_last
from correction_forms.extraction.tag_span import extract_between
from correction_forms.schemas.registry import find_schema
from correction_forms.schemas.rules import ExtractionMethod, FieldRule


def format_request_date(day: date, legacy: bool = False) -> str:
    """Format the request date as MM/DD/YYYY.

    legacy=True reproduces the downstream format the first generation of this
    job wrote, with the year zero-padded to five digits (10/16/02026).
    """
    if legacy:
        return f"{day:%m/%d}/{day.year:05d}"
    return f"{day:%m/%d/%Y}"


def apply_rule(text: str, rule: FieldRule) -> str:
    """Run a single field rule against OCR text."""
    if rule.method == ExtractionMethod.CONSTANT:
        return rule.constant

    if rule.method == ExtractionMethod.TAG_SPAN:
        return extract_between(text, rule.start_tag, rule.end_tag)

    if rule.method == ExtractionMethod.CHECKBOX:
        return resolve_checked(text, rule.start_tag, rule.end_tag, rule.boundary_regex)

    if rule.method == ExtractionMethod.REGEX:
        scope = text
        if rule.start_tag is not None:
            scope = extract_between(text, rule.start_tag, rule.end_tag)
        value = find_last(scope, rule.pattern, rule.trim_prefix)
        if rule.fallback_value is not None and value == rule.fallback_value:
            value = extract_between(scope, rule.fallback_start_tag, rule.fallback_end_tag)
        return value

    raise ValueError(f"Unsupported extraction method: {rule.method}")


def map_fields(
    ocr_text: str,
    form_type: str,
    *,
    today: Optional[date] = None,
    legacy_date_format: bool = False,
) -> ExtractedFields:
    """Extract every field declared for form_type from ocr_text.

    Args:
        ocr_text: Raw OCR output for the first page of the form
        form_type: Form-type code (e.g., "01721")
        today: Request date to stamp (defaults to the current date)
        legacy_date_format: Stamp the request date in the five-digit-year format

    Returns:
        A fully populated ExtractedFields
    """
    values: dict[str, str] = {}

    schema = find_schema(form_type)
    if schema is not None:
        for rule in schema.rules:
            values[rule.field] = apply_rule(ocr_text, rule)

    values["request_date"] = format_request_date(today or date.today(), legacy_date_format)
    return ExtractedFields(**values)
