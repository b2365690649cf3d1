"""Form 01721 -- trade correction request (equities)."""

from correction_forms.schemas.forms._markers import ORDER_TYPE_BOUNDARY, REASON_BOUNDARY
from correction_forms.schemas.rules import (
    ExtractionMethod,
    FieldRule,
    FormSchema,
    checkbox,
    constant,
    tag_span,
)

FORM_SCHEMA = FormSchema(
    form_type="01721",
    name="Trade Correction Request",
    description=(
        "Single-page correction request. Reason for correction and order type "
        "are checkbox groups; origin of error is an ampersand-marked option "
        "with a free-text 'other' line."
    ),
    rules=(
        tag_span("cusip", "CUSIP:", "Security Description:"),
        tag_span("security_description", "Security Description:", "Trade Date:"),
        tag_span("trade_date", "Trade Date:", "Settlement Date:"),
        tag_span("settlement_date", "Settlement Date:", "Order Type:"),
        tag_span("quantity", "Quantity: (shares)", "Price:"),
        tag_span("price", "Price:", "Commission:"),
        constant("request_type", "Correction"),
        checkbox("reason_for_correction", "Request Date", "Origin of Error:", REASON_BOUNDARY),
        FieldRule(
            "origin_of_error",
            ExtractionMethod.REGEX,
            start_tag="Origin of Error:",
            end_tag="Charge fee to:",
            pattern=r"&Y\s?\w+|&\s?\w+",
            trim_prefix=r"^&Y\s*|^&\s*",
            fallback_value="other",
            fallback_start_tag="other",
            fallback_end_tag="Charge fee to:",
        ),
        checkbox("order_type", "Order Type:", "Quantity:", ORDER_TYPE_BOUNDARY),
    ),
)
