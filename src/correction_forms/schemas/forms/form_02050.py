"""Form 02050 -- failed cancel request.

Only one cause is possible on this form, so the reason is fixed. It has no
security description or settlement date.
"""

from correction_forms.schemas.rules import FormSchema, constant, tag_span

FORM_SCHEMA = FormSchema(
    form_type="02050",
    name="Failed Cancel Request",
    description="Request to correct a trade that executed after a cancel was submitted.",
    rules=(
        tag_span("cusip", "CUSIP/Symbol:", "Original Price:"),
        tag_span("trade_date", "Trade Date:", "Trade Number:"),
        tag_span("quantity", "Amount:", "Order Type:"),
        tag_span("price", "Original Price:", "Trade Date:"),
        constant("reason_for_correction", "Failed to cancel order"),
        tag_span("request_type", "Type of Request:", "Origin of Error By:"),
        tag_span("origin_of_error", "Origin of Error By:", "Charge Loss To:"),
        tag_span("order_type", "Order Type:", "Original To CUSIP"),
    ),
)
