"""Form 01848 -- fixed income trade correction request."""

from correction_forms.schemas.forms._markers import ORDER_TYPE_BOUNDARY, REASON_BOUNDARY
from correction_forms.schemas.rules import FormSchema, checkbox, tag_span

FORM_SCHEMA = FormSchema(
    form_type="01848",
    name="Fixed Income Trade Correction Request",
    description=(
        "BondDesk correction request. Request type and origin of error are "
        "typed values; reason for correction and order type are checkbox groups."
    ),
    rules=(
        tag_span("cusip", "CUSIP/Symbol:", "Security Description:"),
        tag_span("security_description", "Security Description:", "BondDesk"),
        tag_span("trade_date", "Trade Date:", "Settle Date:"),
        tag_span("settlement_date", "Settle Date:", "Order Type:"),
        tag_span("quantity", "Quantity:", "Price:"),
        tag_span("price", "Price:", "Commission:"),
        tag_span("request_type", "Request Type:", "Reason for Correction"),
        tag_span("origin_of_error", "Origin of Error:", "Charge Loss/Fee To:"),
        checkbox("reason_for_correction", "Request Date", "Origin of Error:", REASON_BOUNDARY),
        checkbox("order_type", "Order Type:", "Quantity:", ORDER_TYPE_BOUNDARY),
    ),
)
