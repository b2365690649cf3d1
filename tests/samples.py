"""OCR output samples for the three supported form layouts."""

FORM_01721_TEXT = """TRADE CORRECTION REQUEST
Request Date
01/02/2024
wy Wrong account O Wrong price
O Late entry
Origin of Error: O Client & Branch
Charge fee to: Branch
CUSIP: 912828U40
Security Description: US TREASURY NOTE
Trade Date: 01/02/2024
Settlement Date: 01/03/2024
Order Type: O Market Y Limit O Stop
Quantity: (shares) 1,000
Price: 99.50
Commission: 0.00
"""

FORM_01848_TEXT = """Request Date
01/02/2024
O Wrong account y Wrong price
Origin of Error: Trader
Charge Loss/Fee To: Branch
Request Type: Cancel and rebill
Reason for Correction
CUSIP/Symbol: 3133EKWV4
Security Description: FHLB 2.5% 2029
BondDesk
Trade Date: 01/02/2024
Settle Date: 01/04/2024
Order Type: & Market O Limit
Quantity: 50,000
Price: 101.25
Commission: 25.00
"""

FORM_02050_TEXT = """FAILED CANCEL REQUEST
CUSIP/Symbol: 594918104
Original Price: 415.10
Trade Date: 01/02/2024
Trade Number: T-88812
Amount: 200
Order Type: Limit
Original To CUSIP
Type of Request: Cancel
Origin of Error By: Client
Charge Loss To: Branch 12
"""
