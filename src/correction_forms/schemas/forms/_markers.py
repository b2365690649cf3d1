"""Checkbox split points shared by several form layouts.

OCR reads the check glyphs as short tokens ("O", "OQ", "w", "wy", "y",
"Y", "Cf", "&"). Each pattern splits a line right before such a token
when it follows whitespace and is itself followed by a space.
"""

# Reason for correction block
REASON_BOUNDARY = r"(?<=\s)(?=O |OQ |w |wy |y )"

# Order type block
ORDER_TYPE_BOUNDARY = r"(?<=\s)(?=O |Y |Cf |& )"
