"""Correction Forms Package.

Turns OCR text from scanned trade correction-request forms into structured
field records, using a declarative rule table per form type.
"""

__version__ = "1.0.0"
