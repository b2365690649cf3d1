"""Data models for correction form scanning."""

from dataclasses import dataclass, field, fields
from typing import Any, Optional


# Placeholder for a field whose tag or pattern was absent from the OCR text.
NOT_FOUND = "Not Found"

# Attribute name -> output key
OUTPUT_KEYS: dict[str, str] = {
    "cusip": "cusip",
    "security_description": "securityDescription",
    "trade_date": "tradeDate",
    "settlement_date": "settlementDate",
    "quantity": "quantity",
    "price": "price",
    "request_type": "requestType",
    "origin_of_error": "originOfError",
    "reason_for_correction": "reasonForCorrection",
    "order_type": "orderType",
    "request_date": "requestDate",
}


@dataclass
class ExtractedFields:
    """Named fields recovered from one correction-request form."""

    cusip: str = NOT_FOUND
    security_description: str = NOT_FOUND
    trade_date: str = NOT_FOUND
    settlement_date: str = NOT_FOUND
    quantity: str = NOT_FOUND
    price: str = NOT_FOUND
    request_type: str = NOT_FOUND
    origin_of_error: str = NOT_FOUND
    reason_for_correction: str = NOT_FOUND
    order_type: str = NOT_FOUND
    request_date: str = NOT_FOUND

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def missing_fields(self) -> list[str]:
        """Names of fields still holding the NOT_FOUND placeholder."""
        return [name for name in self.field_names() if getattr(self, name) == NOT_FOUND]

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {key: getattr(self, name) for name, key in OUTPUT_KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractedFields":
        """Create from dictionary."""
        return cls(**{
            name: data.get(key, NOT_FOUND)
            for name, key in OUTPUT_KEYS.items()
        })


@dataclass
class FormRecord:
    """One manifest row: a scanned PDF and the form type it was filed under."""

    file_name: str
    form_number: str
    fields: Optional[ExtractedFields] = None
    zip_file_name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "fileName": self.file_name,
            "formNumber": self.form_number,
            "pdfFields": self.fields.to_dict() if self.fields else None,
            "zipFileName": self.zip_file_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FormRecord":
        """Create from dictionary."""
        pdf_fields = data.get("pdfFields")
        return cls(
            file_name=data["fileName"],
            form_number=str(data["formNumber"]),
            fields=ExtractedFields.from_dict(pdf_fields) if pdf_fields else None,
            zip_file_name=data.get("zipFileName"),
        )


@dataclass
class BatchResult:
    """Outcome of scanning one archive's worth of records."""

    zip_file_name: str
    records: list[FormRecord] = field(default_factory=list)
    failures: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "zipFileName": self.zip_file_name,
            "processed": len(self.records),
            "failed": len(self.failures),
            "records": [record.to_dict() for record in self.records],
            "failures": self.failures,
        }
