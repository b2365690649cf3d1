"""Redacting log writer -- drop-in replacement for print().

Correction requests carry client account numbers and occasionally tax ids,
and raw OCR text can contain anything printed on the form. Both are kept
out of CloudWatch Logs.

Usage:
    from correction_forms.common.safe_log import safe_log
    safe_log("Scanned record", fileName="a.pdf", data=record.to_dict())
"""

import copy
import json
import re
from datetime import datetime, timezone
from typing import Any, Optional, Set

MAX_PAYLOAD_CHARS = 4096


def _redact_account(value: Any) -> str:
    digits = re.sub(r"[^0-9A-Za-z]", "", str(value))
    return f"****{digits[-4:]}" if len(digits) >= 4 else "****"


def _redact_ssn(value: Any) -> str:
    digits = re.sub(r"[^0-9]", "", str(value))
    return f"***-**-{digits[-4:]}" if len(digits) >= 4 else "***-**-****"


def _redact_text(value: Any) -> str:
    return f"<{len(str(value))} chars>"


# Field name -> redactor
_SENSITIVE_FIELDS = {
    "accountNumber": _redact_account,
    "account_number": _redact_account,
    "account": _redact_account,
    "ssn": _redact_ssn,
    "taxId": _redact_ssn,
    "tax_id": _redact_ssn,
    "ocrText": _redact_text,
    "ocr_text": _redact_text,
}


def _redact(data: Any, visited: Optional[Set[int]] = None) -> Any:
    """Walk structure and redact known sensitive field names."""
    if visited is None:
        visited = set()
    obj_id = id(data)
    if obj_id in visited:
        return data
    visited.add(obj_id)

    if isinstance(data, dict):
        result = {}
        for k, v in data.items():
            if k in _SENSITIVE_FIELDS and v is not None:
                result[k] = _SENSITIVE_FIELDS[k](v)
            else:
                result[k] = _redact(v, visited)
        return result
    elif isinstance(data, list):
        return [_redact(item, visited) for item in data]
    return data


def redact(data: Any) -> Any:
    """Deep-copy data and redact all sensitive fields."""
    if data is None:
        return None
    return _redact(copy.deepcopy(data))


def _encode(value: Any) -> str:
    text = json.dumps(redact(value), default=str)
    if len(text) > MAX_PAYLOAD_CHARS:
        text = text[:MAX_PAYLOAD_CHARS] + "... [TRUNCATED]"
    return text


def safe_log(message: str, *args, data: Any = None, **kwargs) -> None:
    """Write one timestamped, redacted log line to stdout."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    parts = [f"[{timestamp}]", message]

    for arg in args:
        if isinstance(arg, (dict, list)):
            parts.append(_encode(arg))
        else:
            parts.append(str(arg))

    for k, v in kwargs.items():
        if isinstance(v, (dict, list)):
            parts.append(f"{k}={_encode(v)}")
        elif k in _SENSITIVE_FIELDS and v is not None:
            parts.append(f"{k}={_SENSITIVE_FIELDS[k](v)}")
        else:
            parts.append(f"{k}={v}")

    if data is not None:
        parts.append(_encode(data))

    print(" ".join(parts), flush=True)
