"""Common utilities shared by the extraction core and the scanning glue."""

from .config import Settings, get_settings
from .models import NOT_FOUND, ExtractedFields, FormRecord, BatchResult
from .exceptions import DocumentProcessingError, ArchiveError, StorageError, OcrError
from .safe_log import safe_log

__all__ = [
    "Settings",
    "get_settings",
    "NOT_FOUND",
    "ExtractedFields",
    "FormRecord",
    "BatchResult",
    "DocumentProcessingError",
    "ArchiveError",
    "StorageError",
    "OcrError",
    "safe_log",
]
