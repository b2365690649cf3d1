"""I/O around the extraction core: archive access, OCR and batch iteration."""

from .archive import resolve_archive_key, download_archive, find_entry
from .ocr import (
    OcrEngine,
    TextractOcrEngine,
    TesseractOcrEngine,
    get_ocr_engine,
    render_first_page,
    ocr_pdf,
)
from .batch import scan_batch, scan_record, partition_records

__all__ = [
    # Archive
    "resolve_archive_key",
    "download_archive",
    "find_entry",
    # OCR
    "OcrEngine",
    "TextractOcrEngine",
    "TesseractOcrEngine",
    "get_ocr_engine",
    "render_first_page",
    "ocr_pdf",
    # Batch
    "scan_batch",
    "scan_record",
    "partition_records",
]
