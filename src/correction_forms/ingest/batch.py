"""Batch scanning - one archive, many manifest records.

Each record is looked up in the archive, OCR'd and mapped independently.
A record whose PDF is missing or cannot be read is logged and left out of
the result; the rest of the batch carries on. Nothing is retried.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import date
from typing import Any, Iterable, List, Optional

from correction_forms.common.config import Settings
from correction_forms.common.exceptions import ArchiveError, DocumentProcessingError
from correction_forms.common.models import BatchResult, FormRecord
from correction_forms.common.safe_log import safe_log
from correction_forms.extraction.mapper import map_fields
from correction_forms.ingest.archive import find_entry
from correction_forms.ingest.ocr import OcrEngine, ocr_pdf


def scan_record(
    record: FormRecord,
    archive_bytes: bytes,
    zip_file_name: str,
    engine: OcrEngine,
    settings: Settings,
    today: Optional[date] = None,
) -> FormRecord:
    """Scan a single record and return a filled-in copy of it.

    Raises:
        DocumentProcessingError: If the PDF is missing from the archive or OCR fails
    """
    pdf_bytes = find_entry(archive_bytes, record.file_name)
    if pdf_bytes is None:
        raise ArchiveError(
            f"{record.file_name} not found in archive",
            document_id=record.file_name,
            archive_key=zip_file_name,
        )

    try:
        ocr_text = ocr_pdf(pdf_bytes, engine, dpi=settings.render_dpi)
    except DocumentProcessingError as e:
        e.document_id = e.document_id or record.file_name
        raise

    fields = map_fields(
        ocr_text,
        record.form_number,
        today=today,
        legacy_date_format=settings.legacy_date_format,
    )
    return replace(record, fields=fields, zip_file_name=zip_file_name)


def scan_batch(
    records: Iterable[FormRecord],
    archive_bytes: bytes,
    zip_file_name: str,
    engine: OcrEngine,
    *,
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> BatchResult:
    """Scan every record against one archive.

    Records are processed sequentially unless settings.max_workers > 1, in
    which case they run on a thread pool. Result order follows input order
    either way.
    """
    settings = settings or Settings()
    records = list(records)
    start = time.time()
    safe_log("Number of pdf files to process", count=len(records), zipFileName=zip_file_name)

    def _scan(record: FormRecord) -> FormRecord:
        return scan_record(record, archive_bytes, zip_file_name, engine, settings, today)

    if settings.max_workers > 1 and len(records) > 1:
        with ThreadPoolExecutor(max_workers=settings.max_workers) as executor:
            futures = [executor.submit(_scan, record) for record in records]
            outcomes = [_outcome(future.result) for future in futures]
    else:
        outcomes = [_outcome(lambda record=record: _scan(record)) for record in records]

    result = BatchResult(zip_file_name=zip_file_name)
    for record, (scanned, error) in zip(records, outcomes):
        if error is None:
            result.records.append(scanned)
            continue
        safe_log(
            "Error occurred while processing pdf file",
            fileName=record.file_name,
            formNumber=record.form_number,
            error=error.to_dict(),
        )
        result.failures.append({
            "fileName": record.file_name,
            "error": error.__class__.__name__,
            "message": error.message,
        })

    safe_log(
        "Batch completed",
        zipFileName=zip_file_name,
        processed=len(result.records),
        failed=len(result.failures),
        seconds=f"{time.time() - start:.2f}",
    )
    return result


def _outcome(call) -> tuple[Optional[FormRecord], Optional[DocumentProcessingError]]:
    try:
        return call(), None
    except DocumentProcessingError as e:
        return None, e


def partition_records(items: Iterable[Any]) -> tuple[List[FormRecord], List[dict]]:
    """Build FormRecords from manifest rows ({"fileName", "formNumber"}).

    Rows that are not objects or lack either key are not scanned. They come
    back as failure entries shaped like the ones scan_batch reports.
    """
    records: List[FormRecord] = []
    rejected: List[dict] = []
    for item in items:
        try:
            records.append(FormRecord.from_dict(item))
        except (AttributeError, KeyError, TypeError) as e:
            file_name = item.get("fileName") if isinstance(item, dict) else None
            safe_log("Skipping malformed manifest row", fileName=file_name, error=str(e))
            rejected.append({
                "fileName": file_name,
                "error": "InvalidRecord",
                "message": f"Malformed manifest row, missing or invalid {e}",
            })
    return records, rejected
