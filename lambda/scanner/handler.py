"""Scanner Lambda

Invoked once per uploaded batch. Locates the batch zip in S3, OCRs each
PDF listed in the event's manifest records and returns the extracted
correction-request fields.

Event:
    {
        "bucket": "corrections-ingest",       # optional, defaults to BUCKET_NAME
        "zipKey": "batches/2024-01-02.zip",   # optional, else first zip under prefix
        "prefix": "batches/",                 # optional
        "records": [{"fileName": "a.pdf", "formNumber": "01721"}, ...]
    }
"""

import json
from dataclasses import replace

from correction_forms.common.config import get_settings
from correction_forms.common.exceptions import DocumentProcessingError
from correction_forms.common.safe_log import safe_log
from correction_forms.ingest.archive import download_archive, resolve_archive_key
from correction_forms.ingest.batch import partition_records, scan_batch
from correction_forms.ingest.ocr import get_ocr_engine


def _response(status_code: int, body: dict) -> dict:
    return {
        'statusCode': status_code,
        'body': json.dumps(body),
    }


def lambda_handler(event, context):
    """Scan one batch archive.

    Args:
        event: Batch description (see module docstring)
        context: Lambda context object

    Returns:
        dict: Response with the scanned records and per-record failures
    """
    safe_log("Scanner Lambda received event", data=event)

    rows = event.get('records') if isinstance(event, dict) else None
    if not isinstance(rows, list):
        safe_log("Invalid event", error="records must be a list")
        return _response(400, {'error': 'InvalidEvent', 'message': "Missing or malformed records: expected a list"})
    # Malformed rows are reported per record; the rest of the batch still runs
    records, rejected = partition_records(rows)

    settings = get_settings()
    bucket = event.get('bucket') or settings.bucket_name
    if event.get('bucket'):
        settings = replace(settings, bucket_name=bucket)
    try:
        settings.validate()
    except ValueError as e:
        return _response(400, {'error': 'InvalidConfiguration', 'message': str(e)})

    try:
        zip_key = (
            event.get('zipKey')
            or settings.archive_key
            or resolve_archive_key(bucket, event.get('prefix', settings.archive_prefix))
        )
        archive_bytes = download_archive(bucket, zip_key)
    except DocumentProcessingError as e:
        safe_log("Failed to load batch archive", error=e.to_dict())
        return _response(500, e.to_dict())

    zip_file_name = zip_key.rsplit('/', 1)[-1]
    result = scan_batch(
        records,
        archive_bytes,
        zip_file_name,
        get_ocr_engine(settings),
        settings=settings,
    )
    result.failures = rejected + result.failures

    return _response(200, result.to_dict())
