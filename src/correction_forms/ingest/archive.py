"""Batch archive access.

Scanned forms arrive as one zip per batch in the S3 bucket, next to a CSV
manifest listing each PDF's file name and form number. The manifest itself
is shipped inside the zip as well and is never a scan candidate.
"""

import io
import zipfile
import zlib
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from correction_forms.common.aws_clients import get_s3_client
from correction_forms.common.exceptions import ArchiveError, StorageError
from correction_forms.common.safe_log import safe_log

MANIFEST_SUFFIX = ".csv"
ARCHIVE_SUFFIX = ".zip"


def resolve_archive_key(bucket: str, prefix: str = "", s3_client: Any = None) -> str:
    """Return the key of the first zip archive under prefix.

    Raises:
        StorageError: If the bucket listing fails
        ArchiveError: If no .zip object exists under the prefix
    """
    s3_client = s3_client or get_s3_client()
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
            for obj in page.get("Contents", []):
                if obj["Key"].lower().endswith(ARCHIVE_SUFFIX):
                    return obj["Key"]
    except (ClientError, BotoCoreError) as e:
        raise StorageError(
            f"Failed to list s3://{bucket}/{prefix}", storage_type="s3", cause=e
        ) from e

    raise ArchiveError(f"No zip archive found under s3://{bucket}/{prefix}")


def download_archive(bucket: str, key: str, s3_client: Any = None) -> bytes:
    """Download the whole archive into memory.

    zipfile needs a seekable stream, which the S3 body is not.
    """
    s3_client = s3_client or get_s3_client()
    try:
        response = s3_client.get_object(Bucket=bucket, Key=key)
        content = response["Body"].read()
    except (ClientError, BotoCoreError) as e:
        raise StorageError(
            f"Failed to download s3://{bucket}/{key}", storage_type="s3", cause=e
        ) from e

    safe_log("Downloaded archive", key=key, size=len(content))
    return content


def _entry_matches(entry_name: str, file_name: str) -> bool:
    if entry_name.endswith("/") or entry_name.endswith(MANIFEST_SUFFIX):
        return False
    return entry_name.rsplit("/", 1)[-1] == file_name


def find_entry(archive_bytes: bytes, file_name: str) -> Optional[bytes]:
    """Return the contents of the entry whose base name equals file_name.

    Folders inside the archive are ignored; the first matching entry wins.
    Manifest (.csv) entries never match.

    Returns:
        Entry bytes, or None if no entry matches

    Raises:
        ArchiveError: If archive_bytes is not a readable zip or the matching
            entry cannot be decompressed
    """
    try:
        with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
            for info in archive.infolist():
                if _entry_matches(info.filename, file_name):
                    return archive.read(info)
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        zlib.error,
        RuntimeError,
        NotImplementedError,
        EOFError,
    ) as e:
        raise ArchiveError(f"Unreadable archive while looking for {file_name}", document_id=file_name, cause=e) from e
    return None
