"""Tests for the scanner Lambda handler."""

import io
import json
import os
import sys
import zipfile

import pytest

# Add the Lambda source directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'lambda', 'scanner'))

import handler  # noqa: E402

from correction_forms.common.config import Settings  # noqa: E402
from correction_forms.common.exceptions import ArchiveError  # noqa: E402
from correction_forms.ingest.ocr import OcrEngine  # noqa: E402

from samples import FORM_01848_TEXT  # noqa: E402


def _zip(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return buffer.getvalue()


class StubEngine(OcrEngine):
    def read_text(self, image_bytes):
        return FORM_01848_TEXT


@pytest.fixture
def settings(monkeypatch):
    settings = Settings(
        bucket_name="env-bucket",
        archive_key="",
        archive_prefix="batches/",
        ocr_engine="textract",
        render_dpi=300,
        max_workers=1,
        legacy_date_format=False,
    )
    monkeypatch.setattr(handler, "get_settings", lambda: settings)
    monkeypatch.setattr(handler, "get_ocr_engine", lambda s: StubEngine())
    monkeypatch.setattr(
        "correction_forms.ingest.batch.ocr_pdf",
        lambda pdf_bytes, engine, dpi: engine.read_text(pdf_bytes),
    )
    return settings


@pytest.fixture
def s3_calls(monkeypatch):
    calls = {"resolve": [], "download": []}

    def fake_resolve(bucket, prefix):
        calls["resolve"].append((bucket, prefix))
        return "batches/b1.zip"

    def fake_download(bucket, key):
        calls["download"].append((bucket, key))
        return _zip({"b1/a.pdf": b"pdf-a"})

    monkeypatch.setattr(handler, "resolve_archive_key", fake_resolve)
    monkeypatch.setattr(handler, "download_archive", fake_download)
    return calls


class TestLambdaHandler:

    def test_scans_batch(self, settings, s3_calls):
        event = {"records": [
            {"fileName": "a.pdf", "formNumber": "01848"},
            {"fileName": "gone.pdf", "formNumber": "01848"},
        ]}

        response = handler.lambda_handler(event, None)
        body = json.loads(response["body"])

        assert response["statusCode"] == 200
        assert body["zipFileName"] == "b1.zip"
        assert body["processed"] == 1
        assert body["failed"] == 1
        assert body["records"][0]["pdfFields"]["cusip"] == "3133EKWV4"
        assert body["failures"][0]["fileName"] == "gone.pdf"
        assert s3_calls["resolve"] == [("env-bucket", "batches/")]
        assert s3_calls["download"] == [("env-bucket", "batches/b1.zip")]

    def test_event_overrides_bucket_and_key(self, settings, s3_calls):
        event = {
            "bucket": "event-bucket",
            "zipKey": "other/b2.zip",
            "records": [{"fileName": "a.pdf", "formNumber": "01848"}],
        }

        response = handler.lambda_handler(event, None)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["zipFileName"] == "b2.zip"
        assert s3_calls["resolve"] == []
        assert s3_calls["download"] == [("event-bucket", "other/b2.zip")]

    def test_missing_records(self, settings, s3_calls):
        response = handler.lambda_handler({}, None)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"] == "InvalidEvent"

    def test_records_not_a_list(self, settings, s3_calls):
        response = handler.lambda_handler({"records": {"fileName": "a.pdf"}}, None)

        assert response["statusCode"] == 400
        assert s3_calls["download"] == []

    def test_malformed_row_reported_as_failure(self, settings, s3_calls):
        event = {"records": [
            {"fileName": "bad.pdf"},
            {"fileName": "a.pdf", "formNumber": "01848"},
        ]}

        response = handler.lambda_handler(event, None)
        body = json.loads(response["body"])

        assert response["statusCode"] == 200
        assert body["processed"] == 1
        assert body["records"][0]["fileName"] == "a.pdf"
        assert body["failed"] == 1
        assert body["failures"][0]["fileName"] == "bad.pdf"
        assert body["failures"][0]["error"] == "InvalidRecord"

    def test_missing_bucket(self, settings, s3_calls):
        settings.bucket_name = ""

        response = handler.lambda_handler({"records": []}, None)

        assert response["statusCode"] == 400
        assert "BUCKET_NAME" in json.loads(response["body"])["message"]

    def test_archive_failure(self, settings, monkeypatch):
        def fail(bucket, prefix):
            raise ArchiveError("No zip archive found under s3://env-bucket/batches/")

        monkeypatch.setattr(handler, "resolve_archive_key", fail)

        response = handler.lambda_handler({"records": []}, None)
        body = json.loads(response["body"])

        assert response["statusCode"] == 500
        assert body["error"] == "ArchiveError"
        assert "No zip archive" in body["message"]
