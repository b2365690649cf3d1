"""Page rendering and OCR.

Only the first page of a correction form carries the fields, so only that
page is rendered (300 DPI by default) and read. Two engines are available:
Amazon Textract DetectDocumentText and a local Tesseract install.
"""

import io
from typing import Any, Optional

import fitz  # PyMuPDF
import pytesseract
from botocore.exceptions import BotoCoreError, ClientError
from PIL import Image

from correction_forms.common.aws_clients import get_textract_client
from correction_forms.common.config import Settings
from correction_forms.common.exceptions import OcrError

DEFAULT_DPI = 300


def render_first_page(pdf_bytes: bytes, dpi: int = DEFAULT_DPI) -> bytes:
    """Render page one of a PDF to PNG bytes using PyMuPDF.

    Raises:
        OcrError: If the bytes are not a readable PDF, it has no pages or
            page one cannot be rendered
    """
    if not pdf_bytes:
        raise OcrError("Empty PDF content", engine="render")

    try:
        pdf_doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise OcrError("Unreadable PDF", engine="render", cause=e) from e

    try:
        if len(pdf_doc) == 0:
            raise OcrError("PDF has no pages", engine="render")
        try:
            # 72 is the PDF user-space resolution
            zoom = dpi / 72
            pix = pdf_doc[0].get_pixmap(matrix=fitz.Matrix(zoom, zoom))
            return pix.tobytes("png")
        except Exception as e:
            raise OcrError("Failed to render first page", engine="render", cause=e) from e
    finally:
        pdf_doc.close()


class OcrEngine:
    """Reads text from a rendered page image."""

    name = "base"

    def read_text(self, image_bytes: bytes) -> str:
        raise NotImplementedError


class TextractOcrEngine(OcrEngine):
    """OCR via Textract DetectDocumentText.

    LINE blocks come back in reading order; they are joined with newlines so
    the checkbox resolver sees the same line structure Tesseract produces.
    """

    name = "textract"

    def __init__(self, textract_client: Any = None):
        self._client = textract_client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = get_textract_client()
        return self._client

    def read_text(self, image_bytes: bytes) -> str:
        try:
            response = self.client.detect_document_text(Document={"Bytes": image_bytes})
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise OcrError(f"Textract DetectDocumentText failed ({error_code})", engine=self.name, cause=e) from e
        except BotoCoreError as e:
            raise OcrError("Textract DetectDocumentText failed", engine=self.name, cause=e) from e

        lines = [
            block.get("Text", "")
            for block in response.get("Blocks", [])
            if block.get("BlockType") == "LINE"
        ]
        return "\n".join(lines)


class TesseractOcrEngine(OcrEngine):
    """OCR via a local Tesseract binary."""

    name = "tesseract"

    def __init__(self, lang: str = "eng", tessdata_dir: Optional[str] = None):
        self.lang = lang
        self.tessdata_dir = tessdata_dir

    @property
    def config(self) -> str:
        if self.tessdata_dir:
            return f'--tessdata-dir "{self.tessdata_dir}"'
        return ""

    def read_text(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                return pytesseract.image_to_string(image, lang=self.lang, config=self.config)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError) as e:
            raise OcrError("Tesseract OCR failed", engine=self.name, cause=e) from e


def get_ocr_engine(settings: Settings) -> OcrEngine:
    """Build the OCR engine selected by settings.ocr_engine."""
    if settings.ocr_engine == "textract":
        return TextractOcrEngine()
    if settings.ocr_engine == "tesseract":
        return TesseractOcrEngine(
            lang=settings.tesseract_lang,
            tessdata_dir=settings.tessdata_dir or None,
        )
    raise ValueError(f"Unknown OCR engine: '{settings.ocr_engine}'")


def ocr_pdf(pdf_bytes: bytes, engine: OcrEngine, dpi: int = DEFAULT_DPI) -> str:
    """Render the first page of a PDF and return its recognized text."""
    return engine.read_text(render_first_page(pdf_bytes, dpi))
