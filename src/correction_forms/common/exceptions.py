"""Custom exceptions for correction form scanning.

The extraction core never raises; these cover the I/O steps around it
(object storage, archive lookup, rendering and OCR).
"""


class DocumentProcessingError(Exception):
    """Base exception for document processing errors."""

    def __init__(self, message: str, document_id: str | None = None, cause: Exception | None = None):
        self.message = message
        self.document_id = document_id
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "documentId": self.document_id,
            "cause": str(self.cause) if self.cause else None,
        }


class ArchiveError(DocumentProcessingError):
    """Error locating or reading the batch zip archive."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        archive_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, document_id, cause)
        self.archive_key = archive_key

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = super().to_dict()
        result["archiveKey"] = self.archive_key
        return result


class StorageError(DocumentProcessingError):
    """Error during storage operations."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        storage_type: str | None = None,  # "s3"
        cause: Exception | None = None,
    ):
        super().__init__(message, document_id, cause)
        self.storage_type = storage_type


class OcrError(DocumentProcessingError):
    """Error rendering a PDF page or running OCR over it."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        engine: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, document_id, cause)
        self.engine = engine

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = super().to_dict()
        result["engine"] = self.engine
        return result
