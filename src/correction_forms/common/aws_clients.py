"""AWS client factory functions with connection pooling."""

import boto3
from botocore.config import Config
from functools import lru_cache
from typing import Any

# A 300 DPI letter page is several MB of PNG; give Textract room to answer.
_TEXTRACT_CONFIG = Config(connect_timeout=10, read_timeout=120)


@lru_cache(maxsize=1)
def get_s3_client() -> Any:
    """Get a cached S3 client instance."""
    return boto3.client("s3")


@lru_cache(maxsize=1)
def get_textract_client() -> Any:
    """Get a cached Textract client instance."""
    return boto3.client("textract", config=_TEXTRACT_CONFIG)
