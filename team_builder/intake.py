"""
Local-file intake: the upload rules of the web form (10 MiB cap, .xlsx/.xls only)
applied before bytes are handed to the pipeline.
"""

from pathlib import Path

from loguru import logger

from .config import DEFAULT_MAX_UPLOAD_BYTES
from .errors import UploadRejectedError

ALLOWED_EXTENSIONS = (".xlsx", ".xls")


def read_upload(path: str | Path, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> bytes:
    """Return the file's bytes, or raise UploadRejectedError if it breaks an intake rule."""
    path = Path(path)
    if path.suffix.lower() not in ALLOWED_EXTENSIONS:
        raise UploadRejectedError(
            f"Only Excel files are allowed ({', '.join(ALLOWED_EXTENSIONS)}): {path.name}"
        )
    if not path.is_file():
        raise UploadRejectedError(f"File not found: {path}")
    size = path.stat().st_size
    if size > max_bytes:
        raise UploadRejectedError(f"File too large: {size} bytes (limit {max_bytes})")
    logger.info(f"Accepted upload {path.name} ({size} bytes)")
    return path.read_bytes()
