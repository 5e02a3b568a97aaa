"""
Card image uploads.

Files are accepted only when both the extension and the declared MIME type
name an image format we can print (JPEG, PNG, GIF, WebP, SVG), and only up
to the configured size limit. Accepted files are written under the upload
directory with a generated name and served back from /uploads.
"""

import logging
import re
import secrets
import string
import time
from dataclasses import dataclass
from pathlib import Path

from paperdream.config import settings
from paperdream.models.failure import FailureKind, ValidationError

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"

ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"})
_ALLOWED_MIME = re.compile(r"^image/(jpeg|jpg|png|gif|webp|svg\+xml)$", re.IGNORECASE)

_NAME_ALPHABET = string.ascii_lowercase + string.digits


@dataclass(frozen=True, slots=True)
class StoredUpload:
    """
    An accepted upload.

    Attributes:
        url: Stable URL the file is served from
        filename: Generated file name on disk
        size: Size in bytes
        type: Declared MIME type
    """

    url: str
    filename: str
    size: int
    type: str


def _generated_name(extension: str) -> str:
    suffix = "".join(secrets.choice(_NAME_ALPHABET) for _ in range(6))
    return f"{int(time.time() * 1000)}-{suffix}{extension}"


def check_upload(filename: str | None, content_type: str | None, size: int) -> str:
    """
    Validate an upload's name, type and size.

    Returns the lower-cased extension to store the file under.

    Raises:
        ValidationError: missing file, disallowed type, or too large
    """
    if not filename:
        raise ValidationError(
            field="file", message="No file selected", kind=FailureKind.MISSING_REQUIRED
        )

    extension = Path(filename).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS or not _ALLOWED_MIME.match(content_type or ""):
        raise ValidationError(
            field="file",
            message="Only image files can be uploaded (JPEG, PNG, GIF, WebP, SVG)",
            detail=f"extension={extension or '-'} type={content_type or '-'}",
        )

    if size > settings.max_upload_bytes:
        limit_mb = settings.max_upload_bytes // (1024 * 1024)
        raise ValidationError(
            field="file",
            message=f"File is too large (max {limit_mb}MB)",
            kind=FailureKind.OUT_OF_RANGE,
        )

    if size == 0:
        raise ValidationError(field="file", message="Uploaded file is empty")

    return extension


def store_upload(
    filename: str | None,
    content_type: str | None,
    data: bytes,
    upload_dir: Path | None = None,
) -> StoredUpload:
    """Validate and write an uploaded image, returning where it is served."""
    extension = check_upload(filename, content_type, len(data))

    directory = upload_dir or Path(settings.upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    name = _generated_name(extension)
    (directory / name).write_bytes(data)
    logger.info("Stored upload %s (%d bytes, %s)", name, len(data), content_type)

    return StoredUpload(
        url=f"{UPLOAD_URL_PREFIX}/{name}",
        filename=name,
        size=len(data),
        type=content_type or "",
    )
