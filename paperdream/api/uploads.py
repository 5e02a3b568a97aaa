"""
Upload endpoint for card front/back images.

Stored files are served from /uploads (mounted in `paperdream.main`).
"""

from typing import Annotated

from fastapi import APIRouter, File, UploadFile
from pydantic import BaseModel

from paperdream.config import settings
from paperdream.services.uploads import store_upload

router = APIRouter(prefix="/api", tags=["uploads"])


class UploadResponse(BaseModel):
    url: str
    filename: str
    size: int
    type: str


@router.post("/upload", response_model=UploadResponse)
async def upload_image(file: Annotated[UploadFile | None, File()] = None) -> UploadResponse:
    """
    Upload an image (JPEG, PNG, GIF, WebP or SVG, up to 10MB).

    Returns the URL to put in a card's frontImageUrl/backImageUrl.
    """
    if file is None:
        stored = store_upload(None, None, b"")
    else:
        # Read at most one byte past the limit
        data = await file.read(settings.max_upload_bytes + 1)
        stored = store_upload(file.filename, file.content_type, data)

    return UploadResponse(
        url=stored.url,
        filename=stored.filename,
        size=stored.size,
        type=stored.type,
    )
