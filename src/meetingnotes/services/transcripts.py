"""Validation and text extraction for uploaded transcript files."""

import codecs
import logging

from fastapi import UploadFile

from meetingnotes.config import Settings
from meetingnotes.errors import PayloadTooLargeError, ValidationError

logger = logging.getLogger(__name__)


def normalize_content_type(content_type: str | None) -> str:
    """Lower-case MIME type without parameters ("text/plain; charset=utf-8" -> "text/plain")."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def check_content_type(content_type: str | None, settings: Settings) -> None:
    """Reject types outside the upload filter, then types we cannot read as text."""
    mime = normalize_content_type(content_type)
    if mime not in {t.lower() for t in settings.upload_accepted_types}:
        raise ValidationError("Invalid file type. Only .txt, .docx, and .pdf files are allowed.")
    if mime not in {t.lower() for t in settings.upload_text_types}:
        raise ValidationError("Only .txt files are currently supported")


def decode_transcript(data: bytes) -> str:
    """Decode UTF-8 bytes (BOM stripped) and reject blank content."""
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError("File is not valid UTF-8 text") from e

    if not text.strip():
        raise ValidationError("File appears to be empty")
    return text


async def read_transcript(upload: UploadFile | None, settings: Settings) -> str:
    """Validate an uploaded transcript and return its text.

    Checks run in order: presence, size, MIME type, encoding, blank content.
    The size limit is enforced before the body is decoded.
    """
    if upload is None or (not upload.filename and not upload.size):
        raise ValidationError("No file uploaded")

    limit = settings.max_upload_bytes
    too_large = PayloadTooLargeError(f"File too large. Maximum size is {limit} bytes.")
    if upload.size is not None and upload.size > limit:
        raise too_large

    check_content_type(upload.content_type, settings)

    data = await upload.read(limit + 1)
    if len(data) > limit:
        raise too_large

    logger.info(f"Received transcript {upload.filename!r} ({len(data)} bytes)")
    return decode_transcript(data)
