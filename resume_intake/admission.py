"""Upload admission rules enforced before any résumé is parsed."""
from __future__ import annotations

from typing import Dict, Optional

from config.settings import settings
from interview_session.errors import ValidationFailure

PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ACCEPTED_TYPES: Dict[str, str] = {PDF_TYPE: "pdf", DOCX_TYPE: "docx"}
_EXTENSIONS: Dict[str, str] = {".pdf": PDF_TYPE, ".docx": DOCX_TYPE}


def resolve_type(content_type: Optional[str], filename: Optional[str] = None) -> str:
    """Return the accepted MIME type for an upload or raise ``ValidationFailure``."""

    if content_type in ACCEPTED_TYPES:
        return content_type  # type: ignore[return-value]
    # Some clients send application/octet-stream; trust a known extension then
    if content_type in (None, "", "application/octet-stream") and filename:
        lowered = filename.lower()
        for suffix, mime in _EXTENSIONS.items():
            if lowered.endswith(suffix):
                return mime
    raise ValidationFailure("Only PDF and DOCX files are allowed")


def check_upload(data: bytes, content_type: Optional[str], filename: Optional[str] = None) -> str:
    """Validate size and type of an uploaded résumé and return its MIME type."""

    if not data:
        raise ValidationFailure("No file uploaded")
    limit = settings.MAX_UPLOAD_BYTES
    if len(data) > limit:
        raise ValidationFailure(f"File too large. Max {limit // (1024 * 1024)}MB.")
    return resolve_type(content_type, filename)


__all__ = ["ACCEPTED_TYPES", "DOCX_TYPE", "PDF_TYPE", "check_upload", "resolve_type"]
