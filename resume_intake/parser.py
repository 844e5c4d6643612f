from __future__ import annotations  # Résumé text and contact field extraction

import io
import logging
import re
import zipfile
from typing import List

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from interview_session.errors import ValidationFailure
from interview_session.models import UserInfo

from .admission import DOCX_TYPE, PDF_TYPE

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
NAME_RE = re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+", re.MULTILINE)


class ResumeExtraction(BaseModel):  # Upload response payload
    user_info: UserInfo
    extracted_text: str
    missing_fields: List[str] = Field(default_factory=list)


def extract_text_from_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(text for text in pages if text).strip()


def extract_text_from_docx(data: bytes) -> str:
    document = Document(io.BytesIO(data))
    return "\n".join(paragraph.text for paragraph in document.paragraphs).strip()


def extract_text(data: bytes, content_type: str) -> str:
    """Extract plain text from an admitted PDF or DOCX upload."""

    try:
        if content_type == PDF_TYPE:
            return extract_text_from_pdf(data)
        if content_type == DOCX_TYPE:
            return extract_text_from_docx(data)
    except (PdfReadError, PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        logger.warning("Unreadable %s upload: %s", content_type, exc)
        raise ValidationFailure("Could not read the uploaded document") from exc
    raise ValidationFailure("Only PDF and DOCX files are allowed")


def _first(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def extract_user_info(text: str) -> UserInfo:
    """Pull name, email, and phone from résumé text; absent fields are empty strings."""

    return UserInfo(
        name=_first(NAME_RE, text),
        email=_first(EMAIL_RE, text),
        phone=_first(PHONE_RE, text),
    )


def parse_resume(data: bytes, content_type: str) -> ResumeExtraction:
    text = extract_text(data, content_type)
    info = extract_user_info(text)
    return ResumeExtraction(user_info=info, extracted_text=text, missing_fields=info.missing_fields())


__all__ = [
    "ResumeExtraction",
    "extract_text",
    "extract_text_from_docx",
    "extract_text_from_pdf",
    "extract_user_info",
    "parse_resume",
]
