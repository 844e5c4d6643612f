from __future__ import annotations

import io

import pytest
from docx import Document
from fpdf import FPDF

from config.settings import settings
from interview_session import ValidationFailure
from resume_intake import DOCX_TYPE, PDF_TYPE, check_upload, extract_user_info, parse_resume

RESUME_LINES = [
    "Ada Lovelace",
    "Analytical Engine Programmer",
    "ada@example.com | +1 555-010-2030",
    "Experience: React, Node.js, Express",
]


def _docx_bytes(lines) -> bytes:
    document = Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _pdf_bytes(lines) -> bytes:
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", size=12)
    for line in lines:
        pdf.cell(0, 8, line, new_x="LMARGIN", new_y="NEXT")
    return bytes(pdf.output())


def test_extract_user_info_finds_contact_fields():
    info = extract_user_info("\n".join(RESUME_LINES))
    assert info.name == "Ada Lovelace"
    assert info.email == "ada@example.com"
    assert info.phone == "+1 555-010-2030"


def test_extract_user_info_leaves_absent_fields_empty():
    info = extract_user_info("curriculum vitae\nno contact details here")
    assert info.name == ""
    assert info.email == ""
    assert info.phone == ""
    assert info.missing_fields() == ["name", "email", "phone"]


def test_parse_docx_resume():
    result = parse_resume(_docx_bytes(RESUME_LINES), DOCX_TYPE)
    assert "Analytical Engine Programmer" in result.extracted_text
    assert result.user_info.email == "ada@example.com"
    assert result.missing_fields == []


def test_parse_pdf_resume():
    result = parse_resume(_pdf_bytes(RESUME_LINES), PDF_TYPE)
    assert "ada@example.com" in result.extracted_text
    assert result.user_info.name == "Ada Lovelace"


def test_unreadable_document_is_a_validation_failure():
    with pytest.raises(ValidationFailure, match="Could not read"):
        parse_resume(b"definitely not a zip archive", DOCX_TYPE)


def test_admission_rejects_other_types():
    with pytest.raises(ValidationFailure, match="Only PDF and DOCX files are allowed"):
        check_upload(b"hello", "text/plain", "resume.txt")


def test_admission_rejects_empty_and_oversized(monkeypatch):
    with pytest.raises(ValidationFailure, match="No file uploaded"):
        check_upload(b"", PDF_TYPE, "resume.pdf")

    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
    with pytest.raises(ValidationFailure, match="File too large. Max 10MB."):
        check_upload(b"x" * (10 * 1024 * 1024 + 1), PDF_TYPE, "resume.pdf")


def test_admission_trusts_known_extension_for_generic_type():
    assert check_upload(b"%PDF", "application/octet-stream", "CV.PDF") == PDF_TYPE
    assert check_upload(b"PK", None, "cv.docx") == DOCX_TYPE
    assert check_upload(b"%PDF", PDF_TYPE, None) == PDF_TYPE
