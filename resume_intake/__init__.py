from __future__ import annotations  # Re-export resume_intake public API

from .admission import ACCEPTED_TYPES, DOCX_TYPE, PDF_TYPE, check_upload
from .parser import ResumeExtraction, extract_text, extract_user_info, parse_resume

__all__ = [
    "ACCEPTED_TYPES",
    "DOCX_TYPE",
    "PDF_TYPE",
    "ResumeExtraction",
    "check_upload",
    "extract_text",
    "extract_user_info",
    "parse_resume",
]
