from __future__ import annotations  # Styled PDF rendering for candidate transcripts

from datetime import datetime
from typing import Any, List, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from interview_session.models import Candidate
from interview_session.tiering import difficulty_for

ACCENT = (45, 115, 245)  # Palette accent
TEXT = (34, 34, 34)  # Primary text color
MUTED = (100, 100, 100)  # Secondary text color
RULE = (230, 230, 230)  # Divider color
SOFT_ACCENT_BG = (243, 248, 255)  # Highlight background


def _format_datetime(value: datetime | None) -> str:  # Format timestamp for display
    if not value:
        return "-"
    return value.strftime("%d %b %Y, %I:%M %p").lstrip("0").replace(" 0", " ")


def _effective_width(pdf: FPDF) -> float:  # Compute effective page width
    return float(pdf.w) - float(pdf.l_margin) - float(pdf.r_margin)


class ReportPDF(FPDF):  # PDF with custom header/footer styling
    def __init__(self, title: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.header_title = title

    def _prepare_text(self, text: Any) -> str:  # Core fonts only cover latin-1
        value = "" if text is None else str(text)
        cleaned = value.replace("•", "-").replace("’", "'").replace("“", '"').replace("”", '"')
        return cleaned.encode("latin-1", "replace").decode("latin-1")

    def cell(self, w=None, h=None, text="", *args, **kwargs):
        return super().cell(w, h, self._prepare_text(text), *args, **kwargs)

    def multi_cell(self, w, h=None, text="", *args, **kwargs):
        return super().multi_cell(w, h, self._prepare_text(text), *args, **kwargs)

    def header(self) -> None:  # Render header banner
        if self.page_no() == 1:
            self.set_fill_color(*ACCENT)
            self.rect(0, 0, self.w, 22, style="F")
            self.set_text_color(255, 255, 255)
            self.set_font("Helvetica", "B", 16)
            self.set_xy(self.l_margin, 7)
            self.cell(_effective_width(self), 8, self.header_title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_y(26)
        else:
            self.set_text_color(80, 80, 80)
            self.set_font("Helvetica", "B", 12)
            self.set_xy(self.l_margin, 8)
            self.cell(_effective_width(self), 6, self.header_title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            mark = self.get_y()
            self.set_draw_color(*ACCENT)
            self.set_line_width(0.4)
            self.line(self.l_margin, mark + 1, self.w - self.r_margin, mark + 1)
            self.ln(4)
        self.set_text_color(*TEXT)

    def footer(self) -> None:  # Render footer with pagination
        self.set_y(-12)
        self.set_draw_color(*RULE)
        self.set_line_width(0.2)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_text_color(120, 120, 120)
        self.set_font("Helvetica", "", 9)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="R")


def _section_title(pdf: ReportPDF, title: str) -> None:  # Render styled section title
    pdf.set_text_color(*TEXT)
    pdf.set_x(pdf.l_margin)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(0, 9, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(*RULE)
    pdf.set_line_width(0.2)
    y = pdf.get_y()
    pdf.line(pdf.l_margin, y, pdf.l_margin + _effective_width(pdf), y)
    pdf.ln(2)


def _meta_block(pdf: ReportPDF, rows: List[Tuple[str, str]]) -> None:  # Draw two-column metadata
    col = _effective_width(pdf) / 2.0
    for idx in range(0, len(rows), 2):
        left = rows[idx]
        right = rows[idx + 1] if idx + 1 < len(rows) else ("", "")
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*MUTED)
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(col, 6, left[0], new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, 6, right[0], new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(*TEXT)
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(col, 6, left[1], new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, 6, right[1], new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(2)


def _paragraph(pdf: ReportPDF, text: str, *, muted: bool = False, size: int = 11) -> None:
    pdf.set_x(pdf.l_margin)
    pdf.set_text_color(*(MUTED if muted else TEXT))
    pdf.set_font("Helvetica", "", size)
    pdf.multi_cell(_effective_width(pdf), 6, text or "-", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_text_color(*TEXT)


def _render_exchange(pdf: ReportPDF, candidate: Candidate, index: int) -> None:  # One question block
    question = candidate.questions[index]
    answered = index < len(candidate.answers)
    score = f"{candidate.scores[index]}/10" if answered else "not answered"
    pdf.set_x(pdf.l_margin)
    pdf.set_fill_color(*SOFT_ACCENT_BG)
    pdf.set_font("Helvetica", "B", 11)
    pdf.cell(
        _effective_width(pdf),
        7,
        f"Q{index + 1} ({difficulty_for(index + 1)}) - {score}",
        fill=True,
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    _paragraph(pdf, question.question)
    _paragraph(pdf, f"Answer: {candidate.answers[index] if answered else '-'}", muted=not answered)
    if answered:
        _paragraph(pdf, f"Feedback: {candidate.evaluations[index].feedback}", muted=True, size=10)
    _paragraph(pdf, f"Reference: {question.answer}", muted=True, size=10)
    pdf.ln(3)


def generate_candidate_report_pdf(candidate: Candidate) -> bytes:
    """Render a candidate's score, summary, and per-question transcript as PDF bytes."""

    pdf = ReportPDF(f"Interview Report - {candidate.name or candidate.session_id}")
    pdf.alias_nb_pages()
    pdf.set_auto_page_break(auto=True, margin=16)
    pdf.add_page()

    _meta_block(
        pdf,
        [
            ("Candidate", candidate.name or "-"),
            ("Email", candidate.email or "-"),
            ("Phone", candidate.phone or "-"),
            ("Completed", _format_datetime(candidate.completed_at)),
            ("Final score", f"{candidate.final_score:.1f}/10"),
            ("Outcome", "Terminated early" if candidate.terminated else "Completed"),
        ],
    )

    _section_title(pdf, "Summary")
    _paragraph(pdf, candidate.summary)
    pdf.ln(2)

    _section_title(pdf, "Transcript")
    if not candidate.questions:
        _paragraph(pdf, "No questions were asked in this session.", muted=True)
    for index in range(len(candidate.questions)):
        _render_exchange(pdf, candidate, index)

    return bytes(pdf.output())


__all__ = ["generate_candidate_report_pdf"]
