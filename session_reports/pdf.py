from __future__ import annotations  # Styled PDF rendering for interview outcome reports

from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from config.settings import settings
from interview_report import InterviewReport, Priority, TopGap

ACCENT = (45, 115, 245)  # Palette accent
TEXT = (34, 34, 34)  # Primary text color
MUTED = (100, 100, 100)  # Secondary text color
RULE = (230, 230, 230)  # Divider color
SOFT_ACCENT_BG = (243, 248, 255)  # Highlight background
ROW_FILL = (247, 250, 255)  # Zebra row fill

PRIORITY_COLORS = {  # Text color per gap priority
    Priority.HIGH: (200, 45, 45),
    Priority.MEDIUM: (210, 130, 20),
    Priority.LOW: (90, 140, 90),
}


def _format_datetime(value: datetime) -> str:  # Format timestamp for display
    return value.strftime("%d %b %Y, %I:%M %p").lstrip("0").replace(" 0", " ")


def _effective_width(pdf: FPDF) -> float:  # Compute effective page width
    return float(pdf.w) - float(pdf.l_margin) - float(pdf.r_margin)


class ReportPDF(FPDF):  # PDF with banner header and paginated footer
    def __init__(self, *args, accent: Tuple[int, int, int] = ACCENT, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.accent = accent
        self.header_title = "Interview Outcome Report"
        self.font_regular = "Helvetica"
        self.font_bold = "Helvetica"
        self.supports_unicode = False

    def use_fonts(self, regular: Optional[str], bold: Optional[str]) -> None:  # Register TTF fonts when configured
        if not regular or not bold:
            return
        self.add_font("ReportSans", "", regular)
        self.add_font("ReportSans", "B", bold)
        self.font_regular = "ReportSans"
        self.font_bold = "ReportSans"
        self.supports_unicode = True

    def prepare_text(self, text: Any) -> str:  # Drop characters core fonts cannot encode
        value = "" if text is None else str(text)
        if self.supports_unicode:
            return value
        return value.replace("•", "-").encode("latin-1", "ignore").decode("latin-1")

    def header(self) -> None:  # Banner on first page, ruled title afterwards
        usable = _effective_width(self)
        title = self.prepare_text(self.header_title)
        if self.page_no() == 1:
            self.set_fill_color(*self.accent)
            self.rect(0, 0, self.w, 18, style="F")
            self.set_text_color(255, 255, 255)
            self.set_xy(self.l_margin, 5)
            self.set_font(self.font_bold, "B", 16)
            self.cell(usable, 8, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_text_color(*TEXT)
            self.ln(6)
            return
        self.set_text_color(80, 80, 80)
        self.set_xy(self.l_margin, 8)
        self.set_font(self.font_bold, "B", 12)
        self.cell(usable, 6, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        mark = self.get_y()
        self.set_draw_color(*self.accent)
        self.set_line_width(0.4)
        self.line(self.l_margin, mark + 1, self.w - self.r_margin, mark + 1)
        self.set_text_color(*TEXT)
        self.ln(4)

    def footer(self) -> None:  # Render footer with pagination
        self.set_y(-12)
        self.set_draw_color(*RULE)
        self.set_line_width(0.2)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_text_color(120, 120, 120)
        self.set_font(self.font_regular, "", 9)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="R")


def _section_title(pdf: ReportPDF, title: str) -> None:  # Render styled section title
    pdf.set_text_color(*TEXT)
    pdf.set_x(pdf.l_margin)
    pdf.set_font(pdf.font_bold, "B", 13)
    pdf.cell(0, 9, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(*RULE)
    pdf.set_line_width(0.2)
    y = pdf.get_y()
    pdf.line(pdf.l_margin, y, pdf.l_margin + _effective_width(pdf), y)
    pdf.ln(2)


def _meta_block(pdf: ReportPDF, rows: List[Tuple[str, str]]) -> None:  # Draw two-column label/value pairs
    col = _effective_width(pdf) / 2.0
    line = 6
    for idx in range(0, len(rows), 2):
        left = rows[idx]
        right = rows[idx + 1] if idx + 1 < len(rows) else ("", "")
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*MUTED)
        pdf.set_font(pdf.font_regular, "", 10)
        pdf.cell(col, line, left[0], new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, line, right[0], new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(*TEXT)
        pdf.set_font(pdf.font_bold, "B", 11)
        pdf.cell(col, line, pdf.prepare_text(left[1]), new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(col, line, pdf.prepare_text(right[1]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(2)


def _table_header(pdf: ReportPDF, headers: Sequence[str], widths: Sequence[float]) -> None:  # Accent header row
    pdf.set_x(pdf.l_margin)
    pdf.set_fill_color(*ACCENT)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font(pdf.font_bold, "B", 10)
    for title, width in zip(headers, widths):
        pdf.cell(width, 8, title, align="L", fill=True)
    pdf.ln(8)
    pdf.set_text_color(*TEXT)


def _empty_note(pdf: ReportPDF, message: str) -> None:  # Muted placeholder line
    pdf.set_x(pdf.l_margin)
    pdf.set_text_color(*MUTED)
    pdf.set_font(pdf.font_regular, "", 10)
    pdf.multi_cell(_effective_width(pdf), 6, message)
    pdf.set_text_color(*TEXT)
    pdf.ln(4)


def _line_count(pdf: ReportPDF, width: float, text: str) -> int:  # Wrapped line count at the current font
    lines = pdf.multi_cell(width, 6, text, dry_run=True, output="LINES")
    return max(1, len(lines))


def _render_breakdown(pdf: ReportPDF, report: InterviewReport) -> None:  # Competency score table
    total = _effective_width(pdf)
    widths = [total * 0.30, total * 0.14, total * 0.14, total * 0.42]
    _table_header(pdf, ["Competency", "Score", "Gap", "Comment"], widths)
    line = 6
    pdf.set_font(pdf.font_regular, "", 10)
    for idx, (name, item) in enumerate(report.competency_breakdown.items()):
        label = pdf.prepare_text(name)
        comment = pdf.prepare_text(item.comment)
        rows = max(_line_count(pdf, widths[0], label), _line_count(pdf, widths[3], comment))
        if pdf.get_y() + rows * line > pdf.page_break_trigger:
            pdf.add_page()
        origin_y = pdf.get_y()
        if idx % 2 == 0:
            pdf.set_fill_color(*ROW_FILL)
            pdf.rect(pdf.l_margin, origin_y, sum(widths), rows * line, style="F")
        pdf.set_xy(pdf.l_margin, origin_y)
        pdf.multi_cell(widths[0], line, label, new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.cell(widths[1], line, f"{item.score:.1f}", align="C")
        pdf.cell(widths[2], line, f"{item.gap:+.1f}", align="C")
        pdf.multi_cell(widths[3], line, comment, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_y(origin_y + rows * line)
    pdf.ln(2)


def _render_gap_row(pdf: ReportPDF, widths: Sequence[float], gap: TopGap) -> None:  # Gap label, priority and action
    line = 6
    label = pdf.prepare_text(gap.gap)
    action = pdf.prepare_text(gap.action)
    pdf.set_font(pdf.font_regular, "", 10)
    rows = max(_line_count(pdf, widths[0], label), _line_count(pdf, widths[2], action))
    if pdf.get_y() + rows * line > pdf.page_break_trigger:
        pdf.add_page()
    origin_y = pdf.get_y()
    pdf.set_x(pdf.l_margin)
    pdf.set_text_color(*TEXT)
    pdf.multi_cell(widths[0], line, label, new_x=XPos.RIGHT, new_y=YPos.TOP)
    pdf.set_text_color(*PRIORITY_COLORS[gap.priority])
    pdf.set_font(pdf.font_bold, "B", 10)
    pdf.multi_cell(widths[1], line, gap.priority.value, align="C", new_x=XPos.RIGHT, new_y=YPos.TOP)
    pdf.set_text_color(*TEXT)
    pdf.set_font(pdf.font_regular, "", 10)
    pdf.multi_cell(widths[2], line, action, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    bottom = origin_y + rows * line
    pdf.set_draw_color(*RULE)
    pdf.line(pdf.l_margin, bottom + 1, pdf.l_margin + sum(widths), bottom + 1)
    pdf.set_y(bottom + 3)


def _render_gaps(pdf: ReportPDF, gaps: Sequence[TopGap]) -> None:  # Top gaps table
    total = _effective_width(pdf)
    widths = [total * 0.36, total * 0.16, total * 0.48]
    _table_header(pdf, ["Gap", "Priority", "Suggested action"], widths)
    if not gaps:
        _empty_note(pdf, "No significant gaps identified.")
        return
    for gap in gaps:
        _render_gap_row(pdf, widths, gap)
    pdf.ln(2)


def _render_strengths(pdf: ReportPDF, strengths: Sequence[str]) -> None:  # Bullet list of strengths
    bullet = "•" if pdf.supports_unicode else "-"
    pdf.set_text_color(*TEXT)
    pdf.set_font(pdf.font_regular, "", 11)
    for strength in strengths:
        pdf.set_x(pdf.l_margin)
        pdf.multi_cell(_effective_width(pdf), 6, pdf.prepare_text(f"{bullet} {strength}"))
    pdf.ln(2)


def _render_probability(pdf: ReportPDF, probability: float) -> None:  # Highlighted success estimate
    width = _effective_width(pdf)
    top = pdf.get_y()
    pdf.set_fill_color(*SOFT_ACCENT_BG)
    pdf.rect(pdf.l_margin, top, width, 16, style="F")
    pdf.set_xy(pdf.l_margin + 6, top + 5)
    pdf.set_text_color(*MUTED)
    pdf.set_font(pdf.font_regular, "", 10)
    pdf.cell(width / 2, 6, "Estimated success probability")
    pdf.set_text_color(*ACCENT)
    pdf.set_font(pdf.font_bold, "B", 14)
    pdf.cell(width / 2 - 12, 6, f"{probability:.0%}", align="R")
    pdf.set_y(top + 20)
    pdf.set_text_color(*TEXT)


def generate_outcome_report_pdf(  # Build PDF payload for an outcome report
    report: InterviewReport,
    *,
    candidate_name: Optional[str] = None,
    job_title: Optional[str] = None,
) -> bytes:
    pdf = ReportPDF()
    pdf.use_fonts(settings.REPORT_FONT_REGULAR, settings.REPORT_FONT_BOLD)
    pdf.alias_nb_pages()
    title_parts = [part for part in (job_title, candidate_name) if part]
    pdf.header_title = " - ".join(title_parts + ["Interview Outcome Report"])
    pdf.set_margins(15, 22, 15)
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()

    _section_title(pdf, "Overview")
    _meta_block(
        pdf,
        [
            ("Session ID", report.session_id),
            ("Report ID", report.report.id),
            ("Created", _format_datetime(report.report.created_at)),
            ("Overall score", f"{report.session_overall_score:.1f}"),
        ],
    )
    _render_probability(pdf, report.success_probability)

    _section_title(pdf, "Competency Breakdown")
    _render_breakdown(pdf, report)

    _section_title(pdf, "Top Gaps")
    _render_gaps(pdf, report.top_gaps)

    _section_title(pdf, "Strengths")
    _render_strengths(pdf, report.strengths)

    return bytes(pdf.output())


__all__ = ["ReportPDF", "generate_outcome_report_pdf"]
