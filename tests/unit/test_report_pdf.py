from datetime import datetime, timezone

import pytest

from interview_report import synthesize_report
from session_reports import ReportPDF, generate_outcome_report_pdf
from session_reports.pdf import _effective_width, _line_count, _render_breakdown


def test_pdf_renders_report(snapshot):
    session = snapshot(
        overall_scores=[45, 52],
        clarity_scores=[4, 5],
        completeness_scores=[6, 6],
        relevance_scores=[3, 4],
        confidence_scores=[5, 6],
        session_overall_score=48.5,
    )
    report = synthesize_report(session, "r-pdf", datetime(2024, 5, 1, 8, 15, tzinfo=timezone.utc))

    payload = generate_outcome_report_pdf(report, candidate_name="Ada Lovelace", job_title="Data Engineer")

    assert isinstance(payload, bytes)
    assert payload.startswith(b"%PDF")
    assert len(payload) > 1000


def test_pdf_without_gaps(snapshot):
    session = snapshot(
        overall_scores=[88],
        clarity_scores=[9],
        completeness_scores=[9],
        relevance_scores=[9],
        confidence_scores=[9],
        session_overall_score=88,
    )
    report = synthesize_report(session, "r-clean", datetime(2024, 5, 1, tzinfo=timezone.utc))

    assert generate_outcome_report_pdf(report).startswith(b"%PDF")


def test_breakdown_comment_wraps_inside_its_column(snapshot):
    session = snapshot(overall_scores=[72], session_overall_score=72)
    report = synthesize_report(session, "r-wrap", datetime(2024, 5, 1, tzinfo=timezone.utc))
    comment = report.competency_breakdown["Overall Performance"].comment
    assert comment == "Strong performance with minor areas for improvement"

    pdf = ReportPDF()
    pdf.set_margins(15, 22, 15)
    pdf.add_page()
    column = _effective_width(pdf) * 0.42
    pdf.set_font(pdf.font_regular, "", 10)
    assert pdf.get_string_width(comment) > column
    assert _line_count(pdf, column, comment) == 2

    start = pdf.get_y()
    _render_breakdown(pdf, report)

    # header row + two wrapped comment lines + spacing
    assert pdf.get_y() - start == pytest.approx(8 + 2 * 6 + 2)
