from __future__ import annotations  # Outcome report presentation exports

from .pdf import ReportPDF, generate_outcome_report_pdf

__all__ = ["ReportPDF", "generate_outcome_report_pdf"]
