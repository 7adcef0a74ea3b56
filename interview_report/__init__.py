from .competency import build_competency_breakdown, competency_comment
from .dimensions import DIMENSIONS, DimensionMeans
from .gaps import identify_top_gaps
from .scoring import estimate_success_probability, mean
from .strengths import identify_strengths
from .synthesizer import SessionSnapshot, synthesize_report
from .types import CompetencyBreakdownItem, InterviewReport, Priority, ReportRef, TopGap

__all__ = [
    "CompetencyBreakdownItem",
    "DIMENSIONS",
    "DimensionMeans",
    "InterviewReport",
    "Priority",
    "ReportRef",
    "SessionSnapshot",
    "TopGap",
    "build_competency_breakdown",
    "competency_comment",
    "estimate_success_probability",
    "identify_strengths",
    "identify_top_gaps",
    "mean",
    "synthesize_report",
]
