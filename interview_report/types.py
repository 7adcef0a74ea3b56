"""Shared type definitions for outcome reports."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:  # Lower rank sorts first
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class CompetencyBreakdownItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    gap: float
    comment: str


class TopGap(BaseModel):
    model_config = ConfigDict(frozen=True)

    gap: str
    priority: Priority
    action: str


class ReportRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime


class InterviewReport(BaseModel):
    """Outcome report synthesized once a session completes.

    Serialized field names are part of the public contract, which is why
    ``session_id`` travels as ``sessionId`` while the rest stay snake_case.
    Containers are tuples and a read-only mapping so a built report cannot
    be edited in place.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    session_overall_score: float
    success_probability: float = Field(ge=0.0, le=1.0)
    competency_breakdown: Mapping[str, CompetencyBreakdownItem]
    top_gaps: Tuple[TopGap, ...] = Field(max_length=3)
    strengths: Tuple[str, ...] = Field(min_length=1)
    report: ReportRef

    @field_validator("competency_breakdown", mode="after")
    @classmethod
    def _freeze_breakdown(cls, value: Mapping[str, CompetencyBreakdownItem]) -> Mapping[str, CompetencyBreakdownItem]:
        return MappingProxyType(dict(value))

    @field_serializer("competency_breakdown")
    def _dump_breakdown(self, value: Mapping[str, CompetencyBreakdownItem]) -> Dict[str, CompetencyBreakdownItem]:
        return dict(value)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "CompetencyBreakdownItem",
    "InterviewReport",
    "Priority",
    "ReportRef",
    "TopGap",
]
