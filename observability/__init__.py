"""Observability utilities for the interview report stack."""
from .logger import log_event

__all__ = ["log_event"]
