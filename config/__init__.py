"""Configuration package for the interview report services."""
from .settings import Settings, settings

__all__ = ["Settings", "settings"]
