"""Utility helpers shared across the :mod:`name_forge` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import StructuredLoggerAdapter, get_logger
from .phonotactics import (
    VOWELS,
    capitalize,
    ends_with_consonant,
    starts_with_consonant,
)

__all__ = [
    "configure_logging",
    "StructuredLoggerAdapter",
    "get_logger",
    "VOWELS",
    "capitalize",
    "ends_with_consonant",
    "starts_with_consonant",
]
