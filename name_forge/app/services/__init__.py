"""Presentation services shared by the front-ends."""

from .result_formatter import NameResultFormatter, gender_percentage, gender_text

__all__ = ["NameResultFormatter", "gender_percentage", "gender_text"]
