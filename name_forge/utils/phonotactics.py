"""Letter-level helpers for checking syllable boundaries."""

from __future__ import annotations

__all__ = [
    "VOWELS",
    "capitalize",
    "starts_with_consonant",
    "ends_with_consonant",
]


VOWELS = frozenset("aeiou")


def capitalize(value: str) -> str:
    """Upper-case the first character of ``value`` and leave the rest alone."""

    if not value:
        return ""
    return value[0].upper() + value[1:]


def starts_with_consonant(value: str) -> bool:
    if not value:
        return False
    return value[0].lower() not in VOWELS


def ends_with_consonant(value: str) -> bool:
    if not value:
        return False
    return value[-1].lower() not in VOWELS
