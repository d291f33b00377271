"""Corpus-balanced gender scores for syllables and parts."""

from __future__ import annotations

from typing import Optional

from name_forge.utils.observability import get_logger

NEUTRAL_GENDER_RATIO = 0.5

_LOGGER = get_logger(__name__).bind(component="gender_normalizer")


def corpus_gender_ratio(male_total: float, female_total: float) -> Optional[float]:
    """Return ``male_total / female_total`` or ``None`` when either side is empty.

    A corpus made only of one gender has no meaningful balance, so callers fall
    back to :data:`NEUTRAL_GENDER_RATIO` for every segment.
    """

    if male_total <= 0 or female_total <= 0:
        _LOGGER.warning(
            "Corpus lacks one gender; gender ratios fall back to neutral",
            context={"male_total": male_total, "female_total": female_total},
        )
        return None
    return male_total / female_total


def normalize_gender(male_count: float, female_count: float, ratio: Optional[float]) -> float:
    """Return the share of ``male_count`` after rescaling ``female_count``.

    ``0.0`` means the segment only appears in female names and ``1.0`` only in
    male names, once the corpus imbalance captured by ``ratio`` is removed.
    """

    if ratio is None:
        return NEUTRAL_GENDER_RATIO
    adjusted_female = female_count * ratio
    total = male_count + adjusted_female
    if total <= 0:
        return NEUTRAL_GENDER_RATIO
    return min(1.0, max(0.0, male_count / total))


__all__ = ["NEUTRAL_GENDER_RATIO", "corpus_gender_ratio", "normalize_gender"]
