"""Positional and gender-weighted frequency tables over syllables and parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from .segmentation import KnownSplit, Name, PartEntry, PartPosition

Credit = Tuple[int, float]

# Credit an ambiguous name spreads over all of its split hypotheses.
HYPOTHESIS_BUDGET = 2.0


@dataclass(frozen=True)
class SegmentAccumulator:
    """Frozen tally for one syllable or one ``(value, length)`` part."""

    text: str
    length: int
    start: Tuple[Credit, ...] = ()
    middle: Tuple[Credit, ...] = ()
    end: Tuple[Credit, ...] = ()
    male_count: float = 0.0
    female_count: float = 0.0

    @property
    def start_score(self) -> float:
        return sum(credit for _, credit in self.start)

    @property
    def middle_score(self) -> float:
        return sum(credit for _, credit in self.middle)

    @property
    def end_score(self) -> float:
        return sum(credit for _, credit in self.end)

    @property
    def overall_score(self) -> float:
        return self.start_score + self.middle_score + self.end_score

    def name_indices(self) -> Tuple[int, ...]:
        """Indices of contributing names, de-duplicated in first-seen order."""

        ordered = (index for index, _ in (*self.start, *self.end, *self.middle))
        return tuple(dict.fromkeys(ordered))


@dataclass
class _Builder:
    text: str
    length: int
    start: List[Credit] = field(default_factory=list)
    middle: List[Credit] = field(default_factory=list)
    end: List[Credit] = field(default_factory=list)
    male_count: float = 0.0
    female_count: float = 0.0

    def add_gender(self, name: Name) -> None:
        male, female = gender_credit(name)
        self.male_count += male
        self.female_count += female

    def freeze(self) -> SegmentAccumulator:
        return SegmentAccumulator(
            text=self.text,
            length=self.length,
            start=tuple(self.start),
            middle=tuple(self.middle),
            end=tuple(self.end),
            male_count=self.male_count,
            female_count=self.female_count,
        )


@dataclass(frozen=True)
class FrequencyTables:
    syllables: Tuple[SegmentAccumulator, ...]
    parts: Tuple[SegmentAccumulator, ...]
    male_total: float
    female_total: float


def gender_credit(name: Name) -> Tuple[float, float]:
    """Return the ``(male, female)`` credit one occurrence in ``name`` is worth."""

    if name.is_male:
        return 1.0, 0.0
    if name.is_female:
        return 0.0, 1.0
    return 0.5, 0.5


def _credit_part(builder: _Builder, entry: PartEntry, index: int, credit: float) -> None:
    if entry.position is PartPosition.FIRST:
        builder.start.append((index, credit))
    elif entry.position is PartPosition.SECOND:
        builder.end.append((index, credit))
    else:
        builder.start.append((index, credit / 2.0))
        builder.end.append((index, credit / 2.0))


def part_credit(name: Name) -> float:
    """Credit carried by each of ``name``'s part entries."""

    if isinstance(name.split, KnownSplit):
        return 1.0
    return HYPOTHESIS_BUDGET / len(name.possible_parts)


def aggregate_syllables(names: Sequence[Name]) -> Tuple[SegmentAccumulator, ...]:
    """Tally every syllable occurrence by role, most frequent starters first."""

    builders: Dict[str, _Builder] = {}
    for index, name in enumerate(names):
        last = len(name.syllables) - 1
        for position, syllable in enumerate(name.syllables):
            builder = builders.get(syllable)
            if builder is None:
                builder = builders[syllable] = _Builder(syllable, 1)
            builder.add_gender(name)
            if position == 0:
                builder.start.append((index, 1.0))
            elif position == last:
                builder.end.append((index, 1.0))
            else:
                builder.middle.append((index, 1.0))

    frozen = [builder.freeze() for builder in builders.values()]
    frozen.sort(key=lambda accumulator: accumulator.start_score, reverse=True)
    return tuple(frozen)


def aggregate_parts(names: Sequence[Name]) -> Tuple[SegmentAccumulator, ...]:
    """Tally guaranteed and hypothesised parts with fractional credit."""

    builders: Dict[Tuple[str, int], _Builder] = {}
    for index, name in enumerate(names):
        credit = part_credit(name)
        for entry in name.split.entries:
            builder = builders.get(entry.key)
            if builder is None:
                builder = builders[entry.key] = _Builder(entry.value, entry.len)
            builder.add_gender(name)
            _credit_part(builder, entry, index, credit)

    return tuple(builder.freeze() for builder in builders.values())


def corpus_gender_totals(names: Iterable[Name]) -> Tuple[float, float]:
    """Count whole names per gender; anything not male counts as female."""

    male_total = 0.0
    female_total = 0.0
    for name in names:
        if name.is_male:
            male_total += 1.0
        else:
            female_total += 1.0
    return male_total, female_total


def aggregate(names: Sequence[Name]) -> FrequencyTables:
    male_total, female_total = corpus_gender_totals(names)
    return FrequencyTables(
        syllables=aggregate_syllables(names),
        parts=aggregate_parts(names),
        male_total=male_total,
        female_total=female_total,
    )


__all__ = [
    "HYPOTHESIS_BUDGET",
    "SegmentAccumulator",
    "FrequencyTables",
    "gender_credit",
    "part_credit",
    "aggregate_syllables",
    "aggregate_parts",
    "corpus_gender_totals",
    "aggregate",
]
