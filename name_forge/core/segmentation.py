"""Corpus rows, syllable splitting and two-part split enumeration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

from .errors import DataError


CORPUS_COLUMNS: Tuple[str, ...] = (
    "name",
    "clean name",
    "syllables",
    "count",
    "first part",
    "gender",
)

SYLLABLE_DELIMITER = "."
MALE = "m"
FEMALE = "f"


@dataclass(frozen=True)
class NameRecord:
    """One raw row of the corpus table."""

    name: str
    clean_name: str
    syllables: str
    count: int
    first_part: Optional[int]
    gender: str


class PartPosition(str, Enum):
    FIRST = "first"
    SECOND = "second"
    LONE = "lone"


@dataclass(frozen=True)
class PartEntry:
    """A contiguous run of syllables that may stand as one half of a name."""

    value: str
    len: int
    position: PartPosition

    @classmethod
    def first(cls, value: str, length: int) -> "PartEntry":
        return cls(value, length, PartPosition.FIRST)

    @classmethod
    def second(cls, value: str, length: int) -> "PartEntry":
        return cls(value, length, PartPosition.SECOND)

    @classmethod
    def lone(cls, value: str, length: int) -> "PartEntry":
        return cls(value, length, PartPosition.LONE)

    @property
    def key(self) -> Tuple[str, int]:
        return (self.value, self.len)


@dataclass(frozen=True)
class KnownSplit:
    """Authoritative split declared by the corpus."""

    first: PartEntry
    second: PartEntry

    @property
    def entries(self) -> Tuple[PartEntry, ...]:
        return (self.first, self.second)


@dataclass(frozen=True)
class EnumeratedSplits:
    """Every ``(first, second)`` hypothesis for a name without a declared split."""

    hypotheses: Tuple[Tuple[PartEntry, PartEntry], ...]

    @property
    def entries(self) -> Tuple[PartEntry, ...]:
        return tuple(entry for pair in self.hypotheses for entry in pair)


@dataclass(frozen=True)
class LoneSplit:
    """A single-syllable name that can only be used whole."""

    part: PartEntry

    @property
    def entries(self) -> Tuple[PartEntry, ...]:
        return (self.part,)


Split = Union[KnownSplit, EnumeratedSplits, LoneSplit]


def split_syllables(syllables: Tuple[str, ...], first_part: Optional[int] = None) -> Split:
    """Decompose ``syllables`` into its guaranteed, enumerated or lone split.

    A declared ``first_part`` boundary must fall strictly inside the name.
    Without one, every interior boundary becomes an equally likely hypothesis.
    """

    count = len(syllables)
    if count == 0:
        raise ValueError("cannot split a name without syllables")

    if first_part is not None:
        if not 0 < first_part < count:
            raise ValueError(
                f"first part boundary {first_part} outside 1..{count - 1}"
            )
        return KnownSplit(
            PartEntry.first("".join(syllables[:first_part]), first_part),
            PartEntry.second("".join(syllables[first_part:]), count - first_part),
        )

    if count == 1:
        return LoneSplit(PartEntry.lone(syllables[0], 1))

    return EnumeratedSplits(
        tuple(
            (
                PartEntry.first("".join(syllables[:index]), index),
                PartEntry.second("".join(syllables[index:]), count - index),
            )
            for index in range(1, count)
        )
    )


@dataclass(frozen=True)
class Name:
    """A corpus name with its syllables and split decomposition."""

    name: str
    clean_name: str
    syllables: Tuple[str, ...]
    split: Split
    gender: str
    count: int = 1

    @classmethod
    def from_record(cls, record: NameRecord, *, row_number: Optional[int] = None) -> "Name":
        syllables = tuple(record.syllables.split(SYLLABLE_DELIMITER))
        if not record.syllables or any(not syllable for syllable in syllables):
            raise DataError(
                f"name {record.name!r} has empty syllables: {record.syllables!r}",
                row=row_number,
            )
        try:
            split = split_syllables(syllables, record.first_part)
        except ValueError as exc:
            raise DataError(f"name {record.name!r}: {exc}", row=row_number) from exc
        return cls(
            name=record.name,
            clean_name=record.clean_name,
            syllables=syllables,
            split=split,
            gender=record.gender,
            count=record.count,
        )

    @property
    def guaranteed_parts(self) -> Tuple[PartEntry, ...]:
        if isinstance(self.split, KnownSplit):
            return self.split.entries
        return ()

    @property
    def possible_parts(self) -> Tuple[PartEntry, ...]:
        if isinstance(self.split, KnownSplit):
            return ()
        return self.split.entries

    @property
    def is_male(self) -> bool:
        return self.gender == MALE

    @property
    def is_female(self) -> bool:
        return self.gender == FEMALE


def _optional_int(value: Any, column: str, row_number: Optional[int]) -> Optional[int]:
    text = "" if value is None else str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError as exc:
        raise DataError(f"column '{column}' is not an integer: {value!r}", row=row_number) from exc


def parse_record(row: Mapping[str, Any], *, row_number: Optional[int] = None) -> NameRecord:
    """Validate one corpus table row and convert it to a :class:`NameRecord`."""

    missing = [column for column in CORPUS_COLUMNS if column not in row]
    if missing:
        raise DataError(f"missing columns: {', '.join(missing)}", row=row_number)

    name = str(row["name"] or "").strip()
    if not name:
        raise DataError("empty name", row=row_number)

    count = _optional_int(row["count"], "count", row_number)
    if count is None or count < 0:
        raise DataError(f"count must be a non-negative integer: {row['count']!r}", row=row_number)

    gender = str(row["gender"] or "").strip()
    if len(gender) != 1:
        raise DataError(
            f"gender code must be a single character: {row['gender']!r}", row=row_number
        )

    return NameRecord(
        name=name,
        clean_name=str(row["clean name"] or "").strip(),
        syllables=str(row["syllables"] or "").strip().lower(),
        count=count,
        first_part=_optional_int(row["first part"], "first part", row_number),
        gender=gender,
    )


__all__ = [
    "CORPUS_COLUMNS",
    "NameRecord",
    "PartPosition",
    "PartEntry",
    "KnownSplit",
    "EnumeratedSplits",
    "LoneSplit",
    "Split",
    "split_syllables",
    "Name",
    "parse_record",
]
