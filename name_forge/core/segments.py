"""Dataclasses describing analysed segments and their runtime pool entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from .errors import DataError


APOSTROPHE = "'"

OUTPUT_COLUMNS: Tuple[str, ...] = (
    "segment_kind",
    "str",
    "overall_val",
    "start_val",
    "middle_val",
    "end_val",
    "names",
    "gender_ratio",
)


class SegmentKind(str, Enum):
    """Kind of a name segment; the value is what the output tables store."""

    SYLLABLE = "Syllable"
    PART = "Part"
    APOSTROPHE = "Apostrophe"


def _split_names(value: str) -> Tuple[str, ...]:
    return tuple(name for name in value.split(";") if name)


@dataclass(frozen=True)
class OutputRecord:
    """One row of the syllable or part table produced by corpus analysis."""

    segment_kind: SegmentKind
    text: str
    overall_val: float
    start_val: float
    middle_val: float
    end_val: float
    names: str
    gender_ratio: float

    def as_row(self) -> Dict[str, Any]:
        return {
            "segment_kind": self.segment_kind.value,
            "str": self.text,
            "overall_val": self.overall_val,
            "start_val": self.start_val,
            "middle_val": self.middle_val,
            "end_val": self.end_val,
            "names": self.names,
            "gender_ratio": self.gender_ratio,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any], *, row_number: int | None = None) -> "OutputRecord":
        """Parse a CSV row back into a record, raising :class:`DataError`."""

        missing = [column for column in OUTPUT_COLUMNS if row.get(column) is None]
        if missing:
            raise DataError(f"missing columns: {', '.join(missing)}", row=row_number)

        try:
            kind = SegmentKind(str(row["segment_kind"]).strip())
        except ValueError as exc:
            raise DataError(
                f"unknown segment kind {row['segment_kind']!r}", row=row_number
            ) from exc
        if kind is SegmentKind.APOSTROPHE:
            raise DataError("apostrophes are not stored in output tables", row=row_number)

        scores: Dict[str, float] = {}
        for column in ("overall_val", "start_val", "middle_val", "end_val", "gender_ratio"):
            try:
                scores[column] = float(row[column])
            except (TypeError, ValueError) as exc:
                raise DataError(
                    f"column '{column}' is not a number: {row[column]!r}", row=row_number
                ) from exc

        if not 0.0 <= scores["gender_ratio"] <= 1.0:
            raise DataError(
                f"gender_ratio {scores['gender_ratio']} outside [0, 1]", row=row_number
            )

        return cls(
            segment_kind=kind,
            text=str(row["str"]),
            overall_val=scores["overall_val"],
            start_val=scores["start_val"],
            middle_val=scores["middle_val"],
            end_val=scores["end_val"],
            names=str(row["names"]),
            gender_ratio=scores["gender_ratio"],
        )


@dataclass(frozen=True)
class PositionalData:
    overall: float = 0.0
    start: float = 0.0
    middle: float = 0.0
    end: float = 0.0


@dataclass(frozen=True)
class NameSegment:
    """A syllable, part, or separator as it sits inside a generated name."""

    segment_kind: SegmentKind
    text: str
    derived_names: Tuple[str, ...] = ()
    positional_data: PositionalData = field(default_factory=PositionalData)
    gender_ratio: float = 0.0

    @classmethod
    def apostrophe(cls) -> "NameSegment":
        return cls(segment_kind=SegmentKind.APOSTROPHE, text=APOSTROPHE)

    @classmethod
    def from_record(cls, record: OutputRecord) -> "NameSegment":
        return cls(
            segment_kind=record.segment_kind,
            text=record.text,
            derived_names=_split_names(record.names),
            positional_data=PositionalData(
                overall=record.overall_val,
                start=record.start_val,
                middle=record.middle_val,
                end=record.end_val,
            ),
            gender_ratio=record.gender_ratio,
        )

    @property
    def is_apostrophe(self) -> bool:
        return self.segment_kind is SegmentKind.APOSTROPHE

    def render(self) -> str:
        return APOSTROPHE if self.is_apostrophe else self.text

    def __str__(self) -> str:
        return self.render()


__all__ = [
    "APOSTROPHE",
    "OUTPUT_COLUMNS",
    "SegmentKind",
    "OutputRecord",
    "PositionalData",
    "NameSegment",
]
