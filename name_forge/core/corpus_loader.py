"""Loading the name corpus and emitting the analysed segment tables."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from name_forge.utils.observability import get_logger

from .aggregator import FrequencyTables, SegmentAccumulator, aggregate
from .errors import DataError
from .normalizer import corpus_gender_ratio, normalize_gender
from .segmentation import CORPUS_COLUMNS, Name, NameRecord, parse_record
from .segments import OUTPUT_COLUMNS, NameSegment, OutputRecord, SegmentKind

_CORPUS_ENV = "NAME_FORGE_CORPUS"
_OUTPUT_DIR_ENV = "NAME_FORGE_OUTPUT_DIR"

SYLLABLE_TABLE = "syllable_data.csv"
PART_TABLE = "word_data.csv"


@dataclass(frozen=True)
class CorpusAnalysis:
    """Everything a single corpus load produces."""

    names: Tuple[Name, ...]
    syllables: Tuple[OutputRecord, ...]
    parts: Tuple[OutputRecord, ...]
    male_total: float
    female_total: float


def _read_rows(path: Path, required: Sequence[str]) -> Iterable[Tuple[int, dict]]:
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.DictReader(handle)
            header = reader.fieldnames or []
            missing = [column for column in required if column not in header]
            if missing:
                raise DataError(f"{path.name} is missing columns: {', '.join(missing)}")
            # Row 1 is the header.
            for row_number, row in enumerate(reader, start=2):
                yield row_number, row
    except UnicodeDecodeError as exc:
        raise DataError(f"{path.name} is not valid UTF-8: {exc}") from exc
    except csv.Error as exc:
        raise DataError(f"{path.name} is not a readable CSV table: {exc}") from exc


def read_corpus(path: Path | str) -> List[NameRecord]:
    """Read every corpus row, aborting on the first malformed one."""

    return [
        parse_record(row, row_number=row_number)
        for row_number, row in _read_rows(Path(path), CORPUS_COLUMNS)
    ]


def read_output_records(path: Path | str) -> List[OutputRecord]:
    return [
        OutputRecord.from_row(row, row_number=row_number)
        for row_number, row in _read_rows(Path(path), OUTPUT_COLUMNS)
    ]


def write_output_records(path: Path | str, records: Iterable[OutputRecord]) -> int:
    """Write ``records`` as a CSV table and return the number of rows written."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with target.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(OUTPUT_COLUMNS))
        writer.writeheader()
        for record in records:
            writer.writerow(record.as_row())
            written += 1
    return written


def _emit(
    accumulators: Iterable[SegmentAccumulator],
    kind: SegmentKind,
    names: Sequence[Name],
    ratio: Optional[float],
) -> Tuple[OutputRecord, ...]:
    records = []
    for accumulator in accumulators:
        contributing = [names[index].name for index in accumulator.name_indices()]
        records.append(
            OutputRecord(
                segment_kind=kind,
                text=accumulator.text,
                overall_val=accumulator.overall_score,
                start_val=accumulator.start_score,
                middle_val=accumulator.middle_score,
                end_val=accumulator.end_score,
                names=";".join(contributing),
                gender_ratio=normalize_gender(
                    accumulator.male_count, accumulator.female_count, ratio
                ),
            )
        )
    return tuple(records)


def build_output_records(
    tables: FrequencyTables,
    names: Sequence[Name],
) -> Tuple[Tuple[OutputRecord, ...], Tuple[OutputRecord, ...]]:
    """Normalise the frequency tables into ``(syllable, part)`` records."""

    ratio = corpus_gender_ratio(tables.male_total, tables.female_total)
    return (
        _emit(tables.syllables, SegmentKind.SYLLABLE, names, ratio),
        _emit(tables.parts, SegmentKind.PART, names, ratio),
    )


def analyze_corpus(records: Iterable[NameRecord]) -> CorpusAnalysis:
    names = tuple(Name.from_record(record) for record in records)
    tables = aggregate(names)
    syllables, parts = build_output_records(tables, names)
    return CorpusAnalysis(
        names=names,
        syllables=syllables,
        parts=parts,
        male_total=tables.male_total,
        female_total=tables.female_total,
    )


def to_segments(records: Iterable[OutputRecord]) -> Tuple[NameSegment, ...]:
    return tuple(NameSegment.from_record(record) for record in records)


def default_corpus_path() -> Path:
    """Return the corpus configured in the environment or the packaged one."""

    configured = os.getenv(_CORPUS_ENV)
    if configured:
        return Path(configured)
    return Path(str(resources.files("name_forge").joinpath("data", "syllables.csv")))


class CorpusLoader:
    """Reads a corpus from disk and turns it into analysed segment tables."""

    def __init__(
        self,
        corpus_path: Optional[Path | str] = None,
        *,
        output_dir: Optional[Path | str] = None,
    ) -> None:
        self.corpus_path: Path = (
            Path(corpus_path) if corpus_path is not None else default_corpus_path()
        )
        if output_dir is None:
            output_dir = os.getenv(_OUTPUT_DIR_ENV) or None
        self.output_dir: Optional[Path] = Path(output_dir) if output_dir else None
        self._logger = get_logger(__name__).bind(
            component="corpus_loader",
            corpus_path=str(self.corpus_path),
        )

    def load(self) -> CorpusAnalysis:
        """Parse, analyse and optionally export the corpus in one pass."""

        if not self.corpus_path.exists():
            raise DataError(f"corpus file not found: {self.corpus_path}")

        try:
            analysis = analyze_corpus(read_corpus(self.corpus_path))
        except DataError as exc:
            self._logger.error("Corpus rejected", context={"error": str(exc)})
            raise

        self._logger.info(
            "Corpus analysed",
            context={
                "names": len(analysis.names),
                "syllables": len(analysis.syllables),
                "parts": len(analysis.parts),
                "male_total": analysis.male_total,
                "female_total": analysis.female_total,
            },
        )

        if self.output_dir is not None:
            self.export(analysis, self.output_dir)
        return analysis

    def export(self, analysis: CorpusAnalysis, output_dir: Path | str) -> Tuple[Path, Path]:
        directory = Path(output_dir)
        syllable_path = directory / SYLLABLE_TABLE
        part_path = directory / PART_TABLE
        write_output_records(syllable_path, analysis.syllables)
        write_output_records(part_path, analysis.parts)
        self._logger.info(
            "Segment tables written",
            context={"syllable_table": str(syllable_path), "part_table": str(part_path)},
        )
        return syllable_path, part_path


__all__ = [
    "SYLLABLE_TABLE",
    "PART_TABLE",
    "CorpusAnalysis",
    "CorpusLoader",
    "read_corpus",
    "read_output_records",
    "write_output_records",
    "build_output_records",
    "analyze_corpus",
    "to_segments",
    "default_corpus_path",
]
