"""Corpus analysis and name synthesis for NameForge."""

from .aggregator import FrequencyTables, SegmentAccumulator, aggregate
from .corpus_loader import (
    CorpusAnalysis,
    CorpusLoader,
    analyze_corpus,
    read_corpus,
    read_output_records,
    to_segments,
    write_output_records,
)
from .errors import DataError, EmptyPoolError, NameForgeError
from .normalizer import NEUTRAL_GENDER_RATIO, corpus_gender_ratio, normalize_gender
from .segmentation import (
    EnumeratedSplits,
    KnownSplit,
    LoneSplit,
    Name,
    NameRecord,
    PartEntry,
    PartPosition,
    parse_record,
    split_syllables,
)
from .segments import NameSegment, OutputRecord, PositionalData, SegmentKind
from .synthesis import (
    CUTOFF,
    RESERVED_PARTS,
    GeneratedName,
    NameGenOptions,
    WeightedPool,
    build_pools,
    generate,
)

__all__ = [
    "FrequencyTables",
    "SegmentAccumulator",
    "aggregate",
    "CorpusAnalysis",
    "CorpusLoader",
    "analyze_corpus",
    "read_corpus",
    "read_output_records",
    "to_segments",
    "write_output_records",
    "DataError",
    "EmptyPoolError",
    "NameForgeError",
    "NEUTRAL_GENDER_RATIO",
    "corpus_gender_ratio",
    "normalize_gender",
    "EnumeratedSplits",
    "KnownSplit",
    "LoneSplit",
    "Name",
    "NameRecord",
    "PartEntry",
    "PartPosition",
    "parse_record",
    "split_syllables",
    "NameSegment",
    "OutputRecord",
    "PositionalData",
    "SegmentKind",
    "CUTOFF",
    "RESERVED_PARTS",
    "GeneratedName",
    "NameGenOptions",
    "WeightedPool",
    "build_pools",
    "generate",
]
