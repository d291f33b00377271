"""Weighted sampling of segment pools into new two-part names."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from name_forge.utils.observability import get_logger
from name_forge.utils.phonotactics import (
    capitalize,
    ends_with_consonant,
    starts_with_consonant,
)

from .errors import EmptyPoolError
from .normalizer import NEUTRAL_GENDER_RATIO
from .segments import NameSegment

RESERVED_PARTS: FrozenSet[str] = frozenset({"jin", "fon", "zen", "zul"})
CUTOFF = 2.0
WEIGHT_EXPONENT = 1.0
CLUSTER_CHANCE = 0.05

_LOGGER = get_logger(__name__).bind(component="synthesis")


@dataclass
class NameGenOptions:
    """User-facing knobs for one generation batch.

    ``gender_ratio`` is carried for the front-ends but no sampling step reads
    it yet.
    """

    length: float = 1.0
    amount: int = 10
    gender_ratio: float = 0.5
    omit_reserved: bool = True
    cutoff: float = CUTOFF


@dataclass(frozen=True)
class WeightedPool:
    """Segments paired with their sampling weights, zero weights removed."""

    name: str
    segments: Tuple[NameSegment, ...] = ()
    weights: Tuple[float, ...] = ()

    @classmethod
    def build(
        cls,
        name: str,
        segments: Iterable[NameSegment],
        weight: Callable[[NameSegment], float],
        eligible: Optional[Callable[[NameSegment], bool]] = None,
    ) -> "WeightedPool":
        kept: List[NameSegment] = []
        weights: List[float] = []
        for segment in segments:
            if eligible is not None and not eligible(segment):
                continue
            value = weight(segment)
            if value <= 0:
                continue
            kept.append(segment)
            weights.append(value ** WEIGHT_EXPONENT)
        return cls(name, tuple(kept), tuple(weights))

    def __len__(self) -> int:
        return len(self.segments)

    def sample(self, rng: random.Random) -> NameSegment:
        if not self.segments:
            raise EmptyPoolError(self.name)
        return rng.choices(self.segments, weights=self.weights, k=1)[0]


@dataclass(frozen=True)
class SamplingPools:
    part: WeightedPool
    first: WeightedPool
    second: WeightedPool
    middle: WeightedPool
    open_start: WeightedPool
    open_end: WeightedPool


def _part_weight(segment: NameSegment) -> float:
    data = segment.positional_data
    return (data.start + data.end) / 2.0


def build_pools(
    parts: Sequence[NameSegment],
    syllables: Sequence[NameSegment],
    options: NameGenOptions,
) -> SamplingPools:
    """Filter and weight the segment pools for one generation call."""

    if options.omit_reserved:
        parts = [part for part in parts if part.text not in RESERVED_PARTS]

    cutoff = options.cutoff

    def middle_weight(segment: NameSegment) -> float:
        return segment.positional_data.middle

    return SamplingPools(
        part=WeightedPool.build("part", parts, _part_weight),
        first=WeightedPool.build(
            "first",
            parts,
            lambda segment: segment.positional_data.start,
            lambda segment: segment.positional_data.start > cutoff,
        ),
        second=WeightedPool.build(
            "second",
            parts,
            lambda segment: segment.positional_data.end,
            lambda segment: segment.positional_data.end > cutoff,
        ),
        middle=WeightedPool.build("middle", syllables, middle_weight),
        open_start=WeightedPool.build(
            "open_start",
            syllables,
            middle_weight,
            lambda segment: not starts_with_consonant(segment.text),
        ),
        open_end=WeightedPool.build(
            "open_end",
            syllables,
            middle_weight,
            lambda segment: not ends_with_consonant(segment.text),
        ),
    )


@dataclass(frozen=True)
class GeneratedName:
    """A synthesised name with the segments it was assembled from."""

    elements: Tuple[NameSegment, ...]
    display: str = field(default="", compare=False)

    @classmethod
    def bake(cls, elements: Iterable[NameSegment]) -> "GeneratedName":
        elements = tuple(elements)
        display = capitalize("".join(segment.render() for segment in elements))
        return cls(elements, display)

    @property
    def segments(self) -> Tuple[NameSegment, ...]:
        """Segments without the apostrophe separators."""

        return tuple(segment for segment in self.elements if not segment.is_apostrophe)

    def gender(self) -> float:
        ratios = [segment.gender_ratio for segment in self.segments]
        if not ratios:
            return NEUTRAL_GENDER_RATIO
        return sum(ratios) / len(ratios)

    def references(self) -> List[str]:
        """Every corpus name any segment was derived from, sorted and unique."""

        return sorted({name for segment in self.segments for name in segment.derived_names})

    def __str__(self) -> str:
        return self.display


def _insert_syllables(
    first: NameSegment,
    second: NameSegment,
    probability: float,
    pools: SamplingPools,
    rng: random.Random,
) -> Tuple[List[NameSegment], List[NameSegment]]:
    """Draw the syllables that go after ``first`` and before ``second``.

    Returns the two runs; the right-hand run is ordered as it will be read.
    """

    head: List[NameSegment] = []
    tail: List[NameSegment] = []
    while rng.random() < probability:
        after_first = rng.random() < 0.5
        allow_cluster = rng.random() < CLUSTER_CHANCE
        if after_first:
            neighbour = head[-1] if head else first
            clash = ends_with_consonant(neighbour.text)
            pool = pools.open_start
        else:
            neighbour = tail[0] if tail else second
            clash = starts_with_consonant(neighbour.text)
            pool = pools.open_end
        if allow_cluster or not clash:
            pool = pools.middle

        syllable = pool.sample(rng)
        if after_first:
            head.append(syllable)
        else:
            tail.insert(0, syllable)
        probability /= 1.0 + rng.random()
    return head, tail


def generate_one(pools: SamplingPools, length: float, rng: random.Random) -> GeneratedName:
    if length < 2 and rng.random() > length - 1:
        return GeneratedName.bake([pools.part.sample(rng)])

    first = pools.first.sample(rng)
    second = pools.second.sample(rng)
    head, tail = _insert_syllables(first, second, max(length - 2, 0.0), pools, rng)
    return GeneratedName.bake([first, *head, NameSegment.apostrophe(), *tail, second])


def _require_pools(pools: SamplingPools, length: float) -> None:
    """Raise for any empty pool a batch of this ``length`` can draw from."""

    required: List[WeightedPool] = []
    if length < 2:
        required.append(pools.part)
    if length > 1:
        required.extend((pools.first, pools.second))
    for pool in required:
        if not pool.segments:
            raise EmptyPoolError(pool.name)


def generate(
    parts: Sequence[NameSegment],
    syllables: Sequence[NameSegment],
    options: Optional[NameGenOptions] = None,
    rng: Optional[random.Random] = None,
) -> List[GeneratedName]:
    """Generate ``options.amount`` names from the part and syllable pools.

    Every pool the requested ``length`` can reach must be non-empty, otherwise
    :class:`EmptyPoolError` is raised before anything is sampled;
    ``amount == 0`` yields an empty list without touching the pools.
    """

    options = options or NameGenOptions()
    amount = int(options.amount)
    if amount < 0:
        raise ValueError(f"amount must not be negative: {options.amount}")
    if amount == 0:
        return []

    if rng is None:
        rng = random.Random()
    pools = build_pools(parts, syllables, options)
    _require_pools(pools, float(options.length))
    results = [generate_one(pools, float(options.length), rng) for _ in range(amount)]

    _LOGGER.debug(
        "Generated name batch",
        context={
            "amount": amount,
            "length": options.length,
            "omit_reserved": options.omit_reserved,
            "part_pool": len(pools.part),
            "first_pool": len(pools.first),
            "second_pool": len(pools.second),
        },
    )
    return results


__all__ = [
    "RESERVED_PARTS",
    "CUTOFF",
    "WEIGHT_EXPONENT",
    "CLUSTER_CHANCE",
    "NameGenOptions",
    "WeightedPool",
    "SamplingPools",
    "build_pools",
    "GeneratedName",
    "generate_one",
    "generate",
]
