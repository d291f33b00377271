"""Markdown rendering for generated name batches."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from name_forge.core import GeneratedName

# Upper bounds (exclusive) for each label; anything above the last is male.
_GENDER_BANDS: Tuple[Tuple[float, str], ...] = (
    (0.05, "female"),
    (0.25, "likely female"),
    (0.35, "slightly female"),
    (0.65, "neutral"),
    (0.75, "slightly male"),
    (0.95, "likely male"),
)


def gender_text(value: float) -> str:
    """Describe a 0 (female) .. 1 (male) score in words."""

    for upper, label in _GENDER_BANDS:
        if value < upper:
            return label
    return "male"


def gender_percentage(value: float) -> str:
    if value > 0.5:
        return f"{value * 100:.0f}% male"
    return f"{(1 - value) * 100:.0f}% female"


class NameResultFormatter:
    """Render generated names and their derivations."""

    def __init__(self, *, max_references: int = 12) -> None:
        self.max_references = max(1, int(max_references))

    def format_summary(self, summary: Dict[str, int]) -> str:
        return (
            f"Names: {summary.get('names', 0)} | "
            f"Syllables: {summary.get('syllables', 0)} | "
            f"Name Parts: {summary.get('parts', 0)}"
        )

    def _truncate(self, values: Sequence[str]) -> str:
        shown = ", ".join(values[: self.max_references])
        if len(values) > self.max_references:
            shown += f", … (+{len(values) - self.max_references})"
        return shown

    def format_details(self, name: GeneratedName) -> str:
        lines: List[str] = [
            f"### {name.display}",
            f"Gender: {gender_percentage(name.gender())} ({gender_text(name.gender())})",
            f"Inspired by: {self._truncate(name.references()) or '_unknown_'}",
        ]
        for segment in name.segments:
            shown = self._truncate(list(segment.derived_names))
            lines.append(f"- `{segment.text}` derived from: {shown or '_unknown_'}")
        return "\n".join(lines)

    def format_results(self, names: Sequence[GeneratedName]) -> str:
        if not names:
            return "No names generated. Raise the amount and try again."
        return "\n\n".join(self.format_details(name) for name in names)

    def as_rows(self, names: Sequence[GeneratedName]) -> List[Dict[str, object]]:
        """Flatten a batch into table rows for dataframe widgets."""

        return [
            {
                "name": name.display,
                "gender": round(name.gender(), 3),
                "gender_label": gender_text(name.gender()),
                "segments": " + ".join(segment.text for segment in name.segments),
            }
            for name in names
        ]


__all__ = ["NameResultFormatter", "gender_text", "gender_percentage"]
