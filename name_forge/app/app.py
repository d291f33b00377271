"""Application wiring for the NameForge project."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from name_forge.core import (
    CorpusAnalysis,
    CorpusLoader,
    GeneratedName,
    Name,
    NameGenOptions,
    NameSegment,
    generate,
    to_segments,
)
from name_forge.utils.observability import get_logger


@dataclass(frozen=True)
class PoolSnapshot:
    """Immutable result of one corpus load, shared by every generation call."""

    names: Tuple[Name, ...] = ()
    syllables: Tuple[NameSegment, ...] = ()
    parts: Tuple[NameSegment, ...] = ()

    @classmethod
    def from_analysis(cls, analysis: CorpusAnalysis) -> "PoolSnapshot":
        return cls(
            names=analysis.names,
            syllables=to_segments(analysis.syllables),
            parts=to_segments(analysis.parts),
        )


class NameForgeApp:
    """High-level facade owning the current pool snapshot."""

    def __init__(
        self,
        corpus_path: Optional[Path | str] = None,
        *,
        output_dir: Optional[Path | str] = None,
        loader: Optional[CorpusLoader] = None,
        autoload: bool = True,
    ) -> None:
        self.loader = loader or CorpusLoader(corpus_path, output_dir=output_dir)
        self._snapshot = PoolSnapshot()
        self._logger = get_logger(__name__).bind(component="app_facade")
        self._logger.info(
            "Initialising application facade",
            context={"corpus_path": str(self.loader.corpus_path)},
        )
        if autoload:
            self.reload()

    @property
    def snapshot(self) -> PoolSnapshot:
        return self._snapshot

    def reload(self) -> PoolSnapshot:
        """Re-read the corpus and swap in a fresh snapshot.

        The previous snapshot stays active when the load fails.
        """

        try:
            analysis = self.loader.load()
        except Exception as exc:
            self._logger.error(
                "Corpus reload failed; keeping previous pools",
                context={"error": str(exc), "names": len(self._snapshot.names)},
            )
            raise

        snapshot = PoolSnapshot.from_analysis(analysis)
        self._snapshot = snapshot
        self._logger.info("Pools replaced", context=self.summary())
        return snapshot

    def generate(
        self,
        options: Optional[NameGenOptions] = None,
        rng: Optional[random.Random] = None,
    ) -> List[GeneratedName]:
        snapshot = self._snapshot
        options = options or NameGenOptions()
        try:
            return generate(snapshot.parts, snapshot.syllables, options, rng)
        except Exception as exc:
            self._logger.warning(
                "Name generation failed",
                context={"error": str(exc), "amount": options.amount, "length": options.length},
            )
            raise

    def summary(self) -> Dict[str, int]:
        snapshot = self._snapshot
        return {
            "names": len(snapshot.names),
            "syllables": len(snapshot.syllables),
            "parts": len(snapshot.parts),
        }


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    env_value = os.environ.get("NAME_FORGE_SHARE", "")
    if not env_value:
        return False
    normalized = str(env_value).strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def main() -> None:
    from name_forge.app.ui.gradio import create_interface
    from name_forge.utils.logging_config import configure_logging

    configure_logging()
    app = NameForgeApp()
    interface = create_interface(app)
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=_should_share_interface(),
    )


__all__ = ["PoolSnapshot", "NameForgeApp", "main"]
