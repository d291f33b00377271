"""Structured logging helpers used across the project."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter that renders structured context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra)
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra)
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(event_context, sort_keys=True, default=str)
            except TypeError:
                payload = json.dumps({str(k): str(v) for k, v in event_context.items()})
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str) -> StructuredLoggerAdapter:
    """Return a project logger; attach context with :meth:`~StructuredLoggerAdapter.bind`."""

    return StructuredLoggerAdapter(logging.getLogger(name), {})


__all__ = ["StructuredLoggerAdapter", "get_logger"]
