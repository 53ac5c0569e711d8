"""Final text rendering of a formatted time range."""
from __future__ import annotations

import json

from ..models import FormattedPair, OutputMode


class OutputError(ValueError):
    pass


def render_output(pair: FormattedPair, mode: OutputMode | None = None) -> str:
    if mode is OutputMode.JSON:
        return _render_json(pair)
    if mode is OutputMode.START:
        return str(pair.start)
    if mode is OutputMode.END:
        return str(pair.end)
    return f"Start: {pair.start}\nEnd: {pair.end}"


def _render_json(pair: FormattedPair) -> str:
    # Text pairs serialise as strings, timestamp pairs as numbers.
    try:
        return json.dumps({"start": pair.start, "end": pair.end})
    except (TypeError, ValueError) as exc:
        raise OutputError(f"Error generating JSON output: {exc}") from exc
