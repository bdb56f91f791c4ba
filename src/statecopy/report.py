"""Console rendering of states.

Usage:
    report(shallow, deep)                       # repr, one line each
    report(shallow, deep, fmt="json", indent=2) # pretty JSON blocks
"""

from __future__ import annotations

import sys
from typing import TextIO

from pydantic import TypeAdapter

from statecopy.config import ReportFormat
from statecopy.core.models import AppState

_state_adapter: TypeAdapter[AppState] = TypeAdapter(AppState)


def render_state(state: AppState, fmt: ReportFormat = "repr", indent: int | None = None) -> str:
    """Render one state as text.

    Args:
        state: State to render.
        fmt: `repr` for the dataclass representation, `json` for a JSON dump.
        indent: JSON indentation (ignored for repr).

    Returns:
        Rendered text without trailing newline.

    Raises:
        ValueError: If fmt is not a known format.
    """
    if fmt == "repr":
        return repr(state)
    if fmt == "json":
        return _state_adapter.dump_json(state, indent=indent).decode()
    raise ValueError(f"Unknown report format: {fmt!r}")


def report(
    shallow: AppState,
    deep: AppState,
    *,
    fmt: ReportFormat = "repr",
    indent: int | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the shallow copy, then the deep copy, to a stream."""
    out = stream if stream is not None else sys.stdout
    for state in (shallow, deep):
        print(render_state(state, fmt, indent), file=out)
