"""CLI entry point for the copy demonstration.

Usage:
    statecopy-demo                    # repr of both copies
    statecopy-demo --format json      # JSON, one line each
    statecopy-demo --format json --indent 2
"""

from __future__ import annotations

import argparse
import logging
from typing import TextIO

from statecopy.config import DemoSettings
from statecopy.core import AppState, LineItem, UserStatus, deep_copy, mutate, shallow_copy
from statecopy.report import report

logger = logging.getLogger(__name__)


def build_initial_state() -> AppState:
    """Create the demo state: two cart items and a logged-in user."""
    return AppState(
        cart=[
            LineItem(product="bread", quantity=5),
            LineItem(product="pizza", quantity=5),
        ],
        user=UserStatus(logged_in=True),
    )


def run_demo(
    settings: DemoSettings | None = None, stream: TextIO | None = None
) -> tuple[AppState, AppState]:
    """Copy the demo state two ways, mutate the original, and print both copies.

    Args:
        settings: Rendering settings. Loaded from the environment if None.
        stream: Output stream (default stdout).

    Returns:
        Tuple of (shallow_copy, deep_copy) after the mutation.
    """
    settings = settings or DemoSettings()
    state = build_initial_state()

    shallow = shallow_copy(state)
    deep = deep_copy(state)
    mutate(state)
    logger.debug("Original after mutation: %r", state)

    report(shallow, deep, fmt=settings.report_format, indent=settings.indent, stream=stream)
    return shallow, deep


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="statecopy-demo",
        description="Show how a nested mutation reaches a shallow copy but not a deep copy.",
    )
    parser.add_argument("--format", choices=["repr", "json"], dest="report_format")
    parser.add_argument("--indent", type=int)
    args = parser.parse_args(argv)

    overrides = {k: v for k, v in vars(args).items() if v is not None}
    settings = DemoSettings(**overrides)
    logging.basicConfig(level=settings.log_level)
    logging.getLogger("statecopy").setLevel(settings.log_level)

    run_demo(settings)
    return 0
