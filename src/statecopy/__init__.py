"""statecopy: shallow versus deep copies of nested application state.

Usage:
    from statecopy import AppState, LineItem, UserStatus, deep_copy, shallow_copy

    state = AppState(cart=[LineItem("bread", 5)], user=UserStatus(logged_in=True))
    shallow = shallow_copy(state)
    deep = deep_copy(state)

    state.user.logged_in = False
    shallow.user.logged_in  # False, shares `user` with state
    deep.user.logged_in     # True, independent
"""

__version__ = "0.1.0"

# Core primitives
from statecopy.core import (
    AppState,
    Copy,
    InvalidStateError,
    LineItem,
    Shallow,
    UserStatus,
    deep_copy,
    mutate,
    shallow_copy,
    shared_paths,
)

# Configuration
from statecopy.config import DemoSettings

# Demo and reporting
from statecopy.demo import build_initial_state, main, run_demo
from statecopy.report import render_state, report

__all__ = [
    # Version
    "__version__",
    # Core
    "AppState",
    "LineItem",
    "UserStatus",
    "InvalidStateError",
    "Copy",
    "Shallow",
    "shallow_copy",
    "deep_copy",
    "mutate",
    "shared_paths",
    # Config
    "DemoSettings",
    # Demo
    "build_initial_state",
    "run_demo",
    "main",
    "render_state",
    "report",
]
