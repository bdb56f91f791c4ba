"""Core functionality: state models, copy types, and operations."""

from statecopy.core.models import AppState, InvalidStateError, LineItem, UserStatus
from statecopy.core.operations import deep_copy, mutate, shallow_copy, shared_paths
from statecopy.core.types import Copy, Shallow

__all__ = [
    # Types
    "Copy",
    "Shallow",
    # Models
    "AppState",
    "LineItem",
    "UserStatus",
    "InvalidStateError",
    # Operations
    "shallow_copy",
    "deep_copy",
    "mutate",
    "shared_paths",
]
