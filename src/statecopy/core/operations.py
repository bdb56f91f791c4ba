"""Pure functions for copying and mutating state.

Two copy strategies are provided. `shallow_copy` rebinds the top-level fields on
a new record and leaves nested containers shared. `deep_copy` clones every level.
"""

from __future__ import annotations

import copy
import dataclasses
import logging

from statecopy.core.models import AppState
from statecopy.core.types import Copy, Shallow

logger = logging.getLogger(__name__)


def shallow_copy(state: AppState) -> Shallow[AppState]:
    """Copy the top-level field bindings of a state onto a new record.

    Args:
        state: State to copy. Not modified.

    Returns:
        New AppState whose `cart` and `user` are the same objects as in `state`.
    """
    result = dataclasses.replace(state)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Shallow copy shares %s", shared_paths(state, result))
    return result


def deep_copy(state: AppState) -> Copy[AppState]:
    """Clone a state at every level of nesting.

    The record, its `user`, its `cart` list and every line item are new objects.
    Cycles are handled by the deepcopy memo: a revisited node maps to the copy
    already created for it.

    Args:
        state: State to copy. Not modified.

    Returns:
        Independent AppState sharing no mutable storage with `state`.
    """
    result = copy.deepcopy(state)
    logger.debug("Deep copy of state with %d line items", len(result.cart))
    return result


def mutate(state: AppState) -> None:
    """Log the user out in place.

    Visible through every shallow copy of `state`, never through a deep copy.

    Args:
        state: State to modify.
    """
    state.user.logged_in = False


def shared_paths(a: AppState, b: AppState) -> list[str]:
    """List nested containers two states share by identity.

    Args:
        a: First state.
        b: Second state.

    Returns:
        Dotted paths (`user`, `cart`, `cart[i]`) of objects present in both.
        Empty when the states are independent.
    """
    paths: list[str] = []
    if a.user is b.user:
        paths.append("user")
    if a.cart is b.cart:
        paths.append("cart")
    b_items = {id(item) for item in b.cart}
    paths.extend(f"cart[{i}]" for i, item in enumerate(a.cart) if id(item) in b_items)
    return paths
