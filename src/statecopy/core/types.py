"""Core type definitions for statecopy."""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, no nested storage is shared with the
source. Mutating the source at any depth is NOT visible through the copy.
"""

type Shallow[T] = T
"""Type alias indicating a value is a one-level copy.

Top-level fields are rebound on a new record, nested containers are the SAME
objects as in the source. Mutations inside them are visible both ways.
"""
