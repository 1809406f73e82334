"""Transposition layer - Pitch-class arithmetic and respelling."""

from .engine import (
    Transposer,
    capitalize_note,
    transpose_note,
    get_interval,
    transpose_chord,
)

__all__ = [
    "Transposer",
    "capitalize_note",
    "transpose_note",
    "get_interval",
    "transpose_chord",
]
