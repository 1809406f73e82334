"""Core types and constants for Tab Transposer."""

from .key import Key, InvalidKeyError, make_key
from .pitch import (
    normalize_note,
    note_index,
    is_alt_spelling,
    is_valid_note,
    pitch_class,
    spell,
)
from .constants import (
    FLAT_NOTES,
    ALT_NOTES,
    ALT_SPELLINGS,
    QUALITIES,
    ALTERATIONS,
    NUM_PITCH_CLASSES,
    DEFAULT_SENTINEL,
)

__all__ = [
    # Key
    "Key",
    "InvalidKeyError",
    "make_key",
    # Pitch model
    "normalize_note",
    "note_index",
    "is_alt_spelling",
    "is_valid_note",
    "pitch_class",
    "spell",
    # Constants
    "FLAT_NOTES",
    "ALT_NOTES",
    "ALT_SPELLINGS",
    "QUALITIES",
    "ALTERATIONS",
    "NUM_PITCH_CLASSES",
    "DEFAULT_SENTINEL",
]
