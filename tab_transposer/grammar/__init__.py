"""Grammar layer - Recognize chord symbols in text.

Token-level predicates used by the line classifier and the
transposition engine:
- Note and chord-quality validity
- Root extraction
- Slash chord recognition
"""

from ..core import is_valid_note
from .chords import (
    ChordToken,
    find_alteration,
    get_root,
    is_valid_chord_quality,
    is_valid_slash_chord,
    is_valid_chord,
    split_chord,
    parse_chord,
)

__all__ = [
    "ChordToken",
    "find_alteration",
    "get_root",
    "is_valid_note",
    "is_valid_chord_quality",
    "is_valid_slash_chord",
    "is_valid_chord",
    "split_chord",
    "parse_chord",
]
