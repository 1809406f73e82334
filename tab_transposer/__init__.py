"""Tab Transposer - Move the chords of a plain-text tab to a new key.

Architecture Layers:
    1. core/          - Pitch model, spelling tables, Key
    2. grammar/       - Chord symbol recognition
    3. transposition/ - Pitch-class arithmetic and respelling
    4. processing/    - Chord line detection and whole-tab rewriting
    5. input/         - Console prompts and pasted tab collection
"""

__version__ = "0.1.0"

# Core types
from .core import Key, InvalidKeyError, make_key

# Grammar layer
from .grammar import (
    ChordToken,
    get_root,
    is_valid_note,
    is_valid_chord,
    is_valid_chord_quality,
    is_valid_slash_chord,
    parse_chord,
)

# Transposition layer
from .transposition import Transposer, transpose_note, transpose_chord, get_interval

# Processing layer
from .processing import (
    TabTransposer,
    TransposeConfig,
    TransposeStats,
    is_chord_line,
    transpose_tab,
)

__all__ = [
    # Core
    "Key",
    "InvalidKeyError",
    "make_key",
    # Grammar
    "ChordToken",
    "get_root",
    "is_valid_note",
    "is_valid_chord",
    "is_valid_chord_quality",
    "is_valid_slash_chord",
    "parse_chord",
    # Transposition
    "Transposer",
    "transpose_note",
    "transpose_chord",
    "get_interval",
    # Processing
    "TabTransposer",
    "TransposeConfig",
    "TransposeStats",
    "is_chord_line",
    "transpose_tab",
]
