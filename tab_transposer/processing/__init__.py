"""Processing layer - Line-level tab rewriting.

This layer applies the chord grammar to text:
- Chord line classification
- Separator-preserving tokenization
- Whole-tab transposition with statistics
"""

from .lines import is_chord_line, split_tokens
from .tab import (
    TabTransposer,
    TransposeConfig,
    TransposeStats,
    split_lines,
    transpose_tab,
)

__all__ = [
    "is_chord_line",
    "split_tokens",
    "TabTransposer",
    "TransposeConfig",
    "TransposeStats",
    "split_lines",
    "transpose_tab",
]
