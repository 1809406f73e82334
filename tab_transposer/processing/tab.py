"""Tab transposition - Rewrite every chord line of a song sheet.

Lines that are not chord lines (lyrics, section labels, blank lines)
pass through unchanged. In chord lines, each word that is a valid
chord is replaced by its transposition; separators and any other
words are kept byte-for-byte.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import Key
from ..grammar import is_valid_chord
from ..transposition import Transposer
from .lines import is_chord_line, split_tokens

logger = logging.getLogger(__name__)


@dataclass
class TransposeConfig:
    """Configuration for tab transposition.

    Attributes:
        legacy_slash_offsets: Reproduce the original fixed-offset slicing of
            slash chords (default: False)
        chord_line_tokens: Leading words that must be chords for a line to
            count as a chord line (default: 2)
    """

    legacy_slash_offsets: bool = False
    chord_line_tokens: int = 2


@dataclass
class TransposeStats:
    """Statistics from a transposition run."""

    total_lines: int = 0
    chord_lines: int = 0
    chords_transposed: int = 0
    tokens_skipped: int = 0  # Non-chord words left alone inside chord lines

    @property
    def text_lines(self) -> int:
        """Lines passed through unchanged."""
        return self.total_lines - self.chord_lines


def split_lines(text: str) -> List[str]:
    """Split text on newlines; a trailing newline does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class TabTransposer:
    """Transpose the chords of a plain-text tab from one key to another."""

    def __init__(
        self,
        old_key: Key,
        new_key: Key,
        config: Optional[TransposeConfig] = None,
    ):
        """Initialize TabTransposer.

        Args:
            old_key: Key the tab is written in
            new_key: Key to transpose to
            config: Optional TransposeConfig
        """
        self.config = config if config is not None else TransposeConfig()
        self.transposer = Transposer(
            old_key,
            new_key,
            legacy_slash_offsets=self.config.legacy_slash_offsets,
        )

    @property
    def old_key(self) -> Key:
        return self.transposer.old_key

    @property
    def new_key(self) -> Key:
        return self.transposer.new_key

    @property
    def interval(self) -> int:
        return self.transposer.interval

    def transpose_line(
        self,
        line: str,
        stats: Optional[TransposeStats] = None,
    ) -> str:
        """Transpose one line; non-chord lines are returned unchanged."""
        if not is_chord_line(line, self.config.chord_line_tokens):
            return line

        if stats is not None:
            stats.chord_lines += 1

        pieces = []
        for separator, word in split_tokens(line):
            pieces.append(separator)
            if not word:
                continue
            if is_valid_chord(word):
                pieces.append(self.transposer.transpose(word))
                if stats is not None:
                    stats.chords_transposed += 1
            else:
                pieces.append(word)
                if stats is not None:
                    stats.tokens_skipped += 1
        return "".join(pieces)

    def transpose(
        self,
        text: str,
        return_stats: bool = False,
    ) -> str | Tuple[str, TransposeStats]:
        """Transpose a whole tab.

        Args:
            text: Tab text, lines separated by newlines
            return_stats: Whether to return transposition statistics

        Returns:
            Transposed text with every line newline-terminated,
            optionally with statistics
        """
        stats = TransposeStats()
        output = []
        for line in split_lines(text):
            stats.total_lines += 1
            output.append(self.transpose_line(line, stats) + "\n")

        logger.debug(
            "Transposed %s -> %s (+%d): %d lines, %d chord lines, %d chords",
            self.old_key.display_name,
            self.new_key.display_name,
            self.interval,
            stats.total_lines,
            stats.chord_lines,
            stats.chords_transposed,
        )

        result = "".join(output)
        if return_stats:
            return result, stats
        return result


def transpose_tab(text: str, old_key: Key, new_key: Key) -> str:
    """Transpose every chord line of a tab from old_key to new_key."""
    return TabTransposer(old_key, new_key).transpose(text)
