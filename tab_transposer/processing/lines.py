"""Line classification - Tell chord lines apart from lyrics and labels."""

import re
from typing import List, Tuple

from ..grammar import is_valid_chord

_WORD_RE = re.compile(r"(\s*)(\S+)")


def split_tokens(line: str) -> List[Tuple[str, str]]:
    """
    Split a line into (separator, word) pairs.

    Joining every separator and word in order rebuilds the line exactly.
    Trailing whitespace is kept as a final pair with an empty word.
    """
    pairs = []
    end = 0
    for match in _WORD_RE.finditer(line):
        pairs.append((match.group(1), match.group(2)))
        end = match.end()
    if end < len(line):
        pairs.append((line[end:], ""))
    return pairs


def is_chord_line(line: str, num_tokens: int = 2) -> bool:
    """
    Determine whether a line of text is made of chords.

    Only the leading words are checked. A lone 'A' opening a lyric
    ("A Movie Script Ending") is a valid chord but 'Movie' is not, so
    two chords in a row are required by default. A line shorter than
    that repeats its last word, so a line holding one chord ("   Am")
    is still a chord line.

    Args:
        line: Line of text without its newline
        num_tokens: Number of leading words that must be chords

    Returns:
        True if the first num_tokens words are all valid chords
    """
    words = line.split()
    if not words:
        return False
    words += [words[-1]] * (num_tokens - len(words))
    return all(is_valid_chord(word) for word in words[:num_tokens])
