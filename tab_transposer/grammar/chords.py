"""Chord grammar - Decide whether a word is a chord symbol.

Recognizes chord tokens as they appear in plain-text tabs:
- Notes in either spelling table (naturals, flats, sharps)
- Root plus a quality suffix from a closed vocabulary (e.g., 'Am7', 'Csus4')
- Slash chords with an independent bass note (e.g., 'D/F#')
- Root extraction that keeps altered fifths ('b5#9') out of the root
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional

from ..core import ALTERATIONS, QUALITIES, is_valid_note, normalize_note


@dataclass(frozen=True)
class ChordToken:
    """A chord symbol split into its parts."""

    root: str  # Root spelling as written (e.g., "Bb", "F#")
    quality: str = ""  # Suffix as written (e.g., "m7", "sus4"), "" for major
    bass: Optional[str] = None  # Bass note of a slash chord

    @property
    def is_slash(self) -> bool:
        return self.bass is not None

    @property
    def symbol(self) -> str:
        """Rebuild the chord symbol (e.g., 'Am7', 'D/F#')."""
        symbol = f"{self.root}{self.quality}"
        if self.bass is not None:
            symbol += f"/{self.bass}"
        return symbol


def find_alteration(word: str) -> int:
    """
    Find where an altered-fifth quality such as 'b5#9' starts in a word.

    Returns:
        Offset of the first alteration found, or -1 if there is none
    """
    for alteration in ALTERATIONS:
        index = word.find(alteration)
        if index != -1:
            return index
    return -1


def get_root(word: str) -> str:
    """
    Get the root note of a word that may or may not be a chord.

    An accidental right after the letter belongs to the root unless it
    starts an altered fifth: 'Gbb5#9' has root 'Gb', 'Gb5#9' has root 'G'.

    Args:
        word: Candidate chord token

    Returns:
        One or two character root spelling
    """
    alteration_index = find_alteration(word)
    if alteration_index != -1:
        if alteration_index == 2:
            return word[:2]
    elif len(word) > 1 and word[1] in ("b", "#"):
        return word[:2]
    return word[:1]


def is_valid_chord_quality(suffix: str) -> bool:
    """Whether the suffix is empty or a known chord quality."""
    suffix = normalize_note(suffix)
    if not suffix:
        return True
    index = bisect_left(QUALITIES, suffix)
    return index < len(QUALITIES) and QUALITIES[index] == suffix


def is_valid_slash_chord(word: str) -> bool:
    """Whether the word is a chord over a bass note, like 'D/F#' or 'Am7/G'."""
    if word.count("/") != 1:
        return False
    slash_index = word.index("/")
    if slash_index == len(word) - 1:
        return False
    chord, bass = word[:slash_index], word[slash_index + 1:]
    # chord has no slash left, so this recurses at most once
    return is_valid_chord(chord) and is_valid_note(bass)


def is_valid_chord(word: str) -> bool:
    """
    Determine whether a word is a valid chord.

    Args:
        word: Whitespace-delimited token from a line of text

    Returns:
        True for notes, root + known quality, and valid slash chords
    """
    if len(word) == 1:
        return is_valid_note(word)

    if is_valid_slash_chord(word):
        return True

    # Words with a slash may still be 6/9 chords
    root = get_root(word)
    if not is_valid_note(root):
        return False
    if root == word:
        return True
    return is_valid_chord_quality(word[len(root):])


def split_chord(word: str) -> ChordToken:
    """Split a chord symbol into root, quality, and bass without validating it."""
    root = get_root(word)
    if is_valid_slash_chord(word):
        slash_index = word.index("/")
        return ChordToken(
            root=root,
            quality=word[len(root):slash_index],
            bass=word[slash_index + 1:],
        )
    return ChordToken(root=root, quality=word[len(root):])


def parse_chord(word: str) -> Optional[ChordToken]:
    """Parse a chord symbol, returning None if the word is not a chord."""
    if not is_valid_chord(word):
        return None
    return split_chord(word)
