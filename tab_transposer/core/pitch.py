"""Pitch model - 12-class chromatic space and its two spelling tables."""

from typing import Sequence

from .constants import ALT_NOTES, ALT_SPELLINGS, FLAT_NOTES, NUM_PITCH_CLASSES


def normalize_note(text: str) -> str:
    """Strip surrounding whitespace and lowercase a note spelling."""
    return text.strip().lower()


def note_index(table: Sequence[str], spelling: str) -> int:
    """
    Get a spelling's index (pitch class) in a spelling table.

    Args:
        table: FLAT_NOTES or ALT_NOTES
        spelling: Note name, any case, surrounding whitespace ignored

    Returns:
        Index in the table, or 0 if the spelling is not present.
        Callers validate spellings first, so the fallback is a
        defensive default rather than a lookup result.
    """
    spelling = normalize_note(spelling)
    for i, name in enumerate(table):
        if name == spelling:
            return i
    return 0


def is_alt_spelling(spelling: str) -> bool:
    """Whether the text is one of the alternate (sharp-preferred) key spellings."""
    return normalize_note(spelling) in ALT_SPELLINGS


def pitch_class(spelling: str) -> int:
    """Pitch class of a spelling, checking the alternate table first."""
    spelling = normalize_note(spelling)
    if spelling in ALT_NOTES:
        return ALT_NOTES.index(spelling)
    return note_index(FLAT_NOTES, spelling)


def spell(pc: int, use_alt: bool) -> str:
    """Lowercase spelling of a pitch class in the chosen table."""
    table = ALT_NOTES if use_alt else FLAT_NOTES
    return table[pc % NUM_PITCH_CLASSES]


def is_valid_note(text: str) -> bool:
    """Whether the text is a note name found in either spelling table."""
    note = normalize_note(text)
    return note in FLAT_NOTES or note in ALT_NOTES
