"""Transposition engine - Move notes and chord symbols between keys.

Works on pitch classes: a note's spelling is looked up in the
spelling tables, shifted by the interval between the two keys, and
spelled again in the table the target key uses. Chord qualities are
copied verbatim; only the root and slash bass change.
"""

from ..core import Key, NUM_PITCH_CLASSES, pitch_class, spell
from ..grammar import get_root, is_valid_slash_chord


def capitalize_note(spelling: str) -> str:
    """Uppercase the letter of a spelling, leaving the accidental as is."""
    return spelling[:1].upper() + spelling[1:]


def transpose_note(note: str, interval: int, target_uses_alt: bool) -> str:
    """
    Transpose a note by an interval.

    Args:
        note: Valid note spelling, any case
        interval: Semitones upward (0-11)
        target_uses_alt: Spell the result from the alternate table

    Returns:
        Lowercase spelling of the transposed note
    """
    return spell((pitch_class(note) + interval) % NUM_PITCH_CLASSES, target_uses_alt)


def get_interval(old_key: Key, new_key: Key) -> int:
    """Semitones upward from the old key to the new key (0-11)."""
    return (new_key.pitch_class - old_key.pitch_class) % NUM_PITCH_CLASSES


def transpose_chord(
    chord: str,
    old_key: Key,
    new_key: Key,
    legacy_slash_offsets: bool = False,
) -> str:
    """
    Transpose a valid chord symbol from one key to another.

    Args:
        chord: Chord symbol (e.g., 'Am7', 'D/F#')
        old_key: Key the chord is written in
        new_key: Key to transpose to
        legacy_slash_offsets: Slice slash-chord qualities at fixed offsets,
            reproducing the original program's output ('Bbmaj7#11/A' from
            A to F gives 'F#maj7#11/AF')

    Returns:
        Transposed chord symbol with the quality unchanged
    """
    root = get_root(chord)
    interval = get_interval(old_key, new_key)
    use_alt = new_key.uses_alt

    new_root = capitalize_note(transpose_note(root, interval, use_alt))

    if is_valid_slash_chord(chord):
        slash_index = chord.index("/")
        new_bass = capitalize_note(
            transpose_note(chord[slash_index + 1:], interval, use_alt)
        )
        if legacy_slash_offsets:
            span = chord[len(root):len(root) + slash_index]
            return new_root + span + new_bass
        return new_root + chord[len(root):slash_index] + "/" + new_bass

    return new_root + chord[len(root):]


class Transposer:
    """Transpose chord symbols between a fixed pair of keys."""

    def __init__(self, old_key: Key, new_key: Key, legacy_slash_offsets: bool = False):
        self.old_key = old_key
        self.new_key = new_key
        self.legacy_slash_offsets = legacy_slash_offsets

    @property
    def interval(self) -> int:
        return get_interval(self.old_key, self.new_key)

    def transpose(self, chord: str) -> str:
        return transpose_chord(
            chord,
            self.old_key,
            self.new_key,
            legacy_slash_offsets=self.legacy_slash_offsets,
        )

    def transpose_note(self, note: str) -> str:
        """Transpose a single note, capitalized."""
        return capitalize_note(transpose_note(note, self.interval, self.new_key.uses_alt))
