"""Key data class - the tonal center a tab is written in or moved to."""

from dataclasses import dataclass

from .constants import ALT_NOTES, FLAT_NOTES
from .pitch import is_alt_spelling, is_valid_note, normalize_note, note_index


class InvalidKeyError(ValueError):
    """Raised when a key name is not a recognized note spelling."""


@dataclass(frozen=True)
class Key:
    """Represents a key by its tonic spelling."""

    name: str  # Raw name as given (e.g., "Bb", "c#")
    pitch_class: int  # Index into the spelling tables (0-11)
    uses_alt: bool  # Name is an alternate (sharp-preferred) spelling

    @classmethod
    def from_name(cls, name: str) -> "Key":
        """Build a key from a note name.

        Raises:
            InvalidKeyError: If the name is not a valid note spelling.
        """
        if not is_valid_note(name):
            raise InvalidKeyError(f"Unknown key: {name!r}")
        return make_key(name)

    @property
    def display_name(self) -> str:
        """Key name with the letter capitalized (e.g., 'Bb', 'F#')."""
        note = normalize_note(self.name)
        return note[:1].upper() + note[1:]

    def __str__(self) -> str:
        return f"{self.display_name}, {self.pitch_class}"


def make_key(name: str) -> Key:
    """Build a key from a name already known to be a valid note."""
    uses_alt = is_alt_spelling(name)
    if uses_alt:
        pc = note_index(ALT_NOTES, name)
    elif normalize_note(name) in FLAT_NOTES:
        pc = note_index(FLAT_NOTES, name)
    else:
        # b# and e# only exist in the alternate table
        pc = note_index(ALT_NOTES, name)
    return Key(name=name, pitch_class=pc, uses_alt=uses_alt)
