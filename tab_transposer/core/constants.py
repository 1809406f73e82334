"""Global constants for Tab Transposer."""

# Chromatic spellings, index-aligned by pitch class.
# Flat table holds naturals and flat-preferred names.
FLAT_NOTES = ("ab", "a", "bb", "b", "c", "db", "d", "eb", "e", "f", "f#", "g")
# Alternate (sharp-preferred) names for the same pitch classes
ALT_NOTES = ("g#", "a", "a#", "b", "b#", "c#", "d", "d#", "e", "e#", "gb", "g")

# Spellings that select the alternate table when used as a key name
ALT_SPELLINGS = frozenset({"g#", "a#", "c#", "d#", "gb"})

NUM_PITCH_CLASSES = 12

# Chord quality vocabulary (suffix after the root), sorted for bisect lookups
QUALITIES = tuple(sorted({
    "#5#9", "#5b9", "11", "13", "13#11", "13sus", "13sus2", "13sus4",
    "2", "5", "6", "6/9", "7", "7#11", "7#5", "7#9", "7b5", "7b5#9",
    "7b5(#9)", "7b9", "7sus", "7sus2", "7sus4", "9", "9sus", "9sus2",
    "9sus4", "add9", "aug", "aug7#9", "aug9", "b5", "b5#9", "b5b9",
    "dim", "dim7", "m", "m(add9)", "m(maj7)", "m11", "m13", "m6",
    "m6/9", "m7", "m7b5", "m7b9", "m9", "m9(maj7)", "m9m7", "m9b5",
    "m9maj7", "mm7", "madd9", "maj", "maj13", "maj7", "maj7#11", "maj9",
    "major", "mb6", "min", "minor", "mmaj7", "sus", "sus2", "sus4",
}))

# Altered-fifth qualities whose leading accidental can collide with the root
ALTERATIONS = ("b5#9", "b5b9", "#5b9", "#5#9")

# Console front end
DEFAULT_SENTINEL = "end"

WELCOME_TEXT = (
    "Welcome to Tab Transposer.  What is the tonic note in the\n"
    "original key?  (Ex: for the key of A minor you would type 'A')"
)
TARGET_KEY_TEXT = "What is the tonic note in the key you would like to transpose to?"
PASTE_TEXT = (
    'Great, now paste the original tab below and type the word "{sentinel}".\n'
    "(You can use control+V on Windows or command+V on Mac to paste.)"
)
RESULT_RULE = "~/" * 28
RESULT_TEXT = (
    "Here is your transposed tab!  Copy and paste the text below\n"
    "and you are ready to go.  (You can use control+C on Windows or\n"
    "command+C on Mac to copy.)"
)
