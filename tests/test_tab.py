"""Tests for chord line detection and whole-tab transposition.

Tests cover:
- Two-word chord line heuristic and its known misclassifications
- Separator-preserving rewrites
- Newline handling
- Statistics and configuration
"""

import pytest

from tab_transposer.core import Key
from tab_transposer.processing import (
    TabTransposer,
    TransposeConfig,
    TransposeStats,
    is_chord_line,
    split_lines,
    split_tokens,
    transpose_tab,
)

SONG = """\
[Verse]
A         D       E
Walking down the road again
A    F#m   D/F#   E
I can see the morning rain
"""


def key(name: str) -> Key:
    return Key.from_name(name)


class TestSplitTokens:
    """Test (separator, word) tokenization."""

    def test_pairs(self):
        """Trailing whitespace should become a pair with an empty word."""
        assert split_tokens("  C  G ") == [("  ", "C"), ("  ", "G"), (" ", "")]

    def test_empty_line(self):
        assert split_tokens("") == []

    @pytest.mark.parametrize("line", ["A D E", "  Am\tG  ", "x", "   ", "C G\r"])
    def test_pieces_rebuild_the_line(self, line):
        """Joining the pairs should give back the exact line."""
        assert "".join(sep + word for sep, word in split_tokens(line)) == line


class TestIsChordLine:
    """Test the chord line heuristic."""

    def test_chord_line(self):
        """Lines led by two chords should be chord lines."""
        assert is_chord_line("A D E")
        assert is_chord_line("  Am7     G/B    C")

    def test_lyric_starting_with_a_chord_letter(self):
        """A leading 'A' alone does not make a chord line."""
        assert not is_chord_line("A Movie Script Ending")

    def test_single_chord_is_a_chord_line(self):
        """A lone word is checked in both leading positions."""
        assert is_chord_line("A")
        assert is_chord_line("   Am   ")
        assert is_chord_line("G")
        assert not is_chord_line("Hello")
        assert not is_chord_line("Chorus")

    def test_blank_lines(self):
        """Lines without words are never chord lines."""
        assert not is_chord_line("")
        assert not is_chord_line("    ")

    def test_label_before_chords_is_not_a_chord_line(self):
        """Known limitation: a label as the first word hides the chords."""
        assert not is_chord_line("Intro: C G")

    def test_repeated_initial_title_is_a_chord_line(self):
        """Known limitation: 'B B King' looks like two chords."""
        assert is_chord_line("B B King")

    def test_only_leading_words_are_checked(self):
        assert is_chord_line("C G whatever follows")

    def test_custom_token_count(self):
        """The number of leading words to check is configurable."""
        assert is_chord_line("A", num_tokens=1)
        assert not is_chord_line("C G lyric", num_tokens=3)
        assert is_chord_line("C G", num_tokens=3)


class TestSplitLines:
    """Test newline splitting."""

    def test_trailing_newline_is_not_a_line(self):
        """A final newline should not produce an empty last line."""
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_no_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_blank_lines_are_kept(self):
        assert split_lines("\n\n") == ["", ""]

    def test_empty_text(self):
        assert split_lines("") == []


class TestTransposeTab:
    """Test whole-tab transposition."""

    def test_simple_chord_line(self):
        assert transpose_tab("A D E", key("A"), key("C")) == "C F G\n"

    def test_repeated_chord_is_rewritten_once_per_occurrence(self):
        """Each occurrence should be rewritten in place."""
        assert transpose_tab(" C  C ", key("A"), key("B")) == " D  D \n"

    def test_single_chord_lines_are_transposed(self):
        """A line holding one chord, such as a closing chord, should move too."""
        assert transpose_tab("A D E\nla la\nA\n", key("A"), key("C")) == "C F G\nla la\nC\n"
        assert transpose_tab("   Am   ", key("A"), key("C")) == "   Cm   \n"

    def test_single_word_lyric_passes_through(self):
        assert transpose_tab("Hallelujah\n", key("A"), key("C")) == "Hallelujah\n"

    def test_label_line_passes_through(self):
        """Lines led by a label should be left alone."""
        assert transpose_tab("Intro: C G", key("A"), key("C")) == "Intro: C G\n"

    def test_song(self):
        """A short song should have only its chord lines rewritten."""
        expected = (
            "[Verse]\n"
            "C         F       G\n"
            "Walking down the road again\n"
            "C    Am   F/A   G\n"
            "I can see the morning rain\n"
        )
        assert transpose_tab(SONG, key("A"), key("C")) == expected

    def test_non_chord_lines_are_byte_identical(self):
        """Lyrics, labels, and blank lines should not change."""
        text = "Verse 1:\n  la la la  \n\n\tCapo 2\n"
        assert transpose_tab(text, key("A"), key("E")) == text

    def test_spacing_is_preserved_when_lengths_change(self):
        """Separators should be kept even when chord lengths differ."""
        assert transpose_tab("Bb  E", key("A"), key("C#")) == "D  G#\n"
        assert transpose_tab("F#m   Bm", key("A"), key("G")) == "Em   Am\n"

    def test_non_chord_words_in_chord_line_are_kept(self):
        """Bar lines and repeat marks should pass through untouched."""
        assert transpose_tab("C G | Am x2", key("A"), key("B")) == "D A | Bm x2\n"

    def test_adds_final_newline(self):
        """Every output line should end with a newline."""
        assert transpose_tab("A D\nla la", key("A"), key("C")) == "C F\nla la\n"

    def test_empty_text(self):
        assert transpose_tab("", key("A"), key("C")) == ""

    def test_crlf_lines_keep_their_carriage_return(self):
        """Carriage returns should stay at the end of each line."""
        assert transpose_tab("C G\r\nla\r\n", key("A"), key("B")) == "D A\r\nla\r\n"

    def test_title_false_positive(self):
        """Known limitation: repeated initials get transposed."""
        assert transpose_tab("B B King", key("A"), key("B")) == "Db Db King\n"

    def test_known_imprecise_chords_do_not_raise(self):
        """Unsupported spellings should be copied without error."""
        result = transpose_tab("AM G D6/9/A C(no5)", key("A"), key("C"))
        assert result == "CM Bb D6/9/A C(no5)\n"


class TestTabTransposer:
    """Test the configurable transposer."""

    def test_stats(self):
        """Stats should count lines, chords, and skipped words."""
        text = "Title\nC G | Am\nAm x\n"
        transposer = TabTransposer(key("A"), key("B"))
        result, stats = transposer.transpose(text, return_stats=True)

        assert result == "Title\nD A | Bm\nAm x\n"
        assert isinstance(stats, TransposeStats)
        assert stats.total_lines == 3
        assert stats.chord_lines == 1
        assert stats.chords_transposed == 3
        assert stats.tokens_skipped == 1
        assert stats.text_lines == 2

    def test_default_config(self):
        """Defaults should be the two-word rule and correct slash slicing."""
        transposer = TabTransposer(key("A"), key("C"))
        assert transposer.config == TransposeConfig()
        assert transposer.interval == 3

    def test_single_token_chord_lines(self):
        config = TransposeConfig(chord_line_tokens=1)
        transposer = TabTransposer(key("A"), key("C"), config=config)
        assert transposer.transpose("   Am\n") == "   Cm\n"

    def test_legacy_slash_offsets(self):
        """The legacy flag should reach every chord in the tab."""
        config = TransposeConfig(legacy_slash_offsets=True)
        transposer = TabTransposer(key("A"), key("F"), config=config)
        assert transposer.transpose("Bbmaj7#11/A E") == "F#maj7#11/AF C\n"

    def test_transpose_line(self):
        """Single lines should come back without a newline."""
        transposer = TabTransposer(key("G"), key("A"))
        assert transposer.transpose_line("G  C  D") == "A  D  E"
        assert transposer.transpose_line("Go tell it") == "Go tell it"
