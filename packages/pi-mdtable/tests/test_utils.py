"""Tests for pi.mdtable.utils -- display width measurement."""

from __future__ import annotations

from pi.mdtable.utils import pad_left, pad_right, visible_width


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure the display width of text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_wide_cjk_characters_count_as_two(self) -> None:
        # U+4E16 is a wide character.
        assert visible_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert visible_width("A世B") == 4

    def test_combining_mark_adds_nothing(self) -> None:
        # "e" + COMBINING ACUTE ACCENT is one column.
        assert visible_width("e\u0301") == 1

    def test_accented_precomposed(self) -> None:
        assert visible_width("caf\u00e9") == 4

    def test_emoji_counts_as_two(self) -> None:
        assert visible_width("\U0001F600") == 2

    def test_zwj_sequence_counts_as_two(self) -> None:
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert visible_width(family) == 2

    def test_tab_counts_as_three_spaces(self) -> None:
        assert visible_width("\t") == 3

    def test_control_character_is_zero_width(self) -> None:
        assert visible_width("a\x07") == 1

    def test_repeated_calls_agree(self) -> None:
        # Second call is served from the cache.
        assert visible_width("世界") == visible_width("世界") == 4


class TestUndecodableInput:
    """Lone surrogates stand for undecodable bytes and count one column each."""

    def test_single_surrogate(self) -> None:
        assert visible_width("\udcff") == 1

    def test_surrogates_between_ascii(self) -> None:
        assert visible_width("a\udcff\udcfeb") == 4

    def test_from_surrogateescape_decoding(self) -> None:
        text = b"caf\xff".decode("utf-8", errors="surrogateescape")
        assert visible_width(text) == 4


# ---------------------------------------------------------------------------
# Padding helpers
# ---------------------------------------------------------------------------


class TestPadding:
    """Padding fills up to a display width, not a character count."""

    def test_pad_right_ascii(self) -> None:
        assert pad_right("ab", 5) == "ab   "

    def test_pad_left_ascii(self) -> None:
        assert pad_left("ab", 5) == "   ab"

    def test_pad_right_wide(self) -> None:
        assert pad_right("世", 4) == "世  "

    def test_pad_never_truncates(self) -> None:
        assert pad_right("abcdef", 3) == "abcdef"
        assert pad_left("abcdef", 3) == "abcdef"
