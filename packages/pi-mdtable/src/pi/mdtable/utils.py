"""Display-width measurement for table cells.

Cells are padded by display columns, not code points: a CJK character or an
emoji occupies two terminal/editor columns, a combining mark none.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _is_surrogate(cp: int) -> bool:
    # Lone surrogates carry undecodable bytes (``surrogateescape``).
    return 0xD800 <= cp <= 0xDFFF


def _codepoint_width(ch: str) -> int:
    """Width of a single codepoint, never negative for printable input."""
    cp = ord(ch)
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    if _is_surrogate(cp):
        return 1
    w = _wcwidth.wcwidth(ch)
    if w < 0:
        # Unassigned or otherwise unknown to wcwidth: one column per unit.
        return 1
    return w


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        return _codepoint_width(g)

    codepoints = list(g)

    # Undecodable bytes never form clusters with their neighbours in a
    # meaningful way; count every unit.
    if any(_is_surrogate(ord(ch)) for ch in codepoints):
        return sum(_codepoint_width(ch) for ch in codepoints)

    for ch in codepoints:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(codepoints[0])

    if first_cp >= 0x1F000:
        return 2

    # Miscellaneous symbols, dingbats
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(codepoints[0])
    if cat.startswith("M"):  # Mark
        return 0
    if cat == "Cf":  # Format
        return 0

    return _codepoint_width(codepoints[0])


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def visible_width(text: str) -> int:
    """Calculate the display width of *text* in columns.

    * Treats tabs as 3 spaces.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    * Never raises: lone surrogates (undecodable input) count one column each.
    """
    if not text:
        return 0

    stripped = text.replace("\t", "   ")

    # Fast ASCII path: all codepoints in 0x20..0x7E
    is_ascii = True
    for ch in stripped:
        cp = ord(ch)
        if cp < 0x20 or cp > 0x7E:
            is_ascii = False
            break

    if is_ascii:
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


def pad_right(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* display columns."""
    return text + " " * max(0, width - visible_width(text))


def pad_left(text: str, width: int) -> str:
    """Left-pad *text* with spaces to *width* display columns."""
    return " " * max(0, width - visible_width(text)) + text
