"""Text measurement and printing helpers.

Widths are measured per grapheme cluster so combining marks, emoji ZWJ
sequences and East Asian wide characters occupy the right number of
cells.
"""

from __future__ import annotations

import enum
import unicodedata
from typing import TYPE_CHECKING

import grapheme
import wcwidth as _wcwidth

if TYPE_CHECKING:
    from tessera.screen import Screen, Style

__all__ = [
    "Align",
    "graphemes",
    "char_width",
    "visible_width",
    "truncate_to_width",
    "print_text",
]


class Align(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


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


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def graphemes(text: str) -> list[str]:
    return list(grapheme.graphemes(text))


def char_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (contains VS16 U+FE0F, ZWJ, skin tones, flags) -> 2
    3. Otherwise delegate to wcwidth for the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies."""
    if not text:
        return 0

    if text.isascii() and text.isprintable():
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = sum(char_width(g) for g in grapheme.graphemes(text))
    return _cache_width(text, total)


def truncate_to_width(text: str, max_width: int) -> str:
    """Return the longest grapheme-aligned prefix of *text* that fits."""
    if max_width <= 0:
        return ""
    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = char_width(g)
        if cols + w > max_width:
            break
        result.append(g)
        cols += w
    return "".join(result)


# ---------------------------------------------------------------------------
# print_text
# ---------------------------------------------------------------------------


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    max_width: int,
    align: Align,
    style: Style,
) -> tuple[int, int]:
    """Print *text* on row *y* within ``[x, x + max_width)``.

    Text wider than *max_width* is cut at a grapheme boundary; the kept
    part is then aligned.  Each cluster's first codepoint becomes the
    cell's main character and the rest its combining characters.

    Returns ``(printed_graphemes, printed_width)``.
    """
    if max_width <= 0 or not text:
        return 0, 0

    text = truncate_to_width(text, max_width)
    width = visible_width(text)

    if align is Align.CENTER:
        x += (max_width - width) // 2
    elif align is Align.RIGHT:
        x += max_width - width

    count = 0
    col = 0
    for g in grapheme.graphemes(text):
        w = char_width(g)
        if w == 0:
            continue
        screen.set_content(x + col, y, g[0], tuple(g[1:]), style)
        col += w
        count += 1
    return count, col
