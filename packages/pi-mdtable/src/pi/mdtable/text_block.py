"""Rectangular blocks of text lines that can be measured, aligned and composed.

A :class:`TextBlock` is a list of lines with no implicit trailing newline.
Every mutating method returns ``self`` so calls can be chained::

    TextBlock(["a", "bb"]).align("right").transform_lines(lambda s: f" {s} ")

Blocks passed as arguments are only read; their lines are copied into the
receiving block.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from pi.mdtable.types import InvalidArgument
from pi.mdtable.utils import pad_left, pad_right, visible_width


class TextBlock:
    """An ordered sequence of text lines measured in display columns."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(lines) if lines is not None else []

    @classmethod
    def repeated(cls, text: str, count: int) -> TextBlock:
        """Return a block of *count* lines, each equal to *text*."""
        if count < 0:
            raise InvalidArgument(f"repeat count must be >= 0, got {count}")
        block = cls()
        for _ in range(count):
            block.append_line(text)
        return block

    # -- measurement --------------------------------------------------------

    def height(self) -> int:
        return len(self._lines)

    def width(self) -> int:
        """Display width of the widest line (0 for an empty block)."""
        return max((visible_width(line) for line in self._lines), default=0)

    def lines(self) -> list[str]:
        """Return a copy of the lines."""
        return list(self._lines)

    # -- line insertion -----------------------------------------------------

    def prepend_line(self, text: str) -> TextBlock:
        self._lines.insert(0, text)
        return self

    def append_line(self, text: str) -> TextBlock:
        self._lines.append(text)
        return self

    # -- composition --------------------------------------------------------

    def stack_below(self, other: TextBlock) -> TextBlock:
        """Append *other*'s lines after this block's lines."""
        self._lines.extend(other.lines())
        return self

    def place_left_of(
        self,
        other: TextBlock,
        separator: str = "",
        pad_fill: str = "",
    ) -> TextBlock:
        """Place *other* to the right of this block.

        Example with ``separator="ss"``::

            self:    other:    result:
            aaaa     bbbb      aaaa ssbbbb
            aa         bb      aa   ss  bb
            a                  a    ss
            aaaaa              aaaaass

        If this block is shorter than *other* it first grows with *pad_fill*
        lines. Every line is then right-padded to this block's width as
        measured before that growth, followed by *separator* and the matching
        line of *other* (or nothing once *other* runs out).
        """
        width = self.width()
        other_lines = other.lines()

        while len(self._lines) < len(other_lines):
            self._lines.append(pad_fill)

        for k, line in enumerate(self._lines):
            right = other_lines[k] if k < len(other_lines) else ""
            self._lines[k] = pad_right(line, width) + separator + right
        return self

    # -- per-line transforms ------------------------------------------------

    def align(self, mode: str, min_width: int = 0) -> TextBlock:
        """Trim every line and justify it within ``max(width, min_width)``.

        ``left`` and ``none`` leave trimmed lines as they are (composition
        pads them on the right). ``right`` pads on the left to the full
        width. ``center`` pads on the left with half the free space, rounded
        down, so an odd remainder ends up on the right. Unknown modes behave
        like ``none``.
        """
        width = max(self.width(), min_width)

        aligned: list[str] = []
        for raw in self._lines:
            line = raw.strip()
            if mode == "right":
                line = pad_left(line, width)
            elif mode == "center":
                line = " " * ((width - visible_width(line)) // 2) + line
            aligned.append(line)

        self._lines = aligned
        return self

    def transform_lines(self, f: Callable[[str], str]) -> TextBlock:
        """Replace every line with ``f(line)``."""
        self._lines = [f(line) for line in self._lines]
        return self

    # -- diagnostics --------------------------------------------------------

    def dump(self, emit: Callable[[str], None]) -> TextBlock:
        """Send each line, numbered from 1, to *emit* (e.g. ``logger.debug``)."""
        for k, line in enumerate(self._lines, start=1):
            emit(f"{k}\t{line}")
        return self

    # -- dunder -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextBlock):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f"TextBlock({self._lines!r})"
