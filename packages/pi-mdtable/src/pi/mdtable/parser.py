"""Split pipe-table source text into raw cells.

Only the table grammar is handled here: rows separated by newlines, cells
separated by unescaped ``|`` and a delimiter row of dashes with optional
colons. Cell contents are passed through untouched.
"""

from __future__ import annotations

import re

from pi.mdtable.types import ParsedTable, StructuralMismatch

_DELIMITER_CELL_RE = re.compile(r"^\s*:?-+:?\s*$")

# Line breaks as markdown-it sees them; other Unicode separators are content.
NEWLINE_RE = re.compile(r"\r\n?|\n")


def _split_unescaped(line: str) -> list[str]:
    """Split *line* on every ``|`` not directly preceded by a backslash.

    This is markdown-it's rule: a pipe right after a backslash is escaped
    even when that backslash follows another one. A pipe inside a code span
    still separates cells unless it is escaped.
    """
    cells: list[str] = []
    current: list[str] = []
    prev = ""

    for ch in line:
        if ch == "|" and prev != "\\":
            cells.append("".join(current))
            current = []
        else:
            current.append(ch)
        prev = ch

    cells.append("".join(current))
    return cells


def split_row(line: str) -> list[str]:
    """Split one table row into its raw (untrimmed) cell texts.

    A single leading and a single trailing pipe are optional and dropped.
    """
    text = line.strip()
    if not text:
        return []

    cells = _split_unescaped(text)
    if text.startswith("|"):
        cells = cells[1:]
    if cells and cells[-1] == "" and text.endswith("|"):
        cells = cells[:-1]
    return cells


def is_delimiter_cell(text: str) -> bool:
    """True if *text* is a delimiter-row cell such as ``---``, ``:--`` or ``-:``."""
    return bool(_DELIMITER_CELL_RE.match(text))


def parse_table(text: str) -> ParsedTable:
    """Parse the source lines of one pipe table.

    The first non-blank line is the header and the second the delimiter
    row; following lines up to the first blank one are body rows, which may
    have any number of cells.

    Raises :class:`StructuralMismatch` if the delimiter row is missing or
    invalid, or its cell count differs from the header's.
    """
    lines = NEWLINE_RE.split(text)
    while lines and not lines[0].strip():
        lines.pop(0)

    if len(lines) < 2:
        raise StructuralMismatch("a table needs a header row and a delimiter row")

    header = split_row(lines[0])
    delimiter = split_row(lines[1])

    if not delimiter or not all(is_delimiter_cell(cell) for cell in delimiter):
        raise StructuralMismatch(f"invalid delimiter row: {lines[1].strip()!r}")
    if len(delimiter) != len(header):
        raise StructuralMismatch(
            f"header has {len(header)} cells but delimiter row has {len(delimiter)}"
        )

    rows: list[list[str]] = []
    for line in lines[2:]:
        if not line.strip():
            break
        rows.append(split_row(line))

    return ParsedTable(header=header, delimiter=delimiter, rows=rows)
