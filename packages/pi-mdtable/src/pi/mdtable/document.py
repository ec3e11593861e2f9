"""Locate pipe tables in a Markdown document and splice formatted ones back.

Tables are found with ``markdown-it-py`` (CommonMark plus the GFM table
rule). Only top-level tables are considered: tables inside block quotes or
list items carry container prefixes on every line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from markdown_it import MarkdownIt

from pi.mdtable.config import Config
from pi.mdtable.layout import TraceFn, format_table
from pi.mdtable.parser import NEWLINE_RE, parse_table
from pi.mdtable.types import NoTableFound

logger = logging.getLogger(__name__)

_md_parser = MarkdownIt("commonmark").enable("table")


@dataclass
class TableSpan:
    """Line range of a table in a document: ``start`` inclusive, ``end`` exclusive (0-based)."""

    start: int
    end: int

    def __contains__(self, line: int) -> bool:
        return self.start <= line < self.end


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\r\\n``, ``\\r`` or ``\\n``, keeping line endings.

    These are the breaks markdown-it counts, so indexes match its line maps.
    """
    parts = NEWLINE_RE.split(text)
    endings = NEWLINE_RE.findall(text)
    lines = [part + eol for part, eol in zip(parts, endings)]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def find_tables(text: str) -> list[TableSpan]:
    """Return the line spans of all top-level pipe tables in *text*."""
    spans: list[TableSpan] = []
    for tok in _md_parser.parse(text):
        if tok.type == "table_open" and tok.level == 0 and tok.map:
            spans.append(TableSpan(tok.map[0], tok.map[1]))
    logger.debug("found %d table(s)", len(spans))
    return spans


def table_at_line(spans: list[TableSpan], line: int) -> TableSpan:
    """Return the span containing the 0-based *line*."""
    for span in spans:
        if line in span:
            return span
    raise NoTableFound(f"No table found at line {line + 1}")


def _line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    if line.endswith("\r"):
        return "\r"
    return ""


def _indent_of(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" "))]


def format_document(
    text: str,
    line: int | None = None,
    *,
    config: Config | None = None,
    trace: TraceFn | None = None,
) -> str:
    """Reformat one table of *text* and return the whole document.

    The table containing the 0-based *line* is formatted, or the first table
    when *line* is ``None``. All other lines are returned unchanged, and the
    table keeps its indentation and line endings.

    Raises :class:`NoTableFound` or :class:`StructuralMismatch`.
    """
    config = config or Config()
    spans = find_tables(text)

    if line is None:
        if not spans:
            raise NoTableFound("No table found")
        span = spans[0]
    else:
        span = table_at_line(spans, line)

    source = split_lines(text)
    table_source = source[span.start : span.end]

    parsed = parse_table("".join(table_source))
    rendered = format_table(parsed, min_width=config.min_column_width, trace=trace)

    indent = _indent_of(table_source[0])
    eol = _line_ending(table_source[0]) or "\n"
    replacement = [f"{indent}{row}{eol}" for row in rendered]
    if not _line_ending(table_source[-1]):
        replacement[-1] = replacement[-1][: -len(eol)]

    logger.info("formatted table at lines %d-%d", span.start + 1, span.end)
    return "".join(source[: span.start] + replacement + source[span.end :])
