"""Table layout: turns parsed pipe-table cells into an aligned TextBlock.

Each column is rendered on its own (header, rule, body) and the columns are
then joined left to right with ``|`` separators.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence, TypeVar

from pi.mdtable.text_block import TextBlock
from pi.mdtable.types import Alignment, ParsedTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

TraceFn = Callable[[str], None]

MIN_COLUMN_WIDTH = 3


def _pad_cell(s: str) -> str:
    return f" {s} "


# ---------------------------------------------------------------------------
# Default lookups
# ---------------------------------------------------------------------------


def get_or_default(
    container: Mapping[int, T] | Sequence[T],
    index: int,
    default: T | Callable[[], T],
) -> T:
    """Look up *index* in *container*, falling back to *default*.

    Mappings are keyed by column index as-is; sequences are indexed from 1 so
    both kinds of accumulator read the same way. A callable *default* is
    called on every miss so each caller gets a fresh value.
    """
    if isinstance(container, Mapping):
        if index in container:
            return container[index]
    elif 1 <= index <= len(container):
        return container[index - 1]
    return default() if callable(default) else default


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


def alignment_of(delimiter_cell: str) -> Alignment:
    """Alignment encoded by one delimiter-row cell."""
    text = delimiter_cell.strip()
    starts_with_colon = text.startswith(":")
    ends_with_colon = text.endswith(":")

    if starts_with_colon and ends_with_colon:
        return "center"
    if starts_with_colon:
        return "left"
    if ends_with_colon:
        return "right"
    return "none"


def determine_column_alignments(delimiter_cells: Sequence[str]) -> list[Alignment]:
    """Map each delimiter cell to its column alignment, preserving order."""
    return [alignment_of(cell) for cell in delimiter_cells]


def separator_line(alignment: str, width: int) -> str:
    """Rule for a column of *width*: ``width`` dashes plus one decoration each side."""
    dashes = "-" * width
    if alignment == "left":
        return f":{dashes}-"
    if alignment == "center":
        return f":{dashes}:"
    if alignment == "right":
        return f"-{dashes}:"
    return f"-{dashes}-"


# ---------------------------------------------------------------------------
# Cell accumulation
# ---------------------------------------------------------------------------


def render_cells(cells: Sequence[str], accumulator: dict[int, TextBlock]) -> None:
    """Append each trimmed cell as one line of its column's block.

    Columns are keyed from 1. Called once for the header row and once per
    body row, so a column's body block holds one line per row, in order.
    """
    for index, cell in enumerate(cells, start=1):
        block = accumulator.get(index)
        if block is None:
            block = TextBlock()
            accumulator[index] = block
        block.append_line(cell.strip())


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _render_cell_block(source: TextBlock, alignment: str, width: int) -> TextBlock:
    return (
        TextBlock()
        .stack_below(source)
        .align(alignment, width)
        .transform_lines(_pad_cell)
    )


def render_table(
    header_cells: Sequence[str],
    body_rows: Sequence[Sequence[str]],
    alignments: Sequence[Alignment],
    *,
    min_width: int = MIN_COLUMN_WIDTH,
    trace: TraceFn | None = None,
) -> TextBlock:
    """Render a pipe table and return it as one block.

    The result has the header line, the rule and one line per body row, each
    starting and ending with ``|``. Rows may be ragged: the column count is
    the largest of the header, any body row and *alignments*, and missing
    cells render empty. A missing alignment is ``none``.
    """
    column_count = max(
        len(header_cells),
        max((len(row) for row in body_rows), default=0),
        len(alignments),
    )

    headers: dict[int, TextBlock] = {}
    bodies: dict[int, TextBlock] = {}

    render_cells(header_cells, headers)
    for row in body_rows:
        # Short rows get empty cells so later rows stay on their own lines.
        padding = [""] * (column_count - len(row))
        render_cells([*row, *padding], bodies)

    table = TextBlock()

    for i in range(1, column_count + 1):
        header = get_or_default(headers, i, lambda: TextBlock([""]))
        body = get_or_default(bodies, i, TextBlock)
        alignment = get_or_default(alignments, i, "none")

        width = max(min_width, body.width(), header.width())

        column = (
            TextBlock()
            .stack_below(_render_cell_block(header, alignment, width))
            .append_line(separator_line(alignment, width))
            .stack_below(_render_cell_block(body, alignment, width))
        )
        if trace is not None:
            trace(f"column {i}: width={width} alignment={alignment}")

        table.place_left_of(column, separator="|")

    # Close every row with a trailing pipe.
    table.place_left_of(TextBlock(), separator="|")

    if trace is not None:
        table.dump(trace)
    logger.debug("rendered table: %d columns, %d lines", column_count, table.height())
    return table


def format_table(
    parsed: ParsedTable,
    *,
    min_width: int = MIN_COLUMN_WIDTH,
    trace: TraceFn | None = None,
) -> list[str]:
    """Render *parsed* and return the output lines for placement."""
    alignments = determine_column_alignments(parsed.delimiter)
    table = render_table(
        parsed.header,
        parsed.rows,
        alignments,
        min_width=min_width,
        trace=trace,
    )
    return table.lines()
