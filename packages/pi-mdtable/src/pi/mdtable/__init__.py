"""pi-mdtable: Markdown pipe-table formatter."""

from pi.mdtable.config import Config, load_config, save_config
from pi.mdtable.document import TableSpan, find_tables, format_document, table_at_line
from pi.mdtable.layout import (
    determine_column_alignments,
    format_table,
    get_or_default,
    render_cells,
    render_table,
    separator_line,
)
from pi.mdtable.parser import parse_table, split_row
from pi.mdtable.text_block import TextBlock
from pi.mdtable.types import (
    ALIGNMENTS,
    Alignment,
    InvalidArgument,
    NoTableFound,
    ParsedTable,
    StructuralMismatch,
)
from pi.mdtable.utils import visible_width

__all__ = [
    # Types
    "ALIGNMENTS",
    "Alignment",
    "ParsedTable",
    "InvalidArgument",
    "StructuralMismatch",
    "NoTableFound",
    # Text blocks
    "TextBlock",
    "visible_width",
    # Layout
    "determine_column_alignments",
    "render_cells",
    "render_table",
    "format_table",
    "get_or_default",
    "separator_line",
    # Parsing / documents
    "parse_table",
    "split_row",
    "TableSpan",
    "find_tables",
    "table_at_line",
    "format_document",
    # Config
    "Config",
    "load_config",
    "save_config",
]
