"""Core type definitions for pi-mdtable."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Alignment = Literal["left", "right", "center", "none"]

ALIGNMENTS: tuple[Alignment, ...] = ("left", "right", "center", "none")


@dataclass
class ParsedTable:
    """Raw cell text of one pipe table, as split from its source lines."""

    header: list[str] = field(default_factory=list)
    delimiter: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


class InvalidArgument(ValueError):
    """Malformed construction parameters (e.g. a negative repeat count)."""


class StructuralMismatch(ValueError):
    """Text is not a valid pipe table (bad or missing delimiter row)."""


class NoTableFound(LookupError):
    """No pipe table exists at the requested position of a document."""
