"""
Header resolution for AEC results downloads.

AEC files usually start with a one-cell title line (e.g. ``2022 Federal
Election House of Representatives Downloads``) followed by the column
names, but not always.  The resolver looks at the first lines only:

1. Line 1 is the header candidate, unless it has no comma, in which case
   it is a title line and line 2 becomes the candidate.
2. The line after the candidate is compared with it; the longer one wins
   (ties keep the candidate).  A real header row is reliably longer than
   a short title or a short data row in this format.
3. The winning line is tokenized with the data tokenizer.

Missing lines count as empty strings, so a short file simply yields an
empty or partial header and, downstream, no records.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from aec_ingest.parsers.tokenizer import SEPARATOR, tokenize_line


@dataclass(frozen=True)
class ResolvedHeader:
    """The header chosen for one file.

    Attributes:
        columns: Column names in file order.
        index: Read-only mapping column name -> position.  For duplicate
            names the last position wins.
        line_number: Zero-based index of the chosen header line.  Data
            rows are every line after it.
    """

    columns: tuple[str, ...]
    index: Mapping[str, int]
    line_number: int

    @property
    def data_start(self) -> int:
        return self.line_number + 1

    def map_row(self, cells: Sequence[str]) -> dict[str, str]:
        """Pair *cells* with column names by position.

        Cells beyond the last column, and columns beyond the last cell,
        are left out.
        """
        return {
            name: cells[pos] for name, pos in self.index.items() if pos < len(cells)
        }


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and drop a trailing ``\\r`` from each line.

    A final newline does not produce an extra empty line.  Other Unicode
    line boundaries are ordinary characters here, unlike ``str.splitlines``.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _line_at(lines: Sequence[str], i: int) -> str:
    return lines[i] if i < len(lines) else ""


def select_header_line(lines: Sequence[str]) -> int:
    """Return the zero-based index of the header line within *lines*."""
    candidate = 0 if SEPARATOR in _line_at(lines, 0) else 1
    following = candidate + 1
    if len(_line_at(lines, following)) > len(_line_at(lines, candidate)):
        return following
    return candidate


def resolve_header(lines: Sequence[str]) -> ResolvedHeader:
    """Choose the header line of a file and index its column names."""
    line_number = select_header_line(lines)
    columns = tuple(tokenize_line(_line_at(lines, line_number)))
    index = MappingProxyType({name: pos for pos, name in enumerate(columns)})
    return ResolvedHeader(columns=columns, index=index, line_number=line_number)
