# src/tracking_webhook/parsing/csv_parser.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


def _split_line(line: str) -> List[str]:
    """
    Naive comma split: trims each cell and drops every double quote.
    Commas inside quoted cells are NOT honoured; sheets feeding this hook
    must keep commas out of their cells.
    """
    return [cell.strip().replace('"', "") for cell in line.split(",")]


@dataclass(frozen=True)
class ParsedSheet:
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)

    def row_as_mapping(self, row: Tuple[str, ...]) -> Dict[str, str]:
        """
        Zip headers to cells by position. Short rows pad with "",
        long rows drop their extra cells.
        """
        return {
            header: (row[i] if i < len(row) else "")
            for i, header in enumerate(self.headers)
        }

    def find_row(self, key: str) -> Optional[Dict[str, str]]:
        """First row whose first cell equals `key` exactly, or None."""
        for row in self.rows:
            if row and row[0] == key:
                return self.row_as_mapping(row)
        return None


def parse_csv(text: str) -> ParsedSheet:
    """
    Split exported CSV text into headers and data rows.

    - surrounding whitespace and a leading BOM are trimmed first
    - line 0 is the header row; every later line is a data row
    - CRLF endings are tolerated (the trailing CR is trimmed with the cell)
    """
    lines = text.lstrip("\ufeff").strip().split("\n")
    headers = tuple(_split_line(lines[0]))
    rows = tuple(tuple(_split_line(line)) for line in lines[1:])
    return ParsedSheet(headers=headers, rows=rows)


__all__ = ["ParsedSheet", "parse_csv"]
