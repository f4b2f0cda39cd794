# comparetable/extract/tokenizer.py

from __future__ import annotations

from typing import List

from ..model.table import Row, Table

QUOTE = '"'
DELIM = ","
ROW_ENDS = ("\n", "\r")


def tokenize(text: str) -> Table:
    """
    Split delimited text into rows of trimmed cells.

    Never raises: stray or unterminated quotes and ragged rows degrade
    to best-effort cells. Row terminators that would produce an empty
    row (CRLF pairs, blank lines) are skipped.
    """
    rows: Table = []
    row: Row = []
    cell: List[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if ch == QUOTE:
            if in_quotes and i + 1 < n and text[i + 1] == QUOTE:
                cell.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == DELIM and not in_quotes:
            row.append("".join(cell).strip())
            cell = []
        elif ch in ROW_ENDS and not in_quotes:
            if row or cell:
                row.append("".join(cell).strip())
                rows.append(row)
            row = []
            cell = []
        else:
            cell.append(ch)

        i += 1

    # last row without a trailing newline (or inside an unterminated quote)
    if row or cell:
        row.append("".join(cell).strip())
        rows.append(row)

    return rows
