# riceboard/interchange/csv_parser.py

"""Small CSV reader for feature imports.

Implemented as a character-scanning state machine so quoted cells can carry
commas, line breaks and doubled quotes.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import List

QUOTE = '"'
LF = "\n"
CR = "\r"
BOM = "\ufeff"
_BLANK = " \t"


class _State(Enum):
    FIELD_START = auto()   # before the first character of a cell
    UNQUOTED = auto()      # inside a bare cell
    QUOTED = auto()        # inside "..."
    QUOTE_IN_QUOTED = auto()  # saw '"' inside a quoted cell: escape or close
    AFTER_QUOTED = auto()  # closing quote consumed, waiting for a delimiter


class DelimitedTextParser:
    """Tokenizes text into rows of cell strings.

    - Unquoted cells are trimmed; quoted cells are kept verbatim apart from
      '""' -> '"'.
    - Whitespace before an opening quote is ignored; stray characters after a
      closing quote are appended to the cell.
    - Blank lines are skipped. Carriage returns are dropped everywhere except
      inside quoted cells.
    - An unterminated quote runs to the end of the input.
    """

    def __init__(self, delimiter: str = ",") -> None:
        if len(delimiter) != 1 or delimiter in (QUOTE, LF, CR):
            raise ValueError(f"Invalid delimiter: {delimiter!r}")
        self.delimiter = delimiter

    def parse(self, text: str) -> List[List[str]]:
        self._rows: List[List[str]] = []
        self._row: List[str] = []
        self._cell: List[str] = []
        self._quoted = False

        if text.startswith(BOM):
            text = text[1:]

        state = _State.FIELD_START
        for ch in text:
            if ch == CR and state is not _State.QUOTED:
                continue

            if state is _State.FIELD_START:
                if ch == QUOTE:
                    self._quoted = True
                    state = _State.QUOTED
                elif ch == self.delimiter:
                    self._end_cell()
                elif ch == LF:
                    self._end_row()
                elif ch in _BLANK:
                    pass
                else:
                    self._cell.append(ch)
                    state = _State.UNQUOTED

            elif state is _State.UNQUOTED:
                if ch == self.delimiter:
                    self._end_cell()
                    state = _State.FIELD_START
                elif ch == LF:
                    self._end_row()
                    state = _State.FIELD_START
                else:
                    self._cell.append(ch)

            elif state is _State.QUOTED:
                if ch == QUOTE:
                    state = _State.QUOTE_IN_QUOTED
                else:
                    self._cell.append(ch)

            elif state is _State.QUOTE_IN_QUOTED:
                if ch == QUOTE:
                    self._cell.append(QUOTE)
                    state = _State.QUOTED
                elif ch == self.delimiter:
                    self._end_cell()
                    state = _State.FIELD_START
                elif ch == LF:
                    self._end_row()
                    state = _State.FIELD_START
                elif ch in _BLANK:
                    state = _State.AFTER_QUOTED
                else:
                    self._cell.append(ch)
                    state = _State.AFTER_QUOTED

            else:  # AFTER_QUOTED
                if ch == self.delimiter:
                    self._end_cell()
                    state = _State.FIELD_START
                elif ch == LF:
                    self._end_row()
                    state = _State.FIELD_START
                elif ch not in _BLANK:
                    self._cell.append(ch)

        # flush a final row that was not newline-terminated
        if state is not _State.FIELD_START or self._row:
            self._end_row()

        return self._rows

    def _end_cell(self) -> None:
        value = "".join(self._cell)
        self._row.append(value if self._quoted else value.strip())
        self._cell = []
        self._quoted = False

    def _end_row(self) -> None:
        self._end_cell()
        row = self._row
        self._row = []
        if len(row) == 1 and row[0] == "":
            return
        self._rows.append(row)


def parse_rows(text: str) -> List[List[str]]:
    """Parse comma-separated text into rows of cells."""
    return DelimitedTextParser().parse(text)


__all__ = ["DelimitedTextParser", "parse_rows"]
