from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

# A Row is produced only by the tokenizer; row 0 of a Table is the header.
Row = List[str]
Table = List[Row]

# note id (raw column-0 text, never coerced) -> note text
NotesMap = Dict[str, str]


@dataclass(frozen=True)
class StyledCell:
    text: str
    css_class: str = ""


@dataclass(frozen=True)
class FootnoteMarker:
    note_id: str                 # single ASCII digit
    tooltip: Optional[str] = None  # resolved note text, None when unknown

    @property
    def interactive(self) -> bool:
        return self.tooltip is not None


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK

    @property
    def indicator(self) -> str:
        # glyph advertises the switch to the opposite theme
        return "☀" if self is Theme.DARK else "🌙"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Theme"]:
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
