from __future__ import annotations

from ..model.table import NotesMap, Table
from .tokenizer import tokenize


def build_notes_index(table: Table) -> NotesMap:
    """
    Map note id -> note text from a notes table.
    Row 0 is a header and is dropped; ids are kept as raw text.
    Later duplicates overwrite earlier ones.
    """
    notes: NotesMap = {}
    for row in table[1:]:
        if not row:
            continue
        note_id = row[0]
        notes[note_id] = row[1] if len(row) > 1 else ""
    return notes


def parse_notes(text: str) -> NotesMap:
    return build_notes_index(tokenize(text))
