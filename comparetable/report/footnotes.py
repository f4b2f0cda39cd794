from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..model.table import FootnoteMarker, NotesMap
from .markup import esc

SHORTHAND = "**"

# ASCII digits only; \d would also accept other Unicode digits
BRACKET_REF_RE = re.compile(r"\[([0-9])\]")

# plain decimal ids only; float() would also take "1_0", "inf", " 1 "
NUMERIC_ID_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


@dataclass(frozen=True)
class FootnoteEntry:
    note_id: str
    element_id: str
    text: str


def expand_shorthand(text: str, shorthand_note_id: str = "3") -> str:
    return text.replace(SHORTHAND, f"[{shorthand_note_id}]")


def resolve_marker(note_id: str, notes: NotesMap) -> FootnoteMarker:
    return FootnoteMarker(note_id=note_id, tooltip=notes.get(note_id))


def marker_html(marker: FootnoteMarker) -> str:
    if not marker.interactive:
        return f"<sup>{marker.note_id}</sup>"
    return f'<sup data-note="{marker.note_id}" title="{esc(marker.tooltip)}">{marker.note_id}</sup>'


def rewrite_footnotes(
    text: str,
    notes: NotesMap,
    *,
    shorthand_note_id: str = "3",
) -> Tuple[str, List[FootnoteMarker]]:
    """
    Replace footnote references with <sup> markers.

    "**" is expanded to "[<shorthand id>]" first, so the shorthand always
    resolves through that note. Returns the rewritten text and the markers
    in the order they appear.
    """
    markers: List[FootnoteMarker] = []

    def _sub(m: re.Match) -> str:
        marker = resolve_marker(m.group(1), notes)
        markers.append(marker)
        return marker_html(marker)

    out = BRACKET_REF_RE.sub(_sub, expand_shorthand(text, shorthand_note_id))
    return out, markers


def note_sort_key(note_id: str) -> Tuple[int, float, str]:
    # numeric ids ascending by value; anything else after them, by text
    if not NUMERIC_ID_RE.fullmatch(note_id):
        return (1, 0.0, note_id)
    return (0, float(note_id), note_id)


def sorted_note_ids(notes: NotesMap) -> List[str]:
    return sorted(notes, key=note_sort_key)


def render_footnote_list(notes: NotesMap, *, id_prefix: str = "note-") -> List[FootnoteEntry]:
    return [
        FootnoteEntry(note_id=k, element_id=f"{id_prefix}{k}", text=notes[k])
        for k in sorted_note_ids(notes)
    ]


def footnote_list_html(entries: List[FootnoteEntry], list_id: Optional[str] = "notes-list") -> str:
    items = "".join(f'<li id="{esc(e.element_id)}">{esc(e.text)}</li>' for e in entries)
    id_attr = f' id="{list_id}"' if list_id else ""
    return f"<ol{id_attr}>{items}</ol>"
