from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import ReportConfig
from ..model.table import FootnoteMarker, NotesMap, StyledCell, Table, Theme
from .footnotes import FootnoteEntry, footnote_list_html, render_footnote_list, rewrite_footnotes
from .html_assets import CSS, JS
from .markup import esc, text_or_raw

STYLE_SEP = "|"


def split_style(cell: str) -> StyledCell:
    if STYLE_SEP not in cell:
        return StyledCell(text=cell)
    parts = cell.split(STYLE_SEP)
    return StyledCell(text=parts[0], css_class=parts[1])


@dataclass(frozen=True)
class BodyCell:
    html: str
    css_class: str = ""
    markers: Tuple[FootnoteMarker, ...] = ()


@dataclass(frozen=True)
class HoverBinding:
    # row 0 is the header row; the highlight group is the column index
    row: int
    col: int


@dataclass(frozen=True)
class NoteBinding:
    row: int
    col: int
    note_id: str
    target_id: str


@dataclass
class RenderResult:
    header: List[str] = field(default_factory=list)
    body: List[List[BodyCell]] = field(default_factory=list)
    footnotes: List[FootnoteEntry] = field(default_factory=list)
    hover_bindings: List[HoverBinding] = field(default_factory=list)
    note_bindings: List[NoteBinding] = field(default_factory=list)

    def row_lengths(self) -> List[int]:
        return [len(self.header)] + [len(r) for r in self.body]

    def table_html(self, table_id: Optional[str] = "compare-table") -> str:
        ths = "".join(f"<th>{h}</th>" for h in self.header)
        trs = []
        for row in self.body:
            tds = "".join(f'<td class="{esc(c.css_class)}">{c.html}</td>' for c in row)
            trs.append(f"<tr>{tds}</tr>")
        id_attr = f' id="{table_id}"' if table_id else ""
        return (
            f"<table{id_attr}>"
            f"<thead><tr>{ths}</tr></thead>"
            f"<tbody>{''.join(trs)}</tbody>"
            f"</table>"
        )

    def notes_html(self, list_id: Optional[str] = "notes-list") -> str:
        return footnote_list_html(self.footnotes, list_id)


def render_table(table: Table, notes: NotesMap, config: Optional[ReportConfig] = None) -> RenderResult:
    """
    Render a data table plus notes into header/body cells, the ordered
    footnote list and the hover/click bindings a presentation layer wires up.

    Column counts are not validated: ragged rows render as they are.
    """
    cfg = config or ReportConfig()
    result = RenderResult()

    if not table:
        result.footnotes = render_footnote_list(notes, id_prefix=cfg.note_id_prefix)
        return result

    result.header = [text_or_raw(h, cfg.raw_html) for h in table[0]]
    result.hover_bindings.extend(HoverBinding(0, c) for c in range(len(table[0])))

    for r, row in enumerate(table[1:], start=1):
        cells: List[BodyCell] = []
        for c, raw in enumerate(row):
            styled = split_style(raw)
            html_text, markers = rewrite_footnotes(
                text_or_raw(styled.text, cfg.raw_html),
                notes,
                shorthand_note_id=cfg.shorthand_note_id,
            )
            cells.append(BodyCell(html=html_text, css_class=styled.css_class, markers=tuple(markers)))
            result.hover_bindings.append(HoverBinding(r, c))
            for m in markers:
                if m.interactive:
                    result.note_bindings.append(
                        NoteBinding(row=r, col=c, note_id=m.note_id, target_id=cfg.note_element_id(m.note_id))
                    )
        result.body.append(cells)

    result.footnotes = render_footnote_list(notes, id_prefix=cfg.note_id_prefix)
    return result


def page_settings(config: ReportConfig, theme: Theme) -> str:
    # read by the inline script; "</" is escaped so the blob cannot close <script>
    blob = json.dumps(
        {
            "storageKey": config.theme_storage_key,
            "initialTheme": theme.value,
            "hoverClass": config.hover_class,
            "activeClass": config.active_class,
            "activeMs": int(round(config.active_seconds * 1000)),
            "notePrefix": config.note_id_prefix,
        }
    )
    return blob.replace("</", "<\\/")


def build_html(result: RenderResult, config: Optional[ReportConfig] = None, theme: Theme = Theme.LIGHT, *, source_label: str = "") -> str:
    cfg = config or ReportConfig()
    source_html = f"\n  <small>Sources: {esc(source_label)}</small>" if source_label else ""

    return f"""<!doctype html>
<html data-theme="{theme.value}">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width,initial-scale=1"/>
<title>{esc(cfg.title)}</title>
<style>{CSS}</style>
<script id="page-settings" type="application/json">{page_settings(cfg, theme)}</script>
</head>
<body>
<header>
  <h1>{esc(cfg.title)}</h1>
  <button id="theme-toggle" type="button" aria-label="Toggle theme">{theme.indicator}</button>{source_html}
</header>
<main>

<section>
  <div class="table-wrap">
    {result.table_html()}
  </div>
</section>

<section class="notes">
  <h2>Notes</h2>
  {result.notes_html()}
</section>

</main>
<script>{JS}</script>
</body>
</html>
"""
