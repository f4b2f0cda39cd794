from .interactions import ColumnHighlighter, NoteActivator, ScrollRequest, timer_scheduler
from .render import BodyCell, HoverBinding, NoteBinding, RenderResult, build_html, render_table, split_style

__all__ = [
    "BodyCell",
    "ColumnHighlighter",
    "HoverBinding",
    "NoteActivator",
    "NoteBinding",
    "RenderResult",
    "ScrollRequest",
    "build_html",
    "render_table",
    "split_style",
    "timer_scheduler",
]
