"""
Render configuration for the comparison page.

Centralizes behavior flags so callers can tune defaults without touching
core logic. The CLI maps its flags onto these fields; library callers can
construct one directly or use the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PREFERS_DARK_ENV = "COMPARETABLE_PREFERS_DARK"
STATE_ENV = "COMPARETABLE_STATE"

_TRUTHY = {"1", "true", "yes", "on", "dark"}


@dataclass(frozen=True)
class ReportConfig:
    # Page
    title: str = "Comparison"

    # Source / output file names
    data_name: str = "data.csv"
    notes_name: str = "notes.csv"
    output_name: str = "index.html"

    # Footnotes: "**" always expands to this note id
    shorthand_note_id: str = "3"
    note_id_prefix: str = "note-"

    # Interaction marks
    hover_class: str = "hover-col"
    active_class: str = "note-active"
    active_seconds: float = 2.0

    # Key under which the browser persists the theme
    theme_storage_key: str = "theme"

    # Insert header/cell text without escaping
    raw_html: bool = False

    def note_element_id(self, note_id: str) -> str:
        return f"{self.note_id_prefix}{note_id}"


def env_prefers_dark(environ: Optional[dict] = None) -> bool:
    env = os.environ if environ is None else environ
    return (env.get(PREFERS_DARK_ENV) or "").strip().lower() in _TRUTHY


def default_state_path(environ: Optional[dict] = None) -> Path:
    env = os.environ if environ is None else environ
    override = (env.get(STATE_ENV) or "").strip()
    if override:
        return Path(override).expanduser()
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "comparetable" / "state.json"
