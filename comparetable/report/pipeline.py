from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config import ReportConfig
from ..extract.pipeline import load_sources
from ..io.csvio import SourceLoadError, write_text
from ..io.fs import locate_sources
from ..io.store import KeyValueStore, MemoryStore
from ..theme import ThemeController
from .render import build_html, render_table

LOGGER = logging.getLogger(__name__)


def run_report(
    *,
    in_dir: Path,
    out_dir: Path,
    config: Optional[ReportConfig] = None,
    data_path: Optional[Path] = None,
    notes_path: Optional[Path] = None,
    store: Optional[KeyValueStore] = None,
    prefers_dark: bool = False,
    quiet: bool = False,
) -> int:
    cfg = config or ReportConfig()
    out_path = out_dir / cfg.output_name

    paths = locate_sources(
        in_dir,
        data_name=cfg.data_name,
        notes_name=cfg.notes_name,
        data=data_path,
        notes=notes_path,
    )

    try:
        sources = load_sources(paths)
    except SourceLoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    theme = ThemeController(
        store if store is not None else MemoryStore(),
        prefers_dark=prefers_dark,
        key=cfg.theme_storage_key,
    ).resolve()

    result = render_table(sources.data, sources.notes, cfg)
    html_doc = build_html(result, cfg, theme, source_label=f"{paths.data.name}, {paths.notes.name}")

    try:
        write_text(out_path, html_doc)
    except OSError as exc:
        print(f"ERROR: could not write {out_path}: {exc}", file=sys.stderr)
        return 2

    if not out_path.exists() or out_path.stat().st_size == 0:
        print("ERROR: page was not written or is empty", file=sys.stderr)
        return 2

    LOGGER.debug(
        "rendered %d body rows, %d footnotes, %d note bindings",
        len(result.body), len(result.footnotes), len(result.note_bindings),
    )
    if not quiet:
        print(f"Wrote page: {out_path} ({out_path.stat().st_size} bytes)")
    return 0
