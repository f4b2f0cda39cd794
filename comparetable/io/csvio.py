from __future__ import annotations

from pathlib import Path


class SourceLoadError(Exception):
    """A source file could not be read; nothing should be rendered."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not read {path}: {reason}")
        self.path = path
        self.reason = reason


def read_text(path: Path) -> str:
    # utf-8-sig drops a leading BOM so the first header cell stays clean
    try:
        with path.open("r", newline="", encoding="utf-8-sig", errors="replace") as f:
            return f.read()
    except OSError as exc:
        raise SourceLoadError(path, exc.strerror or str(exc)) from exc


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        f.write(text)
