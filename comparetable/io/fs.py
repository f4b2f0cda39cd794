# comparetable/io/fs.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class SourcePaths:
    data: Path
    notes: Path


def locate_sources(
    in_dir: Path,
    *,
    data_name: str = "data.csv",
    notes_name: str = "notes.csv",
    data: Optional[Path] = None,
    notes: Optional[Path] = None,
) -> SourcePaths:
    """
    Resolve the two CSV sources. Explicit paths win over names
    looked up in in_dir; both must exist.
    """
    paths = SourcePaths(
        data=(data or in_dir / data_name).resolve(),
        notes=(notes or in_dir / notes_name).resolve(),
    )
    missing = [p for p in [paths.data, paths.notes] if not p.is_file()]
    if missing:
        raise SystemExit(f"Missing required CSVs in {in_dir}:\n  " + "\n  ".join(str(m) for m in missing))
    return paths
