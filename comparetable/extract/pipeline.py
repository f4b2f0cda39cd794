from __future__ import annotations

import logging
from dataclasses import dataclass

from ..io.csvio import read_text
from ..io.fs import SourcePaths
from ..model.table import NotesMap, Table
from .notes import build_notes_index
from .tokenizer import tokenize

LOGGER = logging.getLogger(__name__)


@dataclass
class LoadedSources:
    data: Table
    notes: NotesMap


def load_sources(paths: SourcePaths) -> LoadedSources:
    # both reads must succeed before either payload is parsed
    data_text = read_text(paths.data)
    notes_text = read_text(paths.notes)

    data = tokenize(data_text)
    notes = build_notes_index(tokenize(notes_text))

    LOGGER.debug("data: %s (%d rows incl. header)", paths.data, len(data))
    LOGGER.debug("notes: %s (%d notes)", paths.notes, len(notes))
    if not data:
        LOGGER.warning("data source %s has no rows", paths.data)

    return LoadedSources(data=data, notes=notes)
