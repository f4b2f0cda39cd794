"""
Presentation-side interaction state for a rendered table.

The generated page wires the same behaviour in the browser; these classes
keep it testable and usable by any other presentation layer:
  - ColumnHighlighter: hover a cell, highlight its column in every row
  - NoteActivator: click a marker, scroll to its note and mark it active
    until a scheduled clear fires
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from .render import NoteBinding, RenderResult

LOGGER = logging.getLogger(__name__)

# (delay_seconds, callback) -> handle
Scheduler = Callable[[float, Callable[[], None]], object]


def timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    t = threading.Timer(delay, callback)
    t.daemon = True
    t.start()
    return t


class ColumnHighlighter:
    def __init__(self, row_lengths: Sequence[int]) -> None:
        self.row_lengths: List[int] = list(row_lengths)
        self.highlighted: Set[Tuple[int, int]] = set()

    @classmethod
    def for_result(cls, result: RenderResult) -> "ColumnHighlighter":
        return cls(result.row_lengths())

    def enter(self, row: int, col: int) -> Set[Tuple[int, int]]:
        # keyed on column position only; short rows simply have no cell there
        for r, length in enumerate(self.row_lengths):
            if col < length:
                self.highlighted.add((r, col))
        return set(self.highlighted)

    def leave(self) -> None:
        self.highlighted.clear()


@dataclass(frozen=True)
class ScrollRequest:
    element_id: str
    behavior: str = "smooth"
    block: str = "center"


class NoteActivator:
    def __init__(
        self,
        element_ids: Iterable[str],
        *,
        delay: float = 2.0,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.element_ids: Set[str] = set(element_ids)
        self.delay = delay
        self.scheduler: Scheduler = scheduler or timer_scheduler
        self.active: Set[str] = set()

    @classmethod
    def for_result(
        cls, result: RenderResult, *, delay: float = 2.0, scheduler: Optional[Scheduler] = None
    ) -> "NoteActivator":
        return cls((e.element_id for e in result.footnotes), delay=delay, scheduler=scheduler)

    def click(self, binding: NoteBinding) -> Optional[ScrollRequest]:
        target = binding.target_id
        if target not in self.element_ids:
            LOGGER.debug("no footnote entry %s; click ignored", target)
            return None

        self.active.add(target)
        # every click schedules its own clear; an earlier timer may clear first
        self.scheduler(self.delay, lambda: self.active.discard(target))
        return ScrollRequest(element_id=target)
