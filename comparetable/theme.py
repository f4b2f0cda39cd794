"""
Two-state light/dark theme holder.

Initial resolution: persisted value > system dark preference > light.
Every state entry (resolve or toggle) persists the value and notifies
``on_change`` so the owner can update its display attribute and
indicator glyph.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .io.store import KeyValueStore
from .model.table import Theme

LOGGER = logging.getLogger(__name__)


class ThemeController:
    def __init__(
        self,
        store: KeyValueStore,
        *,
        prefers_dark: bool = False,
        key: str = "theme",
        on_change: Optional[Callable[[Theme], None]] = None,
    ) -> None:
        self.store = store
        self.prefers_dark = prefers_dark
        self.key = key
        self.on_change = on_change
        self._theme: Optional[Theme] = None

    @property
    def theme(self) -> Theme:
        if self._theme is None:
            raise RuntimeError("theme not resolved; call resolve() first")
        return self._theme

    @property
    def indicator(self) -> str:
        return self.theme.indicator

    def resolve(self) -> Theme:
        raw = self.store.get(self.key)
        stored = Theme.parse(raw)
        if raw is not None and stored is None:
            LOGGER.warning("ignoring unknown stored theme %r", raw)

        if stored is not None:
            theme = stored
        elif self.prefers_dark:
            theme = Theme.DARK
        else:
            theme = Theme.LIGHT

        self._enter(theme)
        return theme

    def toggle(self) -> Theme:
        theme = self.theme.opposite
        self._enter(theme)
        return theme

    def _enter(self, theme: Theme) -> None:
        self._theme = theme
        self.store.set(self.key, theme.value)
        LOGGER.debug("theme -> %s", theme.value)
        if self.on_change is not None:
            self.on_change(theme)
