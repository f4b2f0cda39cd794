from __future__ import annotations

import html
from typing import Any


def esc(s: Any) -> str:
    return html.escape("" if s is None else str(s))


def text_or_raw(s: str, raw: bool) -> str:
    return s if raw else esc(s)
