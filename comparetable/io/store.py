"""
Key-value stores for the persisted theme flag.

The theme controller only needs ``get``/``set``; the JSON file store keeps
every key in one small document so other flags can share the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

LOGGER = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except OSError as exc:
            LOGGER.warning("cannot read state file %s: %s", self.path, exc)
            return {}
        except ValueError:
            LOGGER.warning("ignoring unreadable state file %s", self.path)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("ignoring state file %s: not a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            # theme stays in effect for this run, it is just not remembered
            LOGGER.warning("cannot write state file %s: %s", self.path, exc)
            if tmp.is_file():
                tmp.unlink()
            return
        LOGGER.debug("stored %s=%s in %s", key, value, self.path)
