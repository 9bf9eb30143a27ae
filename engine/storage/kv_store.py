from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Dict, Optional, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process store; lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)


class JsonFileStore:
    """
    Flat JSON object of string scalars, one file per profile:
    runtime/cache/progress/<profile>.json

    Every set() rewrites the whole file through a temp file + os.replace so a
    crash mid-write never leaves a truncated document behind.
    """

    def __init__(self, profile_name: str = "default", root: Optional[Path] = None):
        if root is None:
            root = Path(__file__).resolve(
            ).parents[2] / "runtime" / "cache" / "progress"
        self.root = Path(root)
        self.path = self.root / f"{profile_name}.json"

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        try:
            data = self._read_all()
        except ValueError:
            # unreadable document: start over rather than refuse the write
            data = {}
        data[key] = str(value)
        tmp = self.path.with_suffix(".json.tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        os.replace(tmp, self.path)
