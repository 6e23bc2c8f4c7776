from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol


class HighScoreStore(Protocol):
    def get_high_score(self) -> int: ...

    def set_high_score(self, value: int) -> None: ...


class InMemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process."""

    def __init__(self, initial: int = 0) -> None:
        self._value = int(initial)

    def get_high_score(self) -> int:
        return self._value

    def set_high_score(self, value: int) -> None:
        self._value = int(value)


class JsonHighScoreStore:
    """Persists the high score as ``{"high_score": N}`` in a JSON file."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else self._default_path()

    @staticmethod
    def _default_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "high_score.json"

    @property
    def path(self) -> Path:
        return self._path

    def get_high_score(self) -> int:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return 0
        except json.JSONDecodeError:
            return 0
        if not isinstance(payload, dict):
            return 0
        try:
            value = int(payload.get("high_score", 0))
        except (TypeError, ValueError):
            return 0
        return max(0, value)

    def set_high_score(self, value: int) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump({"high_score": int(value)}, handle, indent=2)
