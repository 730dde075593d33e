"""
Adapter: InMemoryVariableStore
Implementuje port VariableStore — płaski słownik, bez zasięgów i przesłaniania.
"""
from __future__ import annotations

from contracts import UndefinedVariableError


class InMemoryVariableStore:
    def __init__(self, initial: dict[str, float] | None = None) -> None:
        self._values: dict[str, float] = {k: float(v) for k, v in (initial or {}).items()}

    def set(self, name: str, value: float) -> None:
        self._values[name] = float(value)

    def get(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise UndefinedVariableError(name) from None

    def has(self, name: str) -> bool:
        return name in self._values

    def snapshot(self) -> dict[str, float]:
        return dict(sorted(self._values.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"InMemoryVariableStore({self.snapshot()!r})"
