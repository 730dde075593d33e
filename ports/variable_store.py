"""
Port: VariableStore
Odpowiedzialność: zmienne sesji (nazwa → wartość), żywotność = jedna sesja.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class VariableStore(Protocol):
    def set(self, name: str, value: float) -> None:
        """Inserts or overwrites a binding. Names are case-sensitive."""
        ...

    def get(self, name: str) -> float:
        """Returns the bound value. Raises UndefinedVariableError if absent."""
        ...

    def has(self, name: str) -> bool:
        """Non-failing existence check."""
        ...

    def snapshot(self) -> dict[str, float]:
        """Returns a copy of all bindings, ordered by name."""
        ...
