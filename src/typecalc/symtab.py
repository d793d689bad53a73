from dataclasses import dataclass, field
from typing import Generic, Self, TypeVar

T = TypeVar("T")


@dataclass
class SymTab(Generic[T]):
    locals: dict[str, T] = field(default_factory=dict)
    parent: Self | None = None

    def get_value(self, symbol: str) -> T | None:
        symbols: SymTab[T] | None = self
        while symbols is not None:
            if symbol in symbols.locals:
                return symbols.locals[symbol]
            symbols = symbols.parent
        return None

    def add_local(self, symbol: str, value: T) -> None:
        """ Always writes the innermost table, shadowing any parent entry."""
        self.locals[symbol] = value
