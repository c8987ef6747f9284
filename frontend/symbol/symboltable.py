from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from utils.error import DuplicateNameError

V = TypeVar("V")

"""
SymbolTable: an insertion-ordered, write-once mapping from names to entries,
optionally chained to the table of an enclosing scope.
"""


class SymbolTable(Generic[V]):
    def __init__(self, parent: Optional[SymbolTable[V]] = None) -> None:
        self.symbols: dict[str, V] = {}
        self.parent = parent

    def put(self, name: str, value: V) -> None:
        # Only this table is checked: shadowing an enclosing scope is allowed.
        if name in self.symbols:
            raise DuplicateNameError(name)
        self.symbols[name] = value

    def get(self, name: str) -> Optional[V]:
        table: Optional[SymbolTable[V]] = self
        while table is not None:
            if name in table.symbols:
                return table.symbols[name]
            table = table.parent
        return None

    def containsKey(self, name: str) -> bool:
        return name in self.symbols

    def entries(self) -> tuple[tuple[str, V], ...]:
        return tuple(self.symbols.items())

    def names(self) -> list[str]:
        return list(self.symbols)

    def values(self) -> list[V]:
        return list(self.symbols.values())

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[tuple[str, V]]:
        return iter(self.entries())

    def __str__(self) -> str:
        return "{" + ", ".join(f"{name}: {value}" for name, value in self.symbols.items()) + "}"
