from typing import Optional

from frontend.symbol.symboltable import SymbolTable
from frontend.type import MiniJavaType


class ScopeStack:
    """
    The chain of variable scopes visible while checking one method body:
    ancestor fields, class fields, then the method's own parameters and locals.
    Lookup walks from the innermost scope outwards.
    """

    def __init__(self) -> None:
        self.scopeStack: list[SymbolTable[MiniJavaType]] = []

    def open(self, scope: SymbolTable[MiniJavaType]) -> None:
        self.scopeStack.append(scope)

    def close(self) -> None:
        self.scopeStack.pop()

    def top(self) -> Optional[SymbolTable[MiniJavaType]]:
        if self.scopeStack:
            return self.scopeStack[-1]
        return None

    def depth(self) -> int:
        return len(self.scopeStack)

    def lookup(self, name: str) -> Optional[MiniJavaType]:
        top = self.top()
        return top.get(name) if top is not None else None

    def lookupOverStack(self, name: str) -> Optional[MiniJavaType]:
        for scope in reversed(self.scopeStack):
            found = scope.get(name)
            if found is not None:
                return found
        return None
