from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from frontend.type import MiniJavaType

from .symboltable import SymbolTable

if TYPE_CHECKING:
    from frontend.ast.tree import MethodDecl


class MethodEntry:
    """
    Everything Pass 1 knows about one method.
    Locals chain to the parameters, which together form the method's own scope.
    """

    def __init__(
        self,
        name: str,
        returnType: MiniJavaType,
        decl: Optional[MethodDecl] = None,
    ) -> None:
        self.name = name
        self.returnType = returnType
        self.decl = decl
        self.parameters: SymbolTable[MiniJavaType] = SymbolTable()
        self.locals: SymbolTable[MiniJavaType] = SymbolTable(self.parameters)

    @property
    def parameterTypes(self) -> list[MiniJavaType]:
        return self.parameters.values()

    @property
    def parameterNum(self) -> int:
        return len(self.parameters)

    def lookup(self, name: str) -> Optional[MiniJavaType]:
        return self.locals.get(name)

    def sameSignature(self, other: MethodEntry) -> bool:
        return (
            self.parameterTypes == other.parameterTypes
            and self.returnType == other.returnType
        )

    def __str__(self) -> str:
        params = ", ".join(str(t) for t in self.parameterTypes)
        return f"{self.name}({params}): {self.returnType}"
