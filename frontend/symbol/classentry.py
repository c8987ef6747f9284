from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from frontend.type import MiniJavaType

from .methodentry import MethodEntry
from .symboltable import SymbolTable

if TYPE_CHECKING:
    from frontend.ast.tree import ClassDecl, MainClass


class ClassEntry:
    """
    Everything Pass 1 knows about one class.
    The superclass is kept by name and resolved through the class table on demand.
    """

    def __init__(
        self,
        name: str,
        superName: Optional[str] = None,
        decl: Optional[ClassDecl | MainClass] = None,
    ) -> None:
        self.name = name
        self.superName = superName
        self.decl = decl
        self.fields: SymbolTable[MiniJavaType] = SymbolTable()
        self.methods: SymbolTable[MethodEntry] = SymbolTable()

    def __str__(self) -> str:
        if self.superName is None:
            return f"class {self.name}"
        return f"class {self.name} extends {self.superName}"
