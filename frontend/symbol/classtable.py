from __future__ import annotations

from typing import Iterator, Optional

from frontend.type import MiniJavaType

from .classentry import ClassEntry
from .methodentry import MethodEntry
from .symboltable import SymbolTable

"""
ClassTable: the global symbol table, mapping class names to class entries.
Inheritance queries live here since they need to resolve superclass names.
"""


class ClassTable(SymbolTable[ClassEntry]):
    def superclass(self, entry: ClassEntry) -> Optional[ClassEntry]:
        if entry.superName is None:
            return None
        return self.get(entry.superName)

    def ancestors(self, entry: ClassEntry) -> Iterator[ClassEntry]:
        """
        Yield the superclass chain of `entry`, nearest first, excluding `entry` itself.
        Stops at an unknown superclass and at the first class seen twice, so a
        cyclic hierarchy still terminates.
        """
        seen = {entry.name}
        current = self.superclass(entry)
        while current is not None and current.name not in seen:
            seen.add(current.name)
            yield current
            current = self.superclass(current)

    def isCyclic(self, entry: ClassEntry) -> bool:
        current = self.superclass(entry)
        seen = set()
        while current is not None and current.name not in seen:
            if current.name == entry.name:
                return True
            seen.add(current.name)
            current = self.superclass(current)
        return False

    def isSubclass(self, sub: str, sup: str) -> bool:
        """
        True iff `sub` is `sup` or inherits from it, transitively.
        """
        if sub == sup:
            return True
        entry = self.get(sub)
        if entry is None:
            return False
        return any(ancestor.name == sup for ancestor in self.ancestors(entry))

    def isCompatible(self, src: MiniJavaType, dst: MiniJavaType) -> bool:
        """
        Whether a value of type `src` may be assigned to a location of type `dst`.
        """
        if src.isError() or dst.isError():
            return True
        if src.isObject() and dst.isObject():
            return self.isSubclass(src.className, dst.className)
        return src == dst

    def lookupMethod(self, className: str, name: str) -> Optional[MethodEntry]:
        entry = self.get(className)
        if entry is None:
            return None
        for owner in (entry, *self.ancestors(entry)):
            method = owner.methods.get(name)
            if method is not None:
                return method
        return None

    def fieldScopes(self, entry: ClassEntry) -> list[SymbolTable[MiniJavaType]]:
        """
        Field tables visible inside `entry`, outermost ancestor first.
        """
        return [owner.fields for owner in reversed([entry, *self.ancestors(entry)])]
