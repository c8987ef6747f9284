"""
Visitor over the MiniJava AST.

There is exactly one `visitXxx` per node kind in `frontend.ast.tree`. A pass
that must handle every kind subclasses `Visitor` and overrides the methods it
cares about; anything left unhandled falls into `visitOther`, which raises, so
a forgotten node kind is found on the first program that contains it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Optional

from utils import T, U

if TYPE_CHECKING:
    from .node import Node
    from .tree import *


class Visitor(Generic[T, U]):
    def visitOther(self, node: Node, ctx: T) -> Optional[U]:
        raise NotImplementedError(
            f"{type(self).__name__} does not handle node kind {node.name}"
        )

    def visitProgram(self, that: Program, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitMainClass(self, that: MainClass, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitClassDecl(self, that: ClassDecl, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitVarDecl(self, that: VarDecl, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitMethodDecl(self, that: MethodDecl, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitBlock(self, that: Block, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIf(self, that: If, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitWhile(self, that: While, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitPrint(self, that: Print, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitAssign(self, that: Assign, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitArrayAssign(self, that: ArrayAssign, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitUnary(self, that: Unary, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitBinary(self, that: Binary, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitArrayLookup(self, that: ArrayLookup, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitArrayLength(self, that: ArrayLength, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitCall(self, that: Call, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitNewArray(self, that: NewArray, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitNewObject(self, that: NewObject, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitThis(self, that: This, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIdentifier(self, that: Identifier, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIntLiteral(self, that: IntLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitBoolLiteral(self, that: BoolLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitTypeLiteral(self, that: TypeLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)


def accept(visitor: Visitor[T, U], ctx: T) -> Callable[[Node], Optional[U]]:
    return lambda node: node.accept(visitor, ctx)

