"""
Module that defines all MiniJava AST nodes.
Nodes are plain records; the semantic phases never modify them.
Every node kind has a matching `visitXxx` method in `frontend.ast.visitor.Visitor`.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar, Union

from frontend.type import BOOL, INT, INT_ARRAY, MiniJavaType, ObjectType
from utils import T, U

from .node import BinaryOp, Node, UnaryOp
from .visitor import Visitor, accept

_T = TypeVar("_T", bound=Node)


def _index_len_err(i: int, node: Node):
    return IndexError(
        f"you are trying to index the #{i} child of node {node.name}, which has only {len(node)} children"
    )


class ListNode(Node, Generic[_T]):
    """
    Abstract node type that represents a node sequence.
    E.g. `Block` (sequence of statements).
    """

    def __init__(self, name: str, children: list[_T]) -> None:
        super().__init__(name)
        self.children = children

    def __getitem__(self, key: int) -> _T:
        return self.children.__getitem__(key)

    def __len__(self) -> int:
        return len(self.children)

    def accept(self, v: Visitor[T, U], ctx: T):
        ret = tuple(map(accept(v, ctx), self))
        return None if ret.count(None) == len(ret) else ret


class Program(Node):
    """
    AST root: the main class followed by the ordinary class declarations.
    """

    def __init__(self, mainClass: MainClass, classes: ClassList) -> None:
        super().__init__("program")
        self.mainClass = mainClass
        self.classes = classes

    def __getitem__(self, key: int) -> Node:
        return (self.mainClass, self.classes)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitProgram(self, ctx)


class MainClass(Node):
    """
    AST node of the main class: `class Name { public static void main(String[] arg) { statement } }`.
    """

    def __init__(self, className: str, argName: str, statement: Statement) -> None:
        super().__init__("main_class")
        self.className = className
        self.argName = argName
        self.statement = statement

    def __getitem__(self, key: int) -> Node:
        return (self.statement,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitMainClass(self, ctx)


class ClassDecl(Node):
    """
    AST node of an ordinary class declaration, optionally extending a superclass.
    """

    def __init__(
        self,
        name: str,
        superName: Optional[str],
        vars: VarDeclList,
        methods: MethodDeclList,
    ) -> None:
        super().__init__("class_decl")
        self.ident = name
        self.superName = superName
        self.vars = vars
        self.methods = methods

    def __getitem__(self, key: int) -> Node:
        return (self.vars, self.methods)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitClassDecl(self, ctx)

    def __str__(self) -> str:
        if self.superName is None:
            return f"class({self.ident})"
        return f"class({self.ident} extends {self.superName})"


class ClassList(ListNode["ClassDecl"]):
    def __init__(self, *children: ClassDecl) -> None:
        super().__init__("class_list", list(children))


class VarDecl(Node):
    """
    AST node of a variable declaration.
    Used for fields, formal parameters and method locals alike.
    """

    def __init__(self, var_t: TypeLiteral, ident: str) -> None:
        super().__init__("var_decl")
        self.var_t = var_t
        self.ident = ident

    def __getitem__(self, key: int) -> Node:
        return (self.var_t,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitVarDecl(self, ctx)

    def __str__(self) -> str:
        return f"var({self.var_t.type} {self.ident})"


class VarDeclList(ListNode["VarDecl"]):
    def __init__(self, *children: VarDecl) -> None:
        super().__init__("var_decl_list", list(children))


class MethodDecl(Node):
    """
    AST node of a method declaration.
    MiniJava methods always end with a single `return` expression.
    """

    def __init__(
        self,
        ret_t: TypeLiteral,
        name: str,
        formals: VarDeclList,
        vars: VarDeclList,
        statements: StatementList,
        returnExpr: Expression,
    ) -> None:
        super().__init__("method_decl")
        self.ret_t = ret_t
        self.ident = name
        self.formals = formals
        self.vars = vars
        self.statements = statements
        self.returnExpr = returnExpr

    def __getitem__(self, key: int) -> Node:
        return (
            self.ret_t,
            self.formals,
            self.vars,
            self.statements,
            self.returnExpr,
        )[key]

    def __len__(self) -> int:
        return 5

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitMethodDecl(self, ctx)


class MethodDeclList(ListNode["MethodDecl"]):
    def __init__(self, *children: MethodDecl) -> None:
        super().__init__("method_decl_list", list(children))


# Statements produce no value.
class Statement(Node):
    """
    Abstract type that represents a statement.
    """


class StatementList(ListNode["Statement"]):
    def __init__(self, *children: Statement) -> None:
        super().__init__("statement_list", list(children))


class Block(Statement, ListNode["Statement"]):
    """
    AST node of block "statement".
    """

    def __init__(self, *children: Statement) -> None:
        super().__init__("block", list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitBlock(self, ctx)


class If(Statement):
    """
    AST node of if statement. MiniJava requires the else branch.
    """

    def __init__(self, cond: Expression, then: Statement, otherwise: Statement) -> None:
        super().__init__("if")
        self.cond = cond
        self.then = then
        self.otherwise = otherwise

    def __getitem__(self, key: int) -> Node:
        return (self.cond, self.then, self.otherwise)[key]

    def __len__(self) -> int:
        return 3

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIf(self, ctx)


class While(Statement):
    """
    AST node of while statement.
    """

    def __init__(self, cond: Expression, body: Statement) -> None:
        super().__init__("while")
        self.cond = cond
        self.body = body

    def __getitem__(self, key: int) -> Node:
        return (self.cond, self.body)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitWhile(self, ctx)


class Print(Statement):
    """
    AST node of `System.out.println(expr);`.
    """

    def __init__(self, expr: Expression) -> None:
        super().__init__("print")
        self.expr = expr

    def __getitem__(self, key: int) -> Node:
        return (self.expr,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitPrint(self, ctx)


class Assign(Statement):
    """
    AST node of `ident = rhs;`.
    """

    def __init__(self, ident: str, rhs: Expression) -> None:
        super().__init__("assign")
        self.ident = ident
        self.rhs = rhs

    def __getitem__(self, key: int) -> Node:
        return (self.rhs,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitAssign(self, ctx)

    def __str__(self) -> str:
        return f"assign({self.ident}, {self.rhs})"


class ArrayAssign(Statement):
    """
    AST node of `ident[index] = rhs;`.
    """

    def __init__(self, ident: str, index: Expression, rhs: Expression) -> None:
        super().__init__("array_assign")
        self.ident = ident
        self.index = index
        self.rhs = rhs

    def __getitem__(self, key: int) -> Node:
        return (self.index, self.rhs)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitArrayAssign(self, ctx)


# Expressions are typed by the typer.
class Expression(Node):
    """
    Abstract type that represents an evaluable expression.
    """


class ExpressionList(ListNode["Expression"]):
    """
    AST node that represents the argument list of a method call.
    """

    def __init__(self, *children: Expression) -> None:
        super().__init__("expression_list", list(children))


class Unary(Expression):
    """
    AST node of unary expression.
    Note that the operation type (like negative) is not among its children.
    """

    def __init__(self, op: UnaryOp, operand: Expression) -> None:
        super().__init__(f"unary({op.value})")
        self.op = op
        self.operand = operand

    def __getitem__(self, key: int) -> Node:
        return (self.operand,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitUnary(self, ctx)

    def __str__(self) -> str:
        return "{}({})".format(
            self.op.value,
            self.operand,
        )


class Binary(Expression):
    """
    AST node of binary expression.
    Note that the operation type (like plus or subtract) is not among its children.
    """

    def __init__(self, op: BinaryOp, lhs: Expression, rhs: Expression) -> None:
        super().__init__(f"binary({op.value})")
        self.lhs = lhs
        self.op = op
        self.rhs = rhs

    def __getitem__(self, key: int) -> Node:
        return (self.lhs, self.rhs)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitBinary(self, ctx)

    def __str__(self) -> str:
        return "({}){}({})".format(
            self.lhs,
            self.op.value,
            self.rhs,
        )


class ArrayLookup(Expression):
    """
    AST node of `array[index]`.
    """

    def __init__(self, array: Expression, index: Expression) -> None:
        super().__init__("array_lookup")
        self.array = array
        self.index = index

    def __getitem__(self, key: int) -> Node:
        return (self.array, self.index)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitArrayLookup(self, ctx)


class ArrayLength(Expression):
    """
    AST node of `array.length`.
    """

    def __init__(self, array: Expression) -> None:
        super().__init__("array_length")
        self.array = array

    def __getitem__(self, key: int) -> Node:
        return (self.array,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitArrayLength(self, ctx)


class Call(Expression):
    """
    AST node that represents a method call `receiver.method(args...)`.
    """

    def __init__(
        self,
        receiver: Expression,
        method: str,
        args: ExpressionList,
    ) -> None:
        super().__init__("call")
        self.receiver = receiver
        self.method = method
        self.args = args

    def __getitem__(self, key: int) -> Node:
        return (
            self.receiver,
            self.args,
        )[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitCall(self, ctx)

    def __str__(self) -> str:
        return "{}.{}({})".format(
            self.receiver,
            self.method,
            ", ".join(map(str, self.args)),
        )


class NewArray(Expression):
    """
    AST node of `new int[size]`.
    """

    def __init__(self, size: Expression) -> None:
        super().__init__("new_array")
        self.size = size

    def __getitem__(self, key: int) -> Node:
        return (self.size,)[key]

    def __len__(self) -> int:
        return 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitNewArray(self, ctx)


class NewObject(Expression):
    """
    AST node of `new ClassName()`.
    """

    def __init__(self, className: str) -> None:
        super().__init__("new_object")
        self.className = className

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitNewObject(self, ctx)

    def __str__(self) -> str:
        return f"new({self.className})"


class This(Expression):
    def __init__(self) -> None:
        super().__init__("this")

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitThis(self, ctx)


class Identifier(Expression):
    """
    AST node of identifier "expression".
    """

    def __init__(self, value: str) -> None:
        super().__init__("identifier")
        self.value = value

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIdentifier(self, ctx)

    def __str__(self) -> str:
        return f"identifier({self.value})"


class IntLiteral(Expression):
    """
    AST node of int literal like `0`.
    """

    def __init__(self, value: Union[int, str]) -> None:
        super().__init__("int_literal")
        self.value = int(value)

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIntLiteral(self, ctx)

    def __str__(self) -> str:
        return f"int({self.value})"


class BoolLiteral(Expression):
    """
    AST node of `true` or `false`.
    """

    def __init__(self, value: bool) -> None:
        super().__init__("bool_literal")
        self.value = value

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitBoolLiteral(self, ctx)

    def __str__(self) -> str:
        return f"bool({str(self.value).lower()})"


class TypeLiteral(Node):
    """
    Abstract node type that represents a type literal like `int`.
    """

    def __init__(self, name: str, _type: MiniJavaType) -> None:
        super().__init__(name)
        self.type = _type

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitTypeLiteral(self, ctx)

    def __str__(self) -> str:
        return f"type({self.type})"


class TInt(TypeLiteral):
    "AST node of type `int`."

    def __init__(self) -> None:
        super().__init__("type_int", INT)


class TBoolean(TypeLiteral):
    "AST node of type `boolean`."

    def __init__(self) -> None:
        super().__init__("type_boolean", BOOL)


class TIntArray(TypeLiteral):
    "AST node of type `int[]`."

    def __init__(self) -> None:
        super().__init__("type_int_array", INT_ARRAY)


class TClass(TypeLiteral):
    "AST node of a class name used as a type."

    def __init__(self, className: str) -> None:
        super().__init__("type_class", ObjectType(className))
        self.className = className


__all__ = [
    "BinaryOp",
    "UnaryOp",
    "Node",
    "ListNode",
    "Program",
    "MainClass",
    "ClassDecl",
    "ClassList",
    "VarDecl",
    "VarDeclList",
    "MethodDecl",
    "MethodDeclList",
    "Statement",
    "StatementList",
    "Block",
    "If",
    "While",
    "Print",
    "Assign",
    "ArrayAssign",
    "Expression",
    "ExpressionList",
    "Unary",
    "Binary",
    "ArrayLookup",
    "ArrayLength",
    "Call",
    "NewArray",
    "NewObject",
    "This",
    "Identifier",
    "IntLiteral",
    "BoolLiteral",
    "TypeLiteral",
    "TInt",
    "TBoolean",
    "TIntArray",
    "TClass",
]
