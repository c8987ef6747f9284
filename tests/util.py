from typing import Optional, Sequence

from frontend.ast.tree import *
from frontend.typecheck import typeCheck
from utils.error import ErrorKind, SemanticError, TypeCheckerException


def int_t() -> TypeLiteral:
    return TInt()


def bool_t() -> TypeLiteral:
    return TBoolean()


def int_array_t() -> TypeLiteral:
    return TIntArray()


def class_t(name: str) -> TypeLiteral:
    return TClass(name)


def var(t: TypeLiteral, name: str, lineno: Optional[int] = None) -> VarDecl:
    return VarDecl(t, name).at(lineno)


def method(
    ret_t: TypeLiteral,
    name: str,
    formals: Sequence[VarDecl] = (),
    vars: Sequence[VarDecl] = (),
    statements: Sequence[Statement] = (),
    returnExpr: Optional[Expression] = None,
) -> MethodDecl:
    if returnExpr is None:
        returnExpr = default_value(ret_t)
    return MethodDecl(
        ret_t,
        name,
        VarDeclList(*formals),
        VarDeclList(*vars),
        StatementList(*statements),
        returnExpr,
    )


def default_value(t: TypeLiteral) -> Expression:
    if isinstance(t, TBoolean):
        return BoolLiteral(False)
    if isinstance(t, TIntArray):
        return NewArray(IntLiteral(0))
    if isinstance(t, TClass):
        return NewObject(t.className)
    return IntLiteral(0)


def klass(
    name: str,
    vars: Sequence[VarDecl] = (),
    methods: Sequence[MethodDecl] = (),
    superName: Optional[str] = None,
) -> ClassDecl:
    return ClassDecl(name, superName, VarDeclList(*vars), MethodDeclList(*methods))


def main_class(statement: Optional[Statement] = None, name: str = "Main") -> MainClass:
    return MainClass(name, "args", statement if statement is not None else Block())


def program(*classes: ClassDecl, main: Optional[MainClass] = None) -> Program:
    return Program(main if main is not None else main_class(), ClassList(*classes))


def check(prog: Program) -> list[SemanticError]:
    """
    Type check `prog` and return the reported errors, empty if it passed.
    """
    try:
        typeCheck(prog)
    except TypeCheckerException as e:
        return e.errors
    return []


def kinds(prog: Program) -> list[ErrorKind]:
    return [error.kind for error in check(prog)]


def in_method(
    statements: Sequence[Statement],
    vars: Sequence[VarDecl] = (),
    formals: Sequence[VarDecl] = (),
    classes: Sequence[ClassDecl] = (),
) -> Program:
    """
    A program whose only interesting part is the body of `A.run()`.
    """
    body = method(int_t(), "run", formals, vars, statements)
    return program(klass("A", methods=[body]), *classes)
