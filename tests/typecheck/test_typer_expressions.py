import pytest

from frontend.type import BOOL, ERROR, INT, INT_ARRAY, ObjectType
from frontend.typecheck.builder import ClassTableBuilder
from frontend.typecheck.typer import Context, Typer
from tests.util import *
from utils.error import ErrorKind, ErrorReport


@pytest.fixture
def typer():
    """
    A typer positioned inside `A.m(int i, boolean b, int[] arr, B obj)`.
    """
    prog = program(
        klass(
            "A",
            methods=[
                method(
                    int_t(),
                    "m",
                    formals=[
                        var(int_t(), "i"),
                        var(bool_t(), "b"),
                        var(int_array_t(), "arr"),
                        var(class_t("B"), "obj"),
                    ],
                )
            ],
        ),
        klass("B", methods=[method(bool_t(), "f", formals=[var(int_t(), "n")])]),
    )
    reporter = ErrorReport()
    table = ClassTableBuilder(reporter).transform(prog)
    typer = Typer(table, reporter)
    ctx = Context(table.get("A"))
    ctx.scopes.open(table.get("A").methods.get("m").locals)
    return typer, ctx, reporter


def type_of(fixture, expr):
    typer, ctx, reporter = fixture
    return expr.accept(typer, ctx), [e.kind for e in reporter]


@pytest.mark.parametrize(
    "expr, expected",
    [
        (IntLiteral(3), INT),
        (BoolLiteral(True), BOOL),
        (This(), ObjectType("A")),
        (Identifier("obj"), ObjectType("B")),
        (Binary(BinaryOp.Add, Identifier("i"), IntLiteral(1)), INT),
        (Binary(BinaryOp.Sub, Identifier("i"), IntLiteral(1)), INT),
        (Binary(BinaryOp.Mul, Identifier("i"), IntLiteral(1)), INT),
        (Binary(BinaryOp.LT, Identifier("i"), IntLiteral(1)), BOOL),
        (Binary(BinaryOp.LogicAnd, Identifier("b"), BoolLiteral(False)), BOOL),
        (Unary(UnaryOp.LogicNot, Identifier("b")), BOOL),
        (ArrayLookup(Identifier("arr"), Identifier("i")), INT),
        (ArrayLength(Identifier("arr")), INT),
        (NewArray(IntLiteral(5)), INT_ARRAY),
        (NewObject("B"), ObjectType("B")),
        (Call(Identifier("obj"), "f", ExpressionList(IntLiteral(1))), BOOL),
    ],
)
def test_well_typed_expressions(typer, expr, expected):
    t, errors = type_of(typer, expr)
    assert t == expected
    assert errors == []


@pytest.mark.parametrize(
    "expr",
    [
        Binary(BinaryOp.Add, Identifier("b"), IntLiteral(1)),
        Binary(BinaryOp.LT, IntLiteral(1), BoolLiteral(True)),
        Binary(BinaryOp.LogicAnd, IntLiteral(1), Identifier("b")),
        Unary(UnaryOp.LogicNot, IntLiteral(0)),
        ArrayLookup(Identifier("i"), IntLiteral(0)),
        ArrayLookup(Identifier("arr"), Identifier("b")),
        ArrayLength(Identifier("obj")),
        NewArray(BoolLiteral(True)),
    ],
)
def test_operand_mismatch_reports_one_type_mismatch(typer, expr):
    _, errors = type_of(typer, expr)
    assert errors == [ErrorKind.TypeMismatch]


def test_undefined_identifier_types_as_error(typer):
    t, errors = type_of(typer, Identifier("ghost"))
    assert t == ERROR
    assert errors == [ErrorKind.UndefinedIdentifier]


def test_error_operand_does_not_cascade(typer):
    expr = Binary(BinaryOp.Add, Identifier("ghost"), Binary(BinaryOp.Mul, Identifier("i"), IntLiteral(2)))
    t, errors = type_of(typer, expr)
    assert t == INT
    assert errors == [ErrorKind.UndefinedIdentifier]


def test_new_undefined_class(typer):
    t, errors = type_of(typer, NewObject("Nope"))
    assert t == ERROR
    assert errors == [ErrorKind.UndefinedClass]


def test_call_arity_mismatch_types_as_error(typer):
    call = Call(Identifier("obj"), "f", ExpressionList(IntLiteral(1), IntLiteral(2)))
    t, errors = type_of(typer, call)
    assert t == ERROR
    assert errors == [ErrorKind.ArityMismatch]


def test_call_undefined_method(typer):
    t, errors = type_of(typer, Call(Identifier("obj"), "g", ExpressionList()))
    assert t == ERROR
    assert errors == [ErrorKind.UndefinedMethod]


def test_call_on_non_object(typer):
    t, errors = type_of(typer, Call(Identifier("i"), "f", ExpressionList(IntLiteral(1))))
    assert t == ERROR
    assert errors == [ErrorKind.TypeMismatch]


def test_call_on_error_receiver_reports_nothing_more(typer):
    t, errors = type_of(typer, Call(Identifier("ghost"), "f", ExpressionList(IntLiteral(1))))
    assert t == ERROR
    assert errors == [ErrorKind.UndefinedIdentifier]


def test_call_argument_mismatch_keeps_return_type(typer):
    call = Call(Identifier("obj"), "f", ExpressionList(BoolLiteral(True)))
    t, errors = type_of(typer, call)
    assert t == BOOL
    assert errors == [ErrorKind.ArgumentTypeMismatch]
