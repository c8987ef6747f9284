from frontend.typecheck.builder import MAIN_METHOD, ClassTableBuilder
from frontend.type import BOOL, INT, INT_ARRAY, STRING_ARRAY, VOID, ObjectType
from tests.util import *
from utils.error import ErrorKind, ErrorReport


def build(prog):
    reporter = ErrorReport()
    table = ClassTableBuilder(reporter).transform(prog)
    return table, reporter


def test_builds_entries_in_declaration_order():
    prog = program(
        klass(
            "A",
            vars=[var(int_t(), "x"), var(class_t("B"), "b")],
            methods=[
                method(
                    bool_t(),
                    "m",
                    formals=[var(int_t(), "p"), var(int_array_t(), "q")],
                    vars=[var(bool_t(), "l")],
                )
            ],
        ),
        klass("B", superName="A"),
    )
    table, reporter = build(prog)

    assert not reporter.hasErrors()
    assert table.names() == ["Main", "A", "B"]
    a = table.get("A")
    assert list(a.fields.entries()) == [("x", INT), ("b", ObjectType("B"))]
    m = a.methods.get("m")
    assert m.returnType == BOOL
    assert m.parameterTypes == [INT, INT_ARRAY]
    assert m.locals.get("l") == BOOL
    # locals chain to the parameters
    assert m.lookup("p") == INT
    assert table.get("B").superName == "A"


def test_main_class_entry():
    table, _ = build(program(main=main_class(name="Prog")))
    main = table.get("Prog").methods.get(MAIN_METHOD)
    assert main.returnType == VOID
    assert list(main.parameters.entries()) == [("args", STRING_ARRAY)]


def test_duplicate_field_in_one_class_reported_once():
    prog = program(klass("A", vars=[var(int_t(), "x"), var(int_t(), "x", lineno=3)]))
    _, reporter = build(prog)
    assert [(e.kind, e.names, e.lineno) for e in reporter] == [
        (ErrorKind.DuplicateDefinition, ("x",), 3)
    ]


def test_same_field_in_different_classes_is_fine():
    prog = program(
        klass("A", vars=[var(int_t(), "x")]),
        klass("B", vars=[var(bool_t(), "x")]),
    )
    _, reporter = build(prog)
    assert not reporter.hasErrors()


def test_duplicate_class_keeps_first_and_still_scans_members():
    first = klass("A", vars=[var(int_t(), "x")])
    second = klass("A", vars=[var(int_t(), "y"), var(int_t(), "y")])
    table, reporter = build(program(first, second))

    assert table.get("A").decl is first
    assert [e.names for e in reporter] == [("A",), ("y",)]


def test_class_named_like_main_class_is_duplicate():
    _, reporter = build(program(klass("Main")))
    assert [e.kind for e in reporter] == [ErrorKind.DuplicateDefinition]


def test_duplicate_method_and_its_parameters():
    prog = program(
        klass(
            "A",
            methods=[
                method(int_t(), "m"),
                method(int_t(), "m", formals=[var(int_t(), "a"), var(bool_t(), "a")]),
            ],
        )
    )
    _, reporter = build(prog)
    assert [e.names for e in reporter] == [("m",), ("a",)]


def test_local_clashing_with_parameter():
    prog = program(
        klass(
            "A",
            methods=[
                method(
                    int_t(),
                    "m",
                    formals=[var(int_t(), "a")],
                    vars=[var(bool_t(), "a"), var(int_t(), "b"), var(int_t(), "b")],
                )
            ],
        )
    )
    _, reporter = build(prog)
    assert [e.names for e in reporter] == [("a",), ("b",)]


def test_local_may_shadow_field():
    prog = program(
        klass(
            "A",
            vars=[var(int_t(), "x")],
            methods=[method(int_t(), "m", vars=[var(bool_t(), "x")])],
        )
    )
    _, reporter = build(prog)
    assert not reporter.hasErrors()


def test_undeclared_types_are_not_checked_here():
    prog = program(klass("A", vars=[var(class_t("Nowhere"), "x")], superName="Ghost"))
    _, reporter = build(prog)
    assert not reporter.hasErrors()
