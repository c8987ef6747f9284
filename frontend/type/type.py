"""
Semantic types of MiniJava.

The set is closed: int, boolean, int[], object types named by class, the
String[] of the main method's argument, and the internal error type.
"""


class MiniJavaType:
    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name

    def isObject(self) -> bool:
        return False

    def isError(self) -> bool:
        return False


class IntType(MiniJavaType):
    def __init__(self) -> None:
        super().__init__("int")


class BooleanType(MiniJavaType):
    def __init__(self) -> None:
        super().__init__("boolean")


class IntArrayType(MiniJavaType):
    def __init__(self) -> None:
        super().__init__("int[]")


# Only ever the return type of the main method.
class VoidType(MiniJavaType):
    def __init__(self) -> None:
        super().__init__("void")


# Only ever the type of the main method's argument.
class StringArrayType(MiniJavaType):
    def __init__(self) -> None:
        super().__init__("String[]")


class ObjectType(MiniJavaType):
    def __init__(self, className: str) -> None:
        super().__init__(className)
        self.className = className

    def isObject(self) -> bool:
        return True


class ErrorType(MiniJavaType):
    """
    Type of an expression that failed to check.
    Compatible with every other type, so one mistake is reported once.
    """

    def __init__(self) -> None:
        super().__init__("<error>")

    def isError(self) -> bool:
        return True


INT = IntType()
BOOL = BooleanType()
INT_ARRAY = IntArrayType()
STRING_ARRAY = StringArrayType()
VOID = VoidType()
ERROR = ErrorType()
