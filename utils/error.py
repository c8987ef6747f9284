from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, unique
from typing import Iterator, Optional, Union

from frontend.type import MiniJavaType

logger = logging.getLogger(__name__)


class MiniJavaError(Exception):
    pass


class DuplicateNameError(MiniJavaError):
    """
    Raised by `SymbolTable.put` when the name is already bound in that table.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate name '{name}'")
        self.name = name


@unique
class ErrorKind(Enum):
    DuplicateDefinition = "duplicate definition"
    UndefinedIdentifier = "undefined identifier"
    UndefinedClass = "undefined class"
    UndefinedMethod = "undefined method"
    ArityMismatch = "wrong number of arguments"
    ArgumentTypeMismatch = "argument type mismatch"
    TypeMismatch = "type mismatch"
    AssignmentTypeMismatch = "assignment type mismatch"
    ConditionTypeMismatch = "condition is not boolean"
    InvalidOverride = "invalid override"
    CyclicInheritance = "cyclic inheritance"


@dataclass(frozen=True)
class SemanticError:
    kind: ErrorKind
    names: tuple[str, ...]
    lineno: Optional[int] = None

    def __str__(self) -> str:
        where = f"line {self.lineno}: " if self.lineno is not None else ""
        return f"{where}{self.kind.value}: {', '.join(self.names)}"


class TypeCheckerException(MiniJavaError):
    """
    The aggregate failure of a type check, carrying every recorded error in order.
    """

    def __init__(self, errors: list[SemanticError]) -> None:
        super().__init__("\n".join(map(str, errors)))
        self.errors = list(errors)

    @property
    def first(self) -> SemanticError:
        return self.errors[0]

    def kinds(self) -> list[ErrorKind]:
        return [error.kind for error in self.errors]


class ErrorReport:
    """
    Append-only collector of semantic errors shared by both passes.
    Nothing is raised until `close()`.
    """

    def __init__(self) -> None:
        self.errors: list[SemanticError] = []

    def report(self, kind: ErrorKind, *names: object, lineno: Optional[int] = None) -> None:
        error = SemanticError(kind, tuple(str(name) for name in names), lineno)
        logger.debug("reported %s", error)
        self.errors.append(error)

    def duplicateDefinition(self, name: str, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.DuplicateDefinition, name, lineno=lineno)

    def undefinedId(self, name: str, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.UndefinedIdentifier, name, lineno=lineno)

    def undefinedClass(self, name: str, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.UndefinedClass, name, lineno=lineno)

    def undefinedMethod(self, className: str, method: str, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.UndefinedMethod, className, method, lineno=lineno)

    def arityMismatch(
        self, method: str, expected: int, actual: int, lineno: Optional[int] = None
    ) -> None:
        self.report(ErrorKind.ArityMismatch, method, expected, actual, lineno=lineno)

    def argumentTypeMismatch(
        self,
        method: str,
        position: int,
        expected: MiniJavaType,
        actual: MiniJavaType,
        lineno: Optional[int] = None,
    ) -> None:
        self.report(
            ErrorKind.ArgumentTypeMismatch, method, position, expected, actual, lineno=lineno
        )

    def typeMismatch(
        self,
        expected: Union[MiniJavaType, str],
        actual: MiniJavaType,
        lineno: Optional[int] = None,
    ) -> None:
        self.report(ErrorKind.TypeMismatch, expected, actual, lineno=lineno)

    def assignmentTypeMismatch(
        self,
        name: str,
        expected: MiniJavaType,
        actual: MiniJavaType,
        lineno: Optional[int] = None,
    ) -> None:
        self.report(ErrorKind.AssignmentTypeMismatch, name, expected, actual, lineno=lineno)

    def conditionTypeMismatch(self, actual: MiniJavaType, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.ConditionTypeMismatch, actual, lineno=lineno)

    def invalidOverride(self, className: str, method: str, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.InvalidOverride, className, method, lineno=lineno)

    def cyclicInheritance(self, className: str, lineno: Optional[int] = None) -> None:
        self.report(ErrorKind.CyclicInheritance, className, lineno=lineno)

    def hasErrors(self) -> bool:
        return len(self.errors) > 0

    def count(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[SemanticError]:
        return iter(self.errors)

    def close(self) -> None:
        # Can be called again; a non-empty report raises every time.
        if self.errors:
            raise TypeCheckerException(self.errors)

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)
