"""
Module that defines the base class of all AST nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, unique
from typing import Any, Optional

from utils import T, U


class Node(ABC):
    """
    Base class of all AST nodes.
    Nodes are immutable once built: the semantic phases only read them.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        # Source line, filled in by the parser if it knows it.
        self.lineno: Optional[int] = None

    @abstractmethod
    def __getitem__(self, key: int) -> Node:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def accept(self, v: Any, ctx: T) -> Optional[U]:
        raise NotImplementedError

    def at(self, lineno: Optional[int]) -> Node:
        """
        Attach a source line to this node and return it, so builders can chain.
        """
        self.lineno = lineno
        return self

    def __str__(self) -> str:
        if len(self) == 0:
            return self.name

        return "{}[{}]".format(
            self.name,
            ", ".join(map(str, self)),
        )

    def __bool__(self) -> bool:
        return True


@unique
class UnaryOp(Enum):
    LogicNot = "!"


@unique
class BinaryOp(Enum):
    LogicAnd = "&&"
    LT = "<"
    Add = "+"
    Sub = "-"
    Mul = "*"


# Operators taking two ints and producing an int.
ARITHMETIC_OPS = (BinaryOp.Add, BinaryOp.Sub, BinaryOp.Mul)
