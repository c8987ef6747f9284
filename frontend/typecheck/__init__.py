from .checker import typeCheck
from .typechecked import TypeChecked

__all__ = [
    "typeCheck",
    "TypeChecked",
]
