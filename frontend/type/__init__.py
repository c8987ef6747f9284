from .type import (
    BOOL,
    ERROR,
    INT,
    INT_ARRAY,
    STRING_ARRAY,
    BooleanType,
    ErrorType,
    IntArrayType,
    IntType,
    MiniJavaType,
    ObjectType,
    StringArrayType,
    VOID,
    VoidType,
)

__all__ = [
    "MiniJavaType",
    "IntType",
    "BooleanType",
    "IntArrayType",
    "StringArrayType",
    "VoidType",
    "ObjectType",
    "ErrorType",
    "INT",
    "BOOL",
    "INT_ARRAY",
    "STRING_ARRAY",
    "VOID",
    "ERROR",
]
