"""Parsing of sherpadoc type token sequences.

A type is written as a sequence of words, consumed left to right::

    ["nullable", "[]", "string"]   ->  NullableType(ArrayType(BaseType("string")))
    ["{}", "Item"]                 ->  MapType(NamedType("Item"))

Wrapper words ("nullable", "[]", "{}") must be followed by another type;
a base type or identifier must be the last word.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from ..errors import MalformedTypeError

NULLABLE = "nullable"
ARRAY = "[]"
MAP = "{}"

WRAPPER_TOKENS = frozenset({NULLABLE, ARRAY, MAP})

BASE_TYPES = frozenset(
    {
        "any",
        "bool",
        "int8",
        "uint8",
        "int16",
        "uint16",
        "int32",
        "uint32",
        "int64",
        "uint64",
        "int64s",
        "uint64s",
        "float32",
        "float64",
        "string",
        "timestamp",
    }
)

# Integers that travel as JSON strings so they survive float64 decoding.
STRING_ENCODED_TYPES = frozenset({"int64s", "uint64s"})


@dataclass(frozen=True)
class BaseType:
    name: str


@dataclass(frozen=True)
class NullableType:
    inner: "SherpaType"


@dataclass(frozen=True)
class ArrayType:
    inner: "SherpaType"


@dataclass(frozen=True)
class MapType:
    """String-keyed object; only the value type is encoded."""

    value: "SherpaType"


@dataclass(frozen=True)
class NamedType:
    name: str


SherpaType = Union[BaseType, NullableType, ArrayType, MapType, NamedType]


def parse_type(context: str, tokens: Sequence[str]) -> SherpaType:
    """Parse a type token sequence.

    Args:
        context: Description of where the type appears, used in errors
        tokens: The type words, e.g. ["nullable", "[]", "string"]

    Returns:
        The parsed type

    Raises:
        MalformedTypeError: If the sequence is empty at any level or has
            words left over after a base type or identifier
    """
    if not tokens:
        raise MalformedTypeError(context, "need at least one element", tokens)
    head, rest = tokens[0], tokens[1:]
    if head in BASE_TYPES:
        if rest:
            raise MalformedTypeError(context, "leftover tokens after base type", rest)
        return BaseType(head)
    if head == NULLABLE:
        return NullableType(parse_type(context, rest))
    if head == ARRAY:
        return ArrayType(parse_type(context, rest))
    if head == MAP:
        return MapType(parse_type(context, rest))
    if rest:
        raise MalformedTypeError(context, "leftover tokens after identifier type", rest)
    return NamedType(head)


def terminal_token(tokens: Sequence[str]) -> str:
    """Return the last word of a type, or "" for an empty sequence."""
    return tokens[-1] if tokens else ""


def is_string_encoded(tokens: Sequence[str]) -> bool:
    return terminal_token(tokens) in STRING_ENCODED_TYPES
