"""Schema model for sherpadoc documents.

This module defines the read-only tree the generator walks. It is built
once from a decoded sherpadoc document by build_document() and never
modified afterwards.

Key classes:
- Document: Root container with version information and the root section
- Section: A named group of types and functions, possibly nested
- Struct / Field: Object types and their members
- Ints / IntValue: Integer enumerations
- Strings / StringValue: String enumerations
- Function / Arg: API functions with their parameters and return values
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast

from .errors import SchemaError
from .sherpadoc import (
    ArgObject,
    FieldObject,
    FunctionObject,
    IntsObject,
    IntValueObject,
    SectionObject,
    StringsObject,
    StringValueObject,
    StructObject,
)


@dataclass(frozen=True)
class Field:
    """A member of a struct.

    Attributes:
        name: Field name as it appears on the wire
        docs: Free-text documentation
        typewords: Type token sequence, e.g. ["nullable", "[]", "string"]
    """

    name: str
    docs: str
    typewords: tuple[str, ...]


@dataclass(frozen=True)
class Struct:
    name: str
    docs: str
    fields: tuple[Field, ...]


@dataclass(frozen=True)
class IntValue:
    name: str
    value: int
    docs: str


@dataclass(frozen=True)
class Ints:
    name: str
    docs: str
    values: tuple[IntValue, ...]


@dataclass(frozen=True)
class StringValue:
    name: str
    value: str
    docs: str


@dataclass(frozen=True)
class Strings:
    name: str
    docs: str
    values: tuple[StringValue, ...]


@dataclass(frozen=True)
class Arg:
    """A function parameter or return value.

    Return values may have an empty name.
    """

    name: str
    docs: str
    typewords: tuple[str, ...]


@dataclass(frozen=True)
class Function:
    name: str
    docs: str
    params: tuple[Arg, ...]
    returns: tuple[Arg, ...]


@dataclass(frozen=True)
class Section:
    """A node of the documentation tree.

    Attributes:
        name: Section name, used as heading in the generated outline
        docs: Free-text documentation
        sections: Nested sections in declaration order
        structs: Struct types declared in this section
        ints: Integer enumerations declared in this section
        strings: String enumerations declared in this section
        functions: Functions declared in this section
    """

    name: str
    docs: str
    sections: tuple["Section", ...]
    structs: tuple[Struct, ...]
    ints: tuple[Ints, ...]
    strings: tuple[Strings, ...]
    functions: tuple[Function, ...]

    def walk(self) -> list["Section"]:
        """Return this section and all nested sections, depth-first."""
        result = [self]
        for section in self.sections:
            result.extend(section.walk())
        return result


@dataclass(frozen=True)
class Document:
    """Root of a decoded sherpadoc document.

    Attributes:
        sherpadoc_version: Format version of the document
        version: Version of the described API, if given
        sherpa_version: Sherpa protocol version, if given
        root: The top-level section
    """

    sherpadoc_version: int
    version: str
    sherpa_version: int
    root: Section


def build_document(raw: Mapping[str, object]) -> Document:
    """Build the schema model from a decoded sherpadoc document.

    Args:
        raw: The decoded JSON object of the root section

    Returns:
        A Document wrapping the root Section

    Raises:
        SchemaError: If any member has the wrong JSON type
    """
    root = _build_section(cast(SectionObject, raw), "$")
    version = raw.get("Version", "")
    if not isinstance(version, str):
        raise SchemaError("$.Version: expected string")
    sherpa_version = raw.get("SherpaVersion", 0)
    if not isinstance(sherpa_version, int) or isinstance(sherpa_version, bool):
        raise SchemaError("$.SherpaVersion: expected integer")
    sherpadoc_version = raw.get("SherpadocVersion", 0)
    return Document(
        sherpadoc_version=cast(int, sherpadoc_version),
        version=version,
        sherpa_version=sherpa_version,
        root=root,
    )


def _build_section(raw: SectionObject, path: str) -> Section:
    _expect_object(raw, path)
    return Section(
        name=_string(raw, "Name", path),
        docs=_string(raw, "Docs", path),
        sections=tuple(
            _build_section(item, f"{path}.Sections[{index}]")
            for index, item in enumerate(_list(raw, "Sections", path))
        ),
        structs=tuple(
            _build_struct(item, f"{path}.Structs[{index}]") for index, item in enumerate(_list(raw, "Structs", path))
        ),
        ints=tuple(_build_ints(item, f"{path}.Ints[{index}]") for index, item in enumerate(_list(raw, "Ints", path))),
        strings=tuple(
            _build_strings(item, f"{path}.Strings[{index}]") for index, item in enumerate(_list(raw, "Strings", path))
        ),
        functions=tuple(
            _build_function(item, f"{path}.Functions[{index}]")
            for index, item in enumerate(_list(raw, "Functions", path))
        ),
    )


def _build_struct(raw: StructObject, path: str) -> Struct:
    _expect_object(raw, path)
    return Struct(
        name=_string(raw, "Name", path),
        docs=_string(raw, "Docs", path),
        fields=tuple(
            _build_field(item, f"{path}.Fields[{index}]") for index, item in enumerate(_list(raw, "Fields", path))
        ),
    )


def _build_field(raw: FieldObject, path: str) -> Field:
    _expect_object(raw, path)
    return Field(
        name=_string(raw, "Name", path),
        docs=_string(raw, "Docs", path),
        typewords=_typewords(raw, path),
    )


def _build_ints(raw: IntsObject, path: str) -> Ints:
    _expect_object(raw, path)
    values: list[IntValue] = []
    for index, item in enumerate(_list(raw, "Values", path)):
        item_path = f"{path}.Values[{index}]"
        _expect_object(item, item_path)
        value = cast(IntValueObject, item).get("Value")
        if not isinstance(value, int) or isinstance(value, bool):
            raise SchemaError(f"{item_path}.Value: expected integer")
        values.append(IntValue(name=_string(item, "Name", item_path), value=value, docs=_string(item, "Docs", item_path)))
    return Ints(name=_string(raw, "Name", path), docs=_string(raw, "Docs", path), values=tuple(values))


def _build_strings(raw: StringsObject, path: str) -> Strings:
    _expect_object(raw, path)
    values: list[StringValue] = []
    for index, item in enumerate(_list(raw, "Values", path)):
        item_path = f"{path}.Values[{index}]"
        _expect_object(item, item_path)
        value = cast(StringValueObject, item).get("Value")
        if not isinstance(value, str):
            raise SchemaError(f"{item_path}.Value: expected string")
        values.append(
            StringValue(name=_string(item, "Name", item_path), value=value, docs=_string(item, "Docs", item_path))
        )
    return Strings(name=_string(raw, "Name", path), docs=_string(raw, "Docs", path), values=tuple(values))


def _build_function(raw: FunctionObject, path: str) -> Function:
    _expect_object(raw, path)
    return Function(
        name=_string(raw, "Name", path),
        docs=_string(raw, "Docs", path),
        params=tuple(_build_arg(item, f"{path}.Params[{index}]") for index, item in enumerate(_list(raw, "Params", path))),
        returns=tuple(
            _build_arg(item, f"{path}.Returns[{index}]") for index, item in enumerate(_list(raw, "Returns", path))
        ),
    )


def _build_arg(raw: ArgObject, path: str) -> Arg:
    _expect_object(raw, path)
    return Arg(
        name=_string(raw, "Name", path),
        docs=_string(raw, "Docs", path),
        typewords=_typewords(raw, path),
    )


def _expect_object(raw: object, path: str) -> None:
    if not isinstance(raw, Mapping):
        raise SchemaError(f"{path}: expected object, saw {type(raw).__name__}")


def _string(raw: Mapping[str, object], key: str, path: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SchemaError(f"{path}.{key}: expected string, saw {type(value).__name__}")
    return value


def _list(raw: Mapping[str, object], key: str, path: str) -> list[object]:
    # Sherpa servers encode empty lists as null.
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaError(f"{path}.{key}: expected array, saw {type(value).__name__}")
    return value


def _typewords(raw: Mapping[str, object], path: str) -> tuple[str, ...]:
    words = _list(raw, "Typewords", path)
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise SchemaError(f"{path}.Typewords[{index}]: expected string, saw {type(word).__name__}")
    return tuple(cast(list[str], words))
