"""Validation of sherpadoc documents.

check_document() verifies the things the generator relies on but does not
check itself: names are usable identifiers, type names are already in
exported form, declarations are unique, and every type reference points
at a declared type.
"""

from __future__ import annotations

import logging
import re

from .errors import SchemaValidationError
from .generation.naming import exported_name
from .generation.typewords import BASE_TYPES, WRAPPER_TOKENS
from .model import Arg, Document, Section

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def check_document(document: Document) -> None:
    """Validate a document, raising once with every problem found.

    Raises:
        SchemaValidationError: If the document has at least one problem
    """
    problems: list[str] = []
    sections = document.root.walk()

    type_names: dict[str, str] = {}
    function_names: set[str] = set()
    for section in sections:
        declared = (
            [("struct", item.name) for item in section.structs]
            + [("ints", item.name) for item in section.ints]
            + [("strings", item.name) for item in section.strings]
        )
        for kind, name in declared:
            if _check_name(problems, f"{kind} in section {section.name!r}", name):
                _check_exported(problems, name)
            if name in type_names:
                problems.append(f"duplicate type {name!r} (declared as {type_names[name]} and {kind})")
            else:
                type_names[name] = kind
        for function in section.functions:
            _check_name(problems, f"function in section {section.name!r}", function.name)
            if function.name in function_names:
                problems.append(f"duplicate function {function.name!r}")
            function_names.add(function.name)

    for section in sections:
        _check_section(problems, section, set(type_names))

    if problems:
        logger.debug("sherpadoc validation found %d problem(s)", len(problems))
        raise SchemaValidationError(problems)


def _check_section(problems: list[str], section: Section, type_names: set[str]) -> None:
    for struct in section.structs:
        seen: set[str] = set()
        for field in struct.fields:
            what = f"field {field.name!r} of type {struct.name!r}"
            _check_name(problems, f"field of type {struct.name!r}", field.name)
            if field.name in seen:
                problems.append(f"duplicate {what}")
            seen.add(field.name)
            _check_typewords(problems, what, field.typewords, type_names)

    for enum in list(section.ints) + list(section.strings):
        names: set[str] = set()
        values: set[object] = set()
        for item in enum.values:
            _check_name(problems, f"value of enum {enum.name!r}", item.name)
            if item.name in names:
                problems.append(f"duplicate value name {item.name!r} in enum {enum.name!r}")
            if item.value in values:
                problems.append(f"duplicate value {item.value!r} in enum {enum.name!r}")
            names.add(item.name)
            values.add(item.value)

    for function in section.functions:
        seen = set()
        for param in function.params:
            what = f"parameter {param.name!r} of function {function.name!r}"
            _check_name(problems, f"parameter of function {function.name!r}", param.name)
            if param.name in seen:
                problems.append(f"duplicate {what}")
            seen.add(param.name)
            _check_typewords(problems, what, param.typewords, type_names)
        for index, ret in enumerate(function.returns):
            _check_return(problems, function.name, index, ret, type_names)


def _check_return(problems: list[str], function: str, index: int, ret: Arg, type_names: set[str]) -> None:
    if ret.name:
        _check_name(problems, f"return value of function {function!r}", ret.name)
    _check_typewords(problems, f"return value {index} of function {function!r}", ret.typewords, type_names)


def _check_name(problems: list[str], what: str, name: str) -> bool:
    if not _NAME_PATTERN.match(name):
        problems.append(f"invalid name {name!r} for {what}")
        return False
    return True


def _check_exported(problems: list[str], name: str) -> None:
    # References to a type are emitted as written, so the declaration must
    # keep its name when turned into a class name.
    exported = exported_name(name)
    if exported != name:
        problems.append(f"type name {name!r} is not in exported form (would be {exported!r})")


def _check_typewords(problems: list[str], what: str, typewords: tuple[str, ...], type_names: set[str]) -> None:
    # Structural errors are reported by the type parser; only the
    # referenced type is checked here.
    for word in typewords:
        if word in WRAPPER_TOKENS:
            continue
        if word not in BASE_TYPES and word not in type_names:
            problems.append(f"unknown type {word!r} for {what}")
        return
