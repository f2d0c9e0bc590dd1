from __future__ import annotations

from typing import TypedDict

# The only sherpadoc format version this generator understands.
SHERPADOC_VERSION = 1

ArgObject = TypedDict(
    "ArgObject",
    {
        "Name": str,
        "Docs": str,
        "Typewords": list[str],
    },
    total=False,
)

FieldObject = TypedDict(
    "FieldObject",
    {
        "Name": str,
        "Docs": str,
        "Typewords": list[str],
    },
    total=False,
)

StructObject = TypedDict(
    "StructObject",
    {
        "Name": str,
        "Docs": str,
        "Fields": list[FieldObject],
    },
    total=False,
)

IntValueObject = TypedDict(
    "IntValueObject",
    {
        "Name": str,
        "Value": int,
        "Docs": str,
    },
    total=False,
)

IntsObject = TypedDict(
    "IntsObject",
    {
        "Name": str,
        "Docs": str,
        "Values": list[IntValueObject],
    },
    total=False,
)

StringValueObject = TypedDict(
    "StringValueObject",
    {
        "Name": str,
        "Value": str,
        "Docs": str,
    },
    total=False,
)

StringsObject = TypedDict(
    "StringsObject",
    {
        "Name": str,
        "Docs": str,
        "Values": list[StringValueObject],
    },
    total=False,
)

FunctionObject = TypedDict(
    "FunctionObject",
    {
        "Name": str,
        "Docs": str,
        "Params": list[ArgObject],
        "Returns": list[ArgObject],
    },
    total=False,
)

SectionObject = TypedDict(
    "SectionObject",
    {
        "Name": str,
        "Docs": str,
        "Functions": list[FunctionObject],
        "Sections": list["SectionObject"],
        "Structs": list[StructObject],
        "Ints": list[IntsObject],
        "Strings": list[StringsObject],
        # Only present on the root section.
        "Version": str,
        "SherpaVersion": int,
        "SherpadocVersion": int,
    },
    total=False,
)
