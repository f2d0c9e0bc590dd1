from __future__ import annotations

from ..model import Ints, Section, Strings, Struct
from .context import ClientContext, Scope
from .docs import adaptive_comment, block_comment
from .naming import exported_name
from .typewords import is_string_encoded


def emit_section_types(section: Section, ctx: ClientContext) -> list[str]:
    """Generate the struct and enum declarations of one section."""
    lines: list[str] = []
    for struct in section.structs:
        lines.extend(emit_struct(struct, ctx))
    for ints in section.ints:
        lines.extend(emit_ints(ints, ctx))
    for strings in section.strings:
        lines.extend(emit_strings(strings, ctx))
    return lines


def emit_struct(struct: Struct, ctx: ClientContext) -> list[str]:
    """Generate a dataclass for a struct.

    Fields whose Python name differs from the wire name record the wire
    name in the field metadata under "json"; fields of string-encoded
    integer types are marked with "string".
    """
    class_name = ctx.module_scope.claim(exported_name(struct.name), struct.name)
    fields = Scope(f"fields of type {struct.name}")
    lines = block_comment(struct.docs)
    lines.append("@dataclasses.dataclass")
    lines.append(f"class {class_name}:")
    if not struct.fields:
        lines.append("    pass")
    for field in struct.fields:
        leading, trailing = adaptive_comment(field.docs, "    ")
        lines.extend(leading)
        field_name = fields.claim(exported_name(field.name), field.name)
        field_type = ctx.type_of(f"field {field.name} of type {struct.name}", field.typewords)
        metadata: list[str] = []
        if field_name != field.name:
            metadata.append(f"'json': {field.name!r}")
        if is_string_encoded(field.typewords):
            metadata.append("'string': True")
        declaration = f"    {field_name}: {field_type}"
        if metadata:
            declaration += f" = dataclasses.field(metadata={{{', '.join(metadata)}}})"
        lines.append(declaration + trailing)
    lines.extend(["", ""])
    return lines


def emit_ints(ints: Ints, ctx: ClientContext) -> list[str]:
    """Generate an IntEnum; an enumeration without values gets an empty body."""
    class_name = ctx.module_scope.claim(exported_name(ints.name), ints.name)
    lines = block_comment(ints.docs)
    lines.append(f"class {class_name}(enum.IntEnum):")
    lines.extend(_enum_members(ints.name, [(value.name, repr(value.value), value.docs) for value in ints.values]))
    lines.extend(["", ""])
    return lines


def emit_strings(strings: Strings, ctx: ClientContext) -> list[str]:
    """Generate a str-based Enum; an enumeration without values gets an empty body."""
    class_name = ctx.module_scope.claim(exported_name(strings.name), strings.name)
    lines = block_comment(strings.docs)
    lines.append(f"class {class_name}(str, enum.Enum):")
    lines.extend(
        _enum_members(strings.name, [(value.name, repr(value.value), value.docs) for value in strings.values])
    )
    lines.extend(["", ""])
    return lines


def _enum_members(enum_name: str, values: list[tuple[str, str, str]]) -> list[str]:
    if not values:
        return ["    pass"]
    members = Scope(f"values of type {enum_name}")
    lines: list[str] = []
    for name, literal, docs in values:
        leading, trailing = adaptive_comment(docs, "    ")
        lines.extend(leading)
        member = members.claim(exported_name(name), name)
        lines.append(f"    {member} = {literal}{trailing}")
    return lines
