"""Client module generation.

This module provides the generate_client() function that turns a sherpadoc
document into the source of a single Python module.

The generated module contains, in order:
- An outline of the API documentation as comments
- Imports and the backend Protocol definitions
- Client error classes and JSON encode/decode helpers
- One dataclass or enum per declared type, section by section
- The result types of every function, one constant per function
- The client class with one method per API function
"""

from __future__ import annotations

import logging

from ..model import Document, Section
from .context import ClientContext, ClientOutput, Scope
from .declarations import emit_section_types
from .docs import section_outline
from .functions import emit_section_functions
from .profile import GenerationProfile
from .runtime import (
    RUNTIME_MODULE_IMPORTS,
    RUNTIME_NAMES,
    RUNTIME_TYPING_IMPORTS,
    emit_backend_protocols,
    emit_client_errors,
    emit_client_init,
    emit_codec,
)
from .type_emitter import TypeEmitter

__all__ = [
    "generate_client",
    "ClientOutput",
    "ClientContext",
]

logger = logging.getLogger(__name__)


def generate_client(
    document: Document,
    api_name: str,
    base_url: str,
    profile: GenerationProfile,
) -> ClientOutput:
    """Generate client code from a sherpadoc document.

    Args:
        document: The loaded sherpadoc document
        api_name: Name of the generated client class
        base_url: Default base URL, function names are appended to it
        profile: Generation profile controlling Python version features

    Returns:
        ClientOutput containing the generated module source

    Raises:
        MalformedTypeError: If a type token sequence cannot be parsed
        DuplicateIdentifierError: If two names map to the same identifier
    """
    emitter = TypeEmitter(profile)
    ctx = ClientContext(
        profile=profile,
        emitter=emitter,
        module_scope=Scope("module", reserved=RUNTIME_NAMES),
        method_scope=Scope(f"methods of client {api_name}", reserved=("__init__", "_call")),
    )
    ctx.module_scope.claim(api_name, api_name)

    type_lines: list[str] = []
    method_lines: list[str] = []
    _emit_section(document.root, ctx, type_lines, method_lines)

    lines: list[str] = []
    lines.extend(section_outline(document.root))
    if document.version:
        lines.extend(["#", f"# API version {document.version}"])
    lines.append("# ruff: noqa")
    lines.append("from __future__ import annotations")
    lines.append("")
    lines.extend(RUNTIME_MODULE_IMPORTS)
    typing_imports = sorted(RUNTIME_TYPING_IMPORTS | emitter.imports)
    lines.append(f"from typing import {', '.join(typing_imports)}")
    lines.extend(["", ""])

    lines.extend(emit_backend_protocols(profile))
    lines.extend(emit_client_errors())
    lines.extend(emit_codec())
    lines.extend(type_lines)
    if ctx.result_lines:
        lines.extend(ctx.result_lines)
        lines.extend(["", ""])
    lines.extend(emit_client_init(api_name, base_url))
    lines.extend(method_lines)

    logger.debug("generated %d lines for client %s", len(lines), api_name)
    return ClientOutput(code="\n".join(lines).rstrip() + "\n")


def _emit_section(
    section: Section,
    ctx: ClientContext,
    type_lines: list[str],
    method_lines: list[str],
) -> None:
    logger.debug(
        "emitting section %r: %d structs, %d ints, %d strings, %d functions",
        section.name,
        len(section.structs),
        len(section.ints),
        len(section.strings),
        len(section.functions),
    )
    type_lines.extend(emit_section_types(section, ctx))
    method_lines.extend(emit_section_functions(section, ctx))
    for subsection in section.sections:
        _emit_section(subsection, ctx, type_lines, method_lines)
