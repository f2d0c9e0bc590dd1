from __future__ import annotations

from ..model import Function, Section
from .context import ClientContext, Scope
from .docs import block_comment
from .naming import local_name

# Names every generated method already uses for its own arguments.
RESERVED_PARAMETERS = ("self", "timeout")


def emit_section_functions(section: Section, ctx: ClientContext) -> list[str]:
    """Generate client methods for the functions of one section."""
    lines: list[str] = []
    for function in section.functions:
        lines.extend(emit_function(function, ctx))
    return lines


def emit_function(function: Function, ctx: ClientContext) -> list[str]:
    """Generate a client method calling one API function.

    The method takes the timeout first, then the declared parameters, and
    returns nothing, the single return value, or a tuple of return values.
    Result types are evaluated once at module level, where parameter names
    cannot shadow the names they use, and appended to ctx.result_lines.
    """
    method_name = ctx.method_scope.claim(local_name(function.name), function.name)

    return_types = [
        ctx.type_of(f"return value {index} of function {function.name}", ret.typewords)
        for index, ret in enumerate(function.returns)
    ]
    results = "[]"
    if return_types:
        results = ctx.module_scope.claim(f"_results_{method_name}", function.name)
        ctx.result_lines.append(f"{results} = [{', '.join(return_types)}]")

    params = Scope(
        f"parameters of function {function.name}",
        reserved=(*RESERVED_PARAMETERS, results),
    )
    param_parts = ["self", "timeout: TimeoutType"]
    param_names: list[str] = []
    for param in function.params:
        name = params.claim(local_name(param.name), param.name)
        param_type = ctx.type_of(f"parameter {param.name} of function {function.name}", param.typewords)
        param_parts.append(f"{name}: {param_type}")
        param_names.append(name)

    slots = [f"r{index}" for index in range(len(return_types))]
    annotation = ctx.emitter.emit_returns(return_types)
    call = f"self._call(timeout, {function.name!r}, [{', '.join(param_names)}], {results})"

    lines = block_comment(function.docs, "    ")
    lines.append(f"    def {method_name}({', '.join(param_parts)}) -> {annotation}:")
    if not slots:
        lines.append(f"        {call}")
    elif len(slots) == 1:
        lines.append(f"        (r0,) = {call}")
        lines.append("        return r0")
    else:
        lines.append(f"        {', '.join(slots)} = {call}")
        lines.append(f"        return {', '.join(slots)}")
    lines.append("")
    return lines
