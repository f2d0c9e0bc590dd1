"""Type emission utilities for code generation.

This module provides the TypeEmitter class which renders parsed sherpadoc
types as Python type expressions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .profile import GenerationProfile
from .typewords import ArrayType, BaseType, MapType, NamedType, NullableType, SherpaType

BASE_TYPE_NAMES = {
    "any": "Any",
    "bool": "bool",
    "int8": "int",
    "uint8": "int",
    "int16": "int",
    "uint16": "int",
    "int32": "int",
    "uint32": "int",
    "int64": "int",
    "uint64": "int",
    "int64s": "int",
    "uint64s": "int",
    "float32": "float",
    "float64": "float",
    "string": "str",
    "timestamp": "datetime.datetime",
}


@dataclass
class TypeEmitter:
    """Renders parsed sherpadoc types as Python type expressions.

    The rendered expressions are valid both as annotations and as runtime
    values, so the generated client can pass them to its decoder.

    Attributes:
        profile: Generation profile controlling Python version features
        imports: Set of typing imports required by emitted types

    Note:
        The emit() method has side effects: it updates self.imports with
        any typing module imports required by the emitted type.

    Example:
        >>> emitter = TypeEmitter(GenerationProfile.from_version("3.10"))
        >>> emitter.emit(NullableType(ArrayType(BaseType("string"))))
        'list[str] | None'
        >>> emitter.emit(MapType(NamedType("Item")))
        'dict[str, Item]'
    """

    profile: GenerationProfile
    imports: set[str] = field(default_factory=set)

    def emit(self, sherpa_type: SherpaType) -> str:
        """Render a parsed type.

        Base type names without a table entry are emitted verbatim.
        """
        if isinstance(sherpa_type, BaseType):
            name = BASE_TYPE_NAMES.get(sherpa_type.name, sherpa_type.name)
            if name == "Any":
                self.imports.add("Any")
            return name
        if isinstance(sherpa_type, NullableType):
            inner = self.emit(sherpa_type.inner)
            if self.profile.use_pep604:
                return f"{inner} | None"
            self.imports.add("Optional")
            return f"Optional[{inner}]"
        if isinstance(sherpa_type, ArrayType):
            inner = self.emit(sherpa_type.inner)
            return f"{self._generic('list')}[{inner}]"
        if isinstance(sherpa_type, MapType):
            value = self.emit(sherpa_type.value)
            return f"{self._generic('dict')}[str, {value}]"
        if isinstance(sherpa_type, NamedType):
            return sherpa_type.name
        raise TypeError(f"unsupported type: {sherpa_type!r}")

    def emit_returns(self, types: Sequence[str]) -> str:
        """Render the return annotation for a list of rendered types."""
        if not types:
            return "None"
        if len(types) == 1:
            return types[0]
        return f"{self._generic('tuple')}[{', '.join(types)}]"

    def _generic(self, builtin: str) -> str:
        if self.profile.use_builtin_generics:
            return builtin
        name = builtin.capitalize()
        self.imports.add(name)
        return name
