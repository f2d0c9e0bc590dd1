from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..errors import DuplicateIdentifierError
from .profile import GenerationProfile
from .type_emitter import TypeEmitter
from .typewords import parse_type


@dataclass
class ClientOutput:
    """Output of client code generation."""

    code: str


@dataclass
class Scope:
    """Generated identifiers of one namespace in the output module.

    Reserved names are identifiers the generator itself places in the
    namespace, such as the runtime helpers at module level.
    """

    description: str
    reserved: Iterable[str] = ()
    _names: dict[str, str] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        for name in self.reserved:
            self._names[name] = f"<reserved {name}>"

    def claim(self, identifier: str, source_name: str) -> str:
        """Register an identifier derived from source_name and return it.

        Raises:
            DuplicateIdentifierError: If the identifier is already taken
        """
        previous = self._names.get(identifier)
        if previous is not None:
            raise DuplicateIdentifierError(self.description, identifier, previous, source_name)
        self._names[identifier] = source_name
        return identifier


@dataclass
class ClientContext:
    """State shared while generating one client module.

    Note:
        The emitter's imports set is mutated during generation to track the
        typing names the module needs. Methods append the module level
        constants holding their result types to result_lines.
    """

    profile: GenerationProfile
    emitter: TypeEmitter
    module_scope: Scope
    method_scope: Scope
    result_lines: list[str] = field(default_factory=list)

    def type_of(self, context: str, typewords: Iterable[str]) -> str:
        """Parse and render a type token sequence."""
        return self.emitter.emit(parse_type(context, tuple(typewords)))
