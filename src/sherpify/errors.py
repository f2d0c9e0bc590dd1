from __future__ import annotations

from collections.abc import Sequence


class SherpifyError(Exception):
    """Base class for every error raised while generating a client."""


class SchemaError(SherpifyError):
    """The sherpadoc document cannot be read or has the wrong shape."""


class SchemaVersionError(SchemaError):
    def __init__(self, found: object, expected: int) -> None:
        super().__init__(f"unexpected sherpadoc version {found!r}, expected {expected}")
        self.found = found
        self.expected = expected


class SchemaValidationError(SchemaError):
    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        message = "invalid sherpadoc: " + "; ".join(self.problems)
        super().__init__(message)


class MalformedTypeError(SherpifyError):
    def __init__(self, context: str, reason: str, tokens: Sequence[str]) -> None:
        super().__init__(f"invalid type for {context}: {reason}, saw {list(tokens)!r}")
        self.context = context
        self.reason = reason
        self.tokens = list(tokens)


class DuplicateIdentifierError(SherpifyError):
    def __init__(self, scope: str, identifier: str, first: str, second: str) -> None:
        super().__init__(f"duplicate identifier {identifier!r} in {scope}: generated from both {first!r} and {second!r}")
        self.scope = scope
        self.identifier = identifier
        self.names = (first, second)
