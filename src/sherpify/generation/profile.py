from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationProfile:
    """Python language features the generated module may use.

    Built-in generics (list[int]) need 3.9, X | None at runtime needs 3.10.
    The generated module always starts with ``from __future__ import
    annotations``, so these only matter where types are evaluated.
    """

    use_pep604: bool
    use_builtin_generics: bool

    @classmethod
    def from_version(cls, target_version: str | tuple[int, int]) -> "GenerationProfile":
        if isinstance(target_version, str):
            parts = target_version.split(".")
            major = int(parts[0])
            minor = int(parts[1]) if len(parts) > 1 else 0
        else:
            major, minor = target_version
        return cls(
            use_pep604=(major, minor) >= (3, 10),
            use_builtin_generics=(major, minor) >= (3, 9),
        )
