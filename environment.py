"""Variable store used by the interpreter.

This module defines `Environment`, a flat mapping from variable name to the
integer value it was last assigned, and `UndefinedVariableError`, raised when
a name is read before any declaration bound it. There is a single global
namespace per run: no nested scopes and no removal.
"""

from __future__ import annotations
from typing import Dict, Iterator


class UndefinedVariableError(RuntimeError):
    def __init__(self, name: str):
        super().__init__(f"Undefined variable '{name}'")
        self.name = name


class Environment:
    def __init__(self) -> None:
        self.values: Dict[str, int] = {}

    def set(self, name: str, value: int) -> None:
        """Bind `name` to `value`, overwriting any previous binding."""
        self.values[name] = value

    def get(self, name: str) -> int:
        """Return the value bound to `name`."""
        if name not in self.values:
            raise UndefinedVariableError(name)
        return self.values[name]

    def as_dict(self) -> Dict[str, int]:
        return dict(self.values)

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Environment({self.values!r})"
