"""Data models for the stub registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class StubKey:
    """Identifies one seam: who owns it, what it is called, how many args it takes."""

    owner: str  # module name of the seam
    name: str  # qualified name within the module
    arity: int

    def describe(self) -> str:
        """Render as ``owner.name/arity``."""
        return f"{self.owner}.{self.name}/{self.arity}"

    def describe_call(self, args: list[Any]) -> str:
        """Render a concrete call, e.g. ``owner.name(1, 'a')``."""
        arg_string = ", ".join(repr(arg) for arg in args)
        return f"{self.owner}.{self.name}({arg_string})"


class Mode(Enum):
    """How a stub entry produces its value."""

    RETURN = "return"  # same payload on every match
    STREAM = "stream"  # payload is consumed head-first, one value per match


@dataclass
class StubEntry:
    """A registered (argument specs, mode, payload) triple."""

    arg_specs: tuple[Any, ...]
    mode: Mode
    payload: Any
