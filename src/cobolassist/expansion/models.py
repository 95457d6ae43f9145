"""Expansion modes and typed provider results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from cobolassist.source.buffer import SourceBuffer


class ExpansionMode(str, Enum):
    """Which source a completion request should index."""

    USE_LOCAL_BUFFER = "useLocalBuffer"
    USE_EXTERNAL_EXPANSION = "useExternalExpansion"

    @classmethod
    def parse(cls, value: ExpansionMode | str) -> ExpansionMode:
        """Accept enum members, wire values, and the short editor aliases."""
        if isinstance(value, ExpansionMode):
            return value
        alias = _ALIASES.get(value.strip().lower())
        if alias is not None:
            return alias
        return cls(value)


_ALIASES = {
    "local": ExpansionMode.USE_LOCAL_BUFFER,
    "uselocalbuffer": ExpansionMode.USE_LOCAL_BUFFER,
    "expanded": ExpansionMode.USE_EXTERNAL_EXPANSION,
    "useexternalexpansion": ExpansionMode.USE_EXTERNAL_EXPANSION,
}


@dataclass(frozen=True, slots=True)
class Expanded:
    """Successful expansion."""

    buffer: SourceBuffer


@dataclass(frozen=True, slots=True)
class ExpansionFailed:
    """Failed expansion. ``timeout_sec`` is set when the tool timed out."""

    reason: str
    timeout_sec: float | None = None


ExpansionResult = Expanded | ExpansionFailed


class ExpansionProvider(Protocol):
    """Produces the copy-expanded version of a source file."""

    async def __call__(self, uri: str) -> ExpansionResult: ...
