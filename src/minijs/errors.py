"""Source locations and host-facing error types."""
from __future__ import annotations

from dataclasses import dataclass


#describes an exact line/column position captured during lexing
@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A 1-based line/column location inside a source string."""

    line: int
    column: int

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.line}:{self.column}"


#normalizes the base exception for every host-facing failure
class MiniJSError(Exception):
    """Base class for minijs errors."""


#misuse of the interpreter by its host rather than a language-level error
class HostContractError(MiniJSError):
    """Raised when the host breaks the calling contract of the core."""


#evaluating an empty source string is rejected before lexing
class EmptySourceError(HostContractError):
    def __init__(self) -> None:
        super().__init__("empty code string")


#runtime refuses work once it has been stopped or closed
class RuntimeStoppedError(HostContractError):
    def __init__(self) -> None:
        super().__init__("runtime is stopped")


#a parser instance consumes its token stream exactly once
class ParserReuseError(HostContractError):
    def __init__(self) -> None:
        super().__init__("parser has already consumed its token stream")
