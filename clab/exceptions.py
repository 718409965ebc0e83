# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by CLAB.

Build-time problems (an inconsistent spec declaration) and evaluation-time
problems (a token list that does not satisfy the declared specs) are kept apart
so callers can tell a programming error from bad user input.

Every error carries its `ErrorKind`, the id of the offending spec (if any) and
the offending token or value (if any). The message is meant for developers;
user-facing diagnostics are left to the host program.

Exception Hierarchy:
- ClabError
    ├── InvalidBuilding
    ├── ClabConfigError
    └── EvaluationError
          ├── MissingArgument
          ├── MissingValue
          ├── InvalidValue
          ├── UnexpectedArgument
          ├── RedundantArgument
          └── TokenMismatch
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Taxonomy of every failure the builder or the evaluator can report."""

    INVALID_BUILDING = "invalid_building"
    MISSING_ARGUMENT = "missing_argument"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    REDUNDANT_ARGUMENT = "redundant_argument"
    TOKEN_MISMATCH = "token_mismatch"
    INVALID_CONFIG = "invalid_config"

    def __str__(self) -> str:
        return self.value


class ClabError(Exception):
    """Base exception for CLAB."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        arg_id: str | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.arg_id = arg_id
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind}, arg_id={self.arg_id!r}, "
            f"value={self.value!r})"
        )


class InvalidBuilding(ClabError):
    """Raised when a spec declaration is structurally inconsistent."""

    kind = ErrorKind.INVALID_BUILDING


class ClabConfigError(ClabError):
    """Raised when a declarative spec file cannot be loaded."""

    kind = ErrorKind.INVALID_CONFIG


class EvaluationError(ClabError):
    """Base class for errors raised while evaluating a token list."""


class MissingArgument(EvaluationError):
    """Raised when a required spec was never seen."""

    kind = ErrorKind.MISSING_ARGUMENT


class MissingValue(EvaluationError):
    """Raised when the input ran out before a spec's arity was fulfilled."""

    kind = ErrorKind.MISSING_VALUE


class InvalidValue(EvaluationError):
    """Raised when a value is outside the spec's allowed values."""

    kind = ErrorKind.INVALID_VALUE


class UnexpectedArgument(EvaluationError):
    """Raised when no tag and no positional spec can claim a token."""

    kind = ErrorKind.UNEXPECTED_ARGUMENT


class RedundantArgument(EvaluationError):
    """Raised when a spec that is not `multiple` is seen twice."""

    kind = ErrorKind.REDUNDANT_ARGUMENT


class TokenMismatch(EvaluationError):
    """Raised when a tag token sits where a value was expected."""

    kind = ErrorKind.TOKEN_MISMATCH
