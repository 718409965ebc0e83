"""
CLAB Command Line Arguments Builder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ClabConfigError,
    ClabError,
    ErrorKind,
    EvaluationError,
    InvalidBuilding,
    InvalidValue,
    MissingArgument,
    MissingValue,
    RedundantArgument,
    TokenMismatch,
    UnexpectedArgument,
)
from .logger import logger
from .parser import ArgSpec, Evaluation, SpecConfigurator, SpecRegistry

__version__ = "0.1.0"

__all__ = [
    "ArgSpec",
    "Evaluation",
    "SpecConfigurator",
    "SpecRegistry",
    "ClabError",
    "ClabConfigError",
    "ErrorKind",
    "EvaluationError",
    "InvalidBuilding",
    "InvalidValue",
    "MissingArgument",
    "MissingValue",
    "RedundantArgument",
    "TokenMismatch",
    "UnexpectedArgument",
    "logger",
]
