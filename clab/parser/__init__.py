"""
CLAB Command Line Arguments Builder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg_spec import ArgSpec, TagInfo
from .evaluation import Evaluation, SpecOutcome
from .evaluator import Evaluator, EvaluatorPhase
from .matcher import TagMatch, TagMatcher
from .registry import SpecConfigurator, SpecRegistry

__all__ = [
    "ArgSpec",
    "TagInfo",
    "Evaluation",
    "SpecOutcome",
    "Evaluator",
    "EvaluatorPhase",
    "TagMatch",
    "TagMatcher",
    "SpecConfigurator",
    "SpecRegistry",
]
