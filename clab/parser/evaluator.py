# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Evaluator`, the single-pass engine that turns a token
list into an `Evaluation` according to a sequence of `ArgSpec`.

Phases:
- Init: seed every spec's default toggle and default values.
- Abort scan: the first token anywhere in the input that spells the tag of an
  `abort` spec ends the evaluation immediately, skipping validation.
- Scanning: left to right, each token is either a tag (the spec consumes its
  fixed arity from the following tokens) or is claimed by the first positional
  spec that is unseen or `multiple`.
- Validate: the first `required` spec (in declaration order) that was never
  seen raises `MissingArgument`.

Consumption rules:
- Fixed arity: exactly `consumed_args` tokens must follow; a token that spells
  a tag raises `TokenMismatch` and running out raises `MissingValue`.
- Greedy (`multiple` positional): tokens are taken until the next tag token or
  the end of input.
- Allowed values are checked for every consumed value (`InvalidValue`).
- On a spec's first occurrence its seeded defaults are replaced; an `over`
  spec replaces its values on every occurrence.

Errors propagate as soon as they are detected; callbacks run synchronously in
token order, each right after its value is stored.
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

from clab.exceptions import (
    InvalidValue,
    MissingArgument,
    MissingValue,
    RedundantArgument,
    TokenMismatch,
    UnexpectedArgument,
)
from clab.logger import logger
from clab.parser.arg_spec import ArgSpec
from clab.parser.evaluation import Evaluation
from clab.parser.matcher import TagMatch, TagMatcher


class EvaluatorPhase(Enum):
    """Phases of one evaluation pass."""

    INIT = "init"
    ABORT_SCAN = "abort_scan"
    SCANNING = "scanning"
    VALIDATE = "validate"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


class Evaluator:
    """
    Runs one evaluation pass over a token list.

    An `Evaluator` is created per call to `SpecRegistry.evaluate()` and is not
    reused; the specs it is given must not change while it runs.
    """

    def __init__(self, specs: Sequence[ArgSpec]) -> None:
        self.specs: tuple[ArgSpec, ...] = tuple(specs)
        self.matcher: TagMatcher = TagMatcher(self.specs)
        self.phase: EvaluatorPhase = EvaluatorPhase.INIT
        self._seen: set[str] = set()
        self._evaluation: Evaluation = Evaluation()

    def _enter(self, phase: EvaluatorPhase) -> None:
        logger.debug("Evaluator phase: %s -> %s", self.phase, phase)
        self.phase = phase

    def evaluate(self, tokens: Sequence[str]) -> Evaluation:
        """
        Evaluate the token list.

        Args:
            tokens (Sequence[str]): Tokens to evaluate, without the program name.

        Returns:
            Evaluation: The populated result.

        Raises:
            EvaluationError: One of the evaluation error kinds.
        """
        tokens = list(tokens)
        self._seed_defaults()

        self._enter(EvaluatorPhase.ABORT_SCAN)
        if self._abort_scan(tokens):
            self._enter(EvaluatorPhase.DONE)
            return self._evaluation

        self._enter(EvaluatorPhase.SCANNING)
        i = 0
        while i < len(tokens):
            match = self.matcher.match(tokens[i])
            if match is not None:
                i = self._handle_tagged(match, tokens, i)
            else:
                i = self._handle_positional(tokens, i)

        self._enter(EvaluatorPhase.VALIDATE)
        self._validate_required()

        self._enter(EvaluatorPhase.DONE)
        return self._evaluation

    def _seed_defaults(self) -> None:
        for spec in self.specs:
            self._evaluation._set_state(spec.id, spec.default_toggle)
            self._evaluation._clear_values(spec.id)
            for value in spec.default_values:
                self._evaluation._add_value(spec.id, value)

    def _abort_scan(self, tokens: list[str]) -> bool:
        for token in tokens:
            match = self.matcher.match(token)
            if match is None or not match.spec.abort:
                continue
            spec = match.spec
            logger.debug("Evaluation aborted by '%s' (token '%s').", spec.id, token)
            self._evaluation._set_aborted_by(spec.id)
            self._evaluation._set_state(spec.id, match.toggle_value)
            spec.invoke("")
            return True
        return False

    def _mark_seen(self, spec: ArgSpec, state: bool, replace_values: bool) -> None:
        first_sight = spec.id not in self._seen
        if (first_sight and replace_values) or (spec.overwritable and replace_values):
            self._evaluation._clear_values(spec.id)
        self._seen.add(spec.id)
        self._evaluation._set_state(spec.id, state)

    def _accept(self, spec: ArgSpec, value: str) -> None:
        if not spec.accepts(value):
            allowed = ", ".join(sorted(spec.allowed_values))
            raise InvalidValue(
                f"Invalid value '{value}' for '{spec.id}': must be one of {{{allowed}}}",
                arg_id=spec.id,
                value=value,
            )
        self._evaluation._add_value(spec.id, value)
        spec.invoke(value)

    def _consume_fixed(
        self, spec: ArgSpec, tokens: list[str], start: int, count: int
    ) -> int:
        i = start
        for _ in range(count):
            if i >= len(tokens):
                raise MissingValue(
                    f"Argument '{spec.id}' expects {count} value(s), "
                    f"got {i - start}.",
                    arg_id=spec.id,
                )
            token = tokens[i]
            if self.matcher.is_tag(token):
                raise TokenMismatch(
                    f"Argument '{spec.id}' expects a value, found the tag '{token}'.",
                    arg_id=spec.id,
                    value=token,
                )
            self._accept(spec, token)
            i += 1
        return i

    def _consume_greedy(self, spec: ArgSpec, tokens: list[str], start: int) -> int:
        i = start
        while i < len(tokens) and not self.matcher.is_tag(tokens[i]):
            self._accept(spec, tokens[i])
            i += 1
        return i

    def _handle_tagged(self, match: TagMatch, tokens: list[str], i: int) -> int:
        spec = match.spec
        if spec.id in self._seen and not spec.multiple:
            raise RedundantArgument(
                f"Argument '{spec.id}' was given more than once.",
                arg_id=spec.id,
                value=tokens[i],
            )
        self._mark_seen(
            spec, match.toggle_value, replace_values=spec.consumed_args > 0
        )
        return self._consume_fixed(spec, tokens, i + 1, spec.consumed_args)

    def _claim_positional(self) -> ArgSpec | None:
        for spec in self.specs:
            if spec.positional and (spec.id not in self._seen or spec.multiple):
                return spec
        return None

    def _handle_positional(self, tokens: list[str], i: int) -> int:
        spec = self._claim_positional()
        if spec is None:
            raise UnexpectedArgument(
                f"Unexpected argument '{tokens[i]}'.",
                value=tokens[i],
            )
        logger.debug("Token '%s' claimed by positional '%s'.", tokens[i], spec.id)
        self._mark_seen(spec, True, replace_values=True)
        if spec.multiple:
            return self._consume_greedy(spec, tokens, i)
        return self._consume_fixed(spec, tokens, i, max(spec.consumed_args, 1))

    def _validate_required(self) -> None:
        for spec in self.specs:
            if spec.required and spec.id not in self._seen:
                raise MissingArgument(
                    f"Missing required argument '{spec.id}'.",
                    arg_id=spec.id,
                )
