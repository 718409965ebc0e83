# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SpecRegistry`, the ordered collection of argument specs,
and `SpecConfigurator`, the fluent handle used to declare each spec.

Declaration order matters: positional specs claim tokens in the order they were
declared, and the required-argument check reports the first missing spec in
that order.

Example Usage:
    registry = SpecRegistry()
    registry.start("input").flag("i").flag("input", "--").consume(1).required().end()
    registry.start("output").flag("o").flag("output", "--").consume(1).initial("a.out").end()
    registry.start("help").flag("h").flag("help", "--").abort().end()

    evaluation = registry.evaluate(["-i", "in.txt"])
    evaluation.value("input")    # "in.txt"
    evaluation.value("output")   # "a.out"

Build-time rules (all raise `InvalidBuilding`):
- Spec ids are unique.
- No two tags, in the same spec or across specs, spell the same text.
- A positional spec cannot be both `multiple` and `consume(n > 0)`.
- `multiple()` and `over()` cannot be combined; `over()` implies `multiple`.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Iterator, Sequence

from clab.exceptions import InvalidBuilding
from clab.logger import logger
from clab.parser.arg_spec import DEFAULT_PREFIX, ArgSpec, TagInfo
from clab.parser.evaluation import Evaluation
from clab.parser.evaluator import Evaluator


class SpecConfigurator:
    """
    Fluent handle bound to one spec of a `SpecRegistry`.

    The handle stores the registry and the index of its spec rather than the
    spec itself. Every method returns the configurator for chaining, except
    `end()`, which finalizes the spec and returns the registry.
    """

    def __init__(self, registry: SpecRegistry, index: int) -> None:
        self.registry = registry
        self.index = index

    @property
    def spec(self) -> ArgSpec:
        """The spec this handle configures."""
        return self.registry.specs[self.index]

    def _editable(self) -> ArgSpec:
        spec = self.spec
        if spec.finalized:
            raise InvalidBuilding(
                f"Argument '{spec.id}' is already finalized.", arg_id=spec.id
            )
        return spec

    def flag(self, tag: str, prefix: str = DEFAULT_PREFIX) -> SpecConfigurator:
        """Add a tag that sets the state to True."""
        return self.toggle(True, tag, prefix)

    def toggle(
        self, value: bool, tag: str, prefix: str = DEFAULT_PREFIX
    ) -> SpecConfigurator:
        """Add a tag that sets the state to `value` when matched."""
        spec = self._editable()
        if not isinstance(tag, str) or not tag:
            raise InvalidBuilding(
                f"Tag for '{spec.id}' must be a non-empty string.", arg_id=spec.id
            )
        if not isinstance(prefix, str):
            raise InvalidBuilding(
                f"Prefix for '{spec.id}' must be a string.", arg_id=spec.id
            )
        spec.tags[tag] = TagInfo(prefix=prefix, toggle_value=bool(value))
        return self

    def consume(
        self, count: int, allowed_values: Iterable[str] | None = None
    ) -> SpecConfigurator:
        """Set the arity and, optionally, the allowed values."""
        spec = self._editable()
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidBuilding(
                f"Argument '{spec.id}' must consume a non-negative integer count.",
                arg_id=spec.id,
            )
        spec.consumed_args = count
        if allowed_values is not None:
            if isinstance(allowed_values, (str, dict)):
                raise InvalidBuilding(
                    f"Allowed values for '{spec.id}' must be a collection of strings.",
                    arg_id=spec.id,
                )
            allowed = set(allowed_values)
            if not all(isinstance(value, str) for value in allowed):
                raise InvalidBuilding(
                    f"Allowed values for '{spec.id}' must be strings.", arg_id=spec.id
                )
            spec.allowed_values = allowed
        return self

    def required(self) -> SpecConfigurator:
        """Fail the evaluation if the spec is never seen."""
        self._editable().required = True
        return self

    def multiple(self) -> SpecConfigurator:
        """Allow the spec to occur more than once, appending values."""
        spec = self._editable()
        if spec.overwritable:
            raise InvalidBuilding(
                f"Argument '{spec.id}' cannot be 'multiple' and 'over' at the same time.",
                arg_id=spec.id,
            )
        spec.multiple = True
        return self

    def abort(self) -> SpecConfigurator:
        """Short-circuit the evaluation when the spec appears anywhere."""
        self._editable().abort = True
        return self

    def over(self) -> SpecConfigurator:
        """Allow the spec to occur more than once, replacing values each time."""
        spec = self._editable()
        if spec.multiple and not spec.overwritable:
            raise InvalidBuilding(
                f"Argument '{spec.id}' cannot be 'over' and 'multiple' at the same time.",
                arg_id=spec.id,
            )
        spec.overwritable = True
        spec.multiple = True
        return self

    def initial(self, value: bool | str | Sequence[str]) -> SpecConfigurator:
        """
        Set a default.

        A bool sets the default state, a string sets a single default value and
        a list or tuple of strings sets the default values.
        """
        spec = self._editable()
        if isinstance(value, bool):
            spec.default_toggle = value
        elif isinstance(value, str):
            spec.default_values = [value]
        elif isinstance(value, (list, tuple)) and all(
            isinstance(item, str) for item in value
        ):
            spec.default_values = list(value)
        else:
            raise InvalidBuilding(
                f"Initial value for '{spec.id}' must be a bool, a string or a list "
                f"of strings, got {type(value).__name__}.",
                arg_id=spec.id,
            )
        return self

    def action(self, callback: Callable[[str], object]) -> SpecConfigurator:
        """Set the callback invoked with every accepted value."""
        spec = self._editable()
        if not callable(callback):
            raise InvalidBuilding(
                f"Action for '{spec.id}' must be callable.", arg_id=spec.id
            )
        spec.callback = callback
        return self

    def end(self) -> SpecRegistry:
        """Finalize the spec and return the registry."""
        self.registry._finalize(self.index)
        return self.registry


class SpecRegistry:
    """
    Ordered collection of `ArgSpec` and entry point for evaluation.

    Specs are declared with `start()` and finalized with `end()`; the registry
    must not be mutated while an evaluation runs.
    """

    def __init__(self) -> None:
        self.specs: list[ArgSpec] = []
        self._ids: set[str] = set()
        self._tag_texts: dict[str, str] = {}

    def start(self, arg_id: str) -> SpecConfigurator:
        """Append a new spec and return its configurator."""
        if not isinstance(arg_id, str):
            raise InvalidBuilding(f"Argument id must be a string, got {arg_id!r}.")
        if arg_id in self._ids:
            raise InvalidBuilding(
                f"Argument '{arg_id}' is already defined.", arg_id=arg_id
            )
        self._ids.add(arg_id)
        self.specs.append(ArgSpec(id=arg_id))
        return SpecConfigurator(self, len(self.specs) - 1)

    def _finalize(self, index: int) -> None:
        spec = self.specs[index]
        if spec.finalized:
            return
        if spec.positional and spec.multiple and spec.consumed_args > 0:
            raise InvalidBuilding(
                f"Positional argument '{spec.id}' cannot be 'multiple' and consume "
                f"a fixed number of values.",
                arg_id=spec.id,
            )
        texts: dict[str, str] = {}
        for text, _ in spec.candidates():
            owner = self._tag_texts.get(text) or texts.get(text)
            if owner is not None:
                raise InvalidBuilding(
                    f"Tag '{text}' of '{spec.id}' is already used by '{owner}'.",
                    arg_id=spec.id,
                    value=text,
                )
            texts[text] = spec.id
        self._tag_texts.update(texts)
        spec.finalized = True
        logger.debug("Registered argument spec '%s'.", spec.id)

    def finalize(self) -> None:
        """Finalize every spec that is still open."""
        for index in range(len(self.specs)):
            self._finalize(index)

    def evaluate(self, tokens: Iterable[str]) -> Evaluation:
        """
        Evaluate a token list against the declared specs.

        Args:
            tokens (Iterable[str]): Tokens, without the program name.

        Returns:
            Evaluation: Per-id states, values and abort marker.

        Raises:
            InvalidBuilding: If a still open spec fails finalization.
            EvaluationError: If the tokens do not satisfy the specs.
        """
        tokens = list(tokens)
        self.finalize()
        logger.debug("Evaluating %d token(s) against %d spec(s).", len(tokens), len(self))
        return Evaluator(self.specs).evaluate(tokens)

    def evaluate_argv(self, argv: Sequence[str] | None = None) -> Evaluation:
        """Evaluate `argv` (default `sys.argv`) without its program name."""
        if argv is None:
            argv = sys.argv
        return self.evaluate(list(argv[1:]))

    def get_spec(self, arg_id: str) -> ArgSpec | None:
        """Return the spec with the given id, if declared."""
        return next((spec for spec in self.specs if spec.id == arg_id), None)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert spec metadata into a serializable list of dicts.

        Callbacks are reported by name only.
        """
        defs = []
        for spec in self.specs:
            defs.append(
                {
                    "id": spec.id,
                    "tags": [
                        {
                            "name": name,
                            "prefix": info.prefix,
                            "toggle": info.toggle_value,
                        }
                        for name, info in spec.tags.items()
                    ],
                    "consume": spec.consumed_args,
                    "allowed": sorted(spec.allowed_values),
                    "initial_toggle": spec.default_toggle,
                    "initial": list(spec.default_values),
                    "required": spec.required,
                    "multiple": spec.multiple and not spec.overwritable,
                    "abort": spec.abort,
                    "over": spec.overwritable,
                    "action": getattr(spec.callback, "__name__", None),
                }
            )
        return defs

    def __iter__(self) -> Iterator[ArgSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def __contains__(self, arg_id: object) -> bool:
        return arg_id in self._ids

    def __str__(self) -> str:
        positional = sum(spec.positional for spec in self.specs)
        required = sum(spec.required for spec in self.specs)
        return (
            f"SpecRegistry(specs={len(self.specs)}, tags={len(self._tag_texts)}, "
            f"positional={positional}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
