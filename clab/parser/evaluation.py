# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Evaluation`, the result of `SpecRegistry.evaluate()`.

An evaluation records, per spec id, the boolean state (presence or toggle
outcome) and the ordered list of consumed values, plus the id of the abort spec
that short-circuited the pass, if any. It holds no reference back to the
registry and only exposes read accessors; every accessor returns a copy.

Example:
    evaluation = registry.evaluate(["-i", "in.txt"])
    if evaluation.aborted():
        ...
    evaluation.value("input")   # "in.txt"
    evaluation.list("output")   # ["a.out"]
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SpecOutcome:
    """Snapshot of one spec's state and values."""

    state: bool
    values: tuple[str, ...]


class Evaluation:
    """Per-id states and values collected during one evaluation pass."""

    def __init__(self) -> None:
        self._states: dict[str, bool] = {}
        self._values: dict[str, list[str]] = {}
        self._abort_id: str | None = None

    def _set_state(self, arg_id: str, state: bool) -> None:
        self._states[arg_id] = state

    def _add_value(self, arg_id: str, value: str) -> None:
        self._values.setdefault(arg_id, []).append(value)

    def _clear_values(self, arg_id: str) -> None:
        self._values[arg_id] = []

    def _set_aborted_by(self, arg_id: str) -> None:
        self._abort_id = arg_id

    def state(self, arg_id: str) -> bool:
        """Return the state of the id, False if unknown."""
        return self._states.get(arg_id, False)

    def list(self, arg_id: str) -> list[str]:
        """Return every value of the id in consumption order."""
        return list(self._values.get(arg_id, ()))

    def values(self, arg_id: str) -> list[str]:
        """Alias of `list()`."""
        return self.list(arg_id)

    def value(self, arg_id: str, default: str = "") -> str:
        """Return the last value of the id, or `default` if it has none."""
        values = self._values.get(arg_id)
        if not values:
            return default
        return values[-1]

    def captured(self, arg_id: str) -> bool:
        """Check whether at least one value is stored for the id."""
        return bool(self._values.get(arg_id))

    def handle(self, arg_id: str) -> SpecOutcome | None:
        """Return a snapshot of the id's state and values, None if unknown."""
        if arg_id not in self._states and arg_id not in self._values:
            return None
        return SpecOutcome(
            state=self.state(arg_id),
            values=tuple(self._values.get(arg_id, ())),
        )

    def aborted(self) -> bool:
        """Check whether an abort spec short-circuited the evaluation."""
        return self._abort_id is not None

    def aborted_id(self) -> str | None:
        """Return the id of the abort spec, None if the pass was not aborted."""
        return self._abort_id

    def aborted_by(self) -> str | None:
        """Alias of `aborted_id()`."""
        return self._abort_id

    def ids(self) -> list[str]:
        """Return every id that has a state or values."""
        ids = list(self._states)
        ids.extend(arg_id for arg_id in self._values if arg_id not in self._states)
        return ids

    def to_dict(self) -> dict[str, Any]:
        """Convert the evaluation to plain data, e.g. for JSON output."""
        return {
            "aborted_by": self._abort_id,
            "states": dict(self._states),
            "values": {arg_id: list(values) for arg_id, values in self._values.items()},
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Evaluation):
            return False
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        seen = sum(self._states.values())
        return (
            f"Evaluation(ids={len(self.ids())}, true_states={seen}, "
            f"aborted_by={self._abort_id!r})"
        )

    def __repr__(self) -> str:
        return str(self)
