# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves a raw token to the spec whose tag it spells.

A token matches a tag only when it equals `prefix + name` exactly: there is no
abbreviation, no case folding and no `--opt=value` splitting. Candidates are
ranked longest text first, then in declaration order, so duplicate declarations
resolve deterministically even though `SpecRegistry` rejects them at build time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from clab.logger import logger
from clab.parser.arg_spec import ArgSpec


@dataclass(frozen=True)
class TagMatch:
    """A resolved tag: the spec it belongs to and the toggle value it encodes."""

    spec: ArgSpec
    text: str
    toggle_value: bool


class TagMatcher:
    """Exact-equality lookup over every tag of every spec."""

    def __init__(self, specs: Sequence[ArgSpec]) -> None:
        candidates = [
            TagMatch(spec, text, toggle_value)
            for spec in specs
            for text, toggle_value in spec.candidates()
        ]
        candidates.sort(key=lambda candidate: len(candidate.text), reverse=True)
        self._table: dict[str, TagMatch] = {}
        for candidate in candidates:
            self._table.setdefault(candidate.text, candidate)

    def match(self, token: str) -> TagMatch | None:
        """Return the match for the token, or None if it is not a tag."""
        found = self._table.get(token)
        if found is not None:
            logger.debug("Token '%s' matched spec '%s'.", token, found.spec.id)
        return found

    def is_tag(self, token: str) -> bool:
        """Check whether the token spells any declared tag."""
        return token in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, token: object) -> bool:
        return token in self._table
