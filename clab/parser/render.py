# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering of declared specs and of evaluation results.

Used by the `clab` command line tool and handy when debugging a registry
interactively. Rendering is never performed by the engine itself.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from clab.console import console as default_console
from clab.parser.evaluation import Evaluation
from clab.parser.registry import SpecRegistry


def build_specs_table(registry: SpecRegistry) -> Table:
    """Build a table with one row per declared spec."""
    table = Table(title="Argument specs", header_style="bold", expand=False)
    table.add_column("id", style="bold")
    table.add_column("tags")
    table.add_column("consume", justify="right")
    table.add_column("allowed")
    table.add_column("flags")
    table.add_column("initial")
    for spec in registry:
        tags = "(positional)" if spec.positional else spec.get_tag_text()
        allowed = ", ".join(sorted(spec.allowed_values))
        initial = ", ".join(spec.default_values)
        if spec.default_toggle:
            initial = f"on {initial}".strip()
        table.add_row(
            escape(spec.id),
            escape(tags),
            "*" if spec.positional and spec.multiple else str(spec.consumed_args),
            escape(allowed),
            spec.get_flags_text(),
            escape(initial),
        )
    return table


def build_evaluation_table(registry: SpecRegistry, evaluation: Evaluation) -> Table:
    """Build a table with the state and values of every declared spec."""
    title = "Evaluation"
    if evaluation.aborted():
        title = f"Evaluation (aborted by '{evaluation.aborted_id()}')"
    table = Table(
        title=escape(title),
        header_style="bold",
        expand=False,
        min_width=len(title) + 4,
    )
    table.add_column("id", style="bold")
    table.add_column("state")
    table.add_column("values")
    for spec in registry:
        state = evaluation.state(spec.id)
        table.add_row(
            escape(spec.id),
            "[green]true[/]" if state else "[dim]false[/]",
            escape(" ".join(evaluation.list(spec.id))),
        )
    return table


def render_specs(registry: SpecRegistry, console: Console | None = None) -> None:
    """Print the spec table."""
    (console or default_console).print(build_specs_table(registry))


def render_evaluation(
    registry: SpecRegistry, evaluation: Evaluation, console: Console | None = None
) -> None:
    """Print the evaluation table."""
    (console or default_console).print(build_evaluation_table(registry, evaluation))
