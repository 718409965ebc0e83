"""
CLAB Command Line Arguments Builder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from clab.config import loader
from clab.console import console
from clab.exceptions import ClabError
from clab.parser.render import render_evaluation, render_specs
from clab.parsers import get_root_parser, split_tokens
from clab.utils import setup_logging


def find_clab_config() -> Path | None:
    candidates = [
        Path.cwd() / "clab.yaml",
        Path.cwd() / "clab.toml",
        Path.cwd() / ".clab.yaml",
        Path.cwd() / ".clab.toml",
        Path(os.environ.get("CLAB_CONFIG", "clab.yaml")),
        Path.home() / ".config" / "clab" / "clab.yaml",
        Path.home() / ".config" / "clab" / "clab.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap(config: str | None) -> Path | None:
    """Resolve the spec file and make its directory importable for actions."""
    config_path = Path(config) if config else find_clab_config()
    if config_path and str(config_path.parent.resolve()) not in sys.path:
        sys.path.insert(0, str(config_path.parent.resolve()))
    return config_path


def main(argv: list[str] | None = None) -> Any:
    options, tokens = split_tokens(list(sys.argv[1:] if argv is None else argv))
    args = get_root_parser().parse_args(options)

    setup_logging(
        mode=args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    config_path = bootstrap(args.config)
    if config_path is None:
        console.print("[bold red]No spec file found.[/] Pass one or create clab.yaml.")
        return 2

    try:
        registry = loader(config_path)
    except (ClabError, FileNotFoundError, ValueError) as error:
        console.print(f"[bold red]Could not load '{config_path}':[/] {escape(str(error))}")
        return 2

    if args.specs:
        render_specs(registry)
        return 0

    try:
        evaluation = registry.evaluate(tokens)
    except ClabError as error:
        if args.json:
            print(
                json.dumps(
                    {
                        "error": str(error.kind),
                        "id": error.arg_id,
                        "value": error.value,
                        "message": error.message,
                    }
                )
            )
        else:
            console.print(f"[bold red]{error.kind}[/]: {escape(error.message)}")
        return 1

    if args.json:
        print(json.dumps(evaluation.to_dict()))
    else:
        render_evaluation(registry, evaluation)
    return 0


def entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entry()
