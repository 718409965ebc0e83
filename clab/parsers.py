# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse root parser for the `clab` command line tool.

The tool itself only needs a handful of options; the tokens to evaluate are
everything after a literal `--` and never reach argparse.
"""
from __future__ import annotations

from argparse import ArgumentParser


def get_root_parser(
    prog: str | None = "clab",
    description: str | None = "CLAB - Evaluate tokens against declarative argument specs.",
    epilog: str | None = "Tip: Use 'clab spec.yaml -- -i in.txt' to evaluate tokens.",
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the clab tool.

    Notes:
        ```
        Includes the following arguments:
            config               : Spec file (YAML or TOML), optional.
            --specs              : Print the declared specs instead of evaluating.
            --json               : Print the evaluation as JSON.
            --log-mode           : Console log format ("cli" or "json").
            -v / --verbose       : Enable debug logging.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog,
        exit_on_error=exit_on_error,
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Spec file to load (YAML or TOML). Searched for when omitted.",
    )
    parser.add_argument(
        "--specs", action="store_true", help="Print the declared specs and exit."
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the evaluation as JSON."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    return parser


def split_tokens(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first `--` into tool options and evaluated tokens."""
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []
