"""
Therapist CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Iterator, Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from therapist.config import loader
from therapist.console import console, error_console
from therapist.exceptions import SpecificationError
from therapist.parser import (
    Alternatives,
    Argument,
    ArgumentAction,
    Specification,
    count_arg,
    file_arg,
    help_arg,
    message_arg,
    string_arg,
)
from therapist.therapist import parse_or_message, parse_or_quit
from therapist.utils import setup_logging
from therapist.version import __version__

PROLOG = "Parse a command line against an argument specification file."
EPILOG = (
    "Options for the loaded specification go after '--', e.g. "
    "'therapist greeter.yaml -- -t 2 World'."
)


def get_arguments() -> dict[str, Any]:
    return {
        "config": file_arg("<config>", help="YAML or TOML specification file"),
        "tokens": string_arg(
            "<token>", optional=True, multi=True, help="Command line to parse"
        ),
        "command": string_arg(
            "-c, --command", help_var="name", help="Command name shown in help text"
        ),
        "log_mode": string_arg(
            "-l, --log-mode",
            choices=("cli", "json"),
            help="Logging output format",
        ),
        "verbose": count_arg("-v, --verbose", help="Show debug logging"),
        "version": message_arg(
            "--version", f"therapist {__version__}", help="Show the version"
        ),
        "help": help_arg(),
    }


def iter_seen(
    specification: Specification, prefix: str = ""
) -> Iterator[tuple[str, Argument]]:
    """Yield `(path, argument)` for every argument seen, commands included."""
    for name, item in specification.names.items():
        if isinstance(item, Alternatives):
            members = list(item.members.items())
        else:
            members = [(name, item)]
        for member_name, argument in members:
            path = f"{prefix}{member_name}"
            if argument.seen:
                yield path, argument
            if argument.action is ArgumentAction.COMMAND and argument.specification:
                yield from iter_seen(argument.specification, f"{path}.")


def render_table(specification: Specification, title: str) -> Table:
    table = Table(title=title, expand=False, box=box.SIMPLE)
    table.add_column("Name", style="bold cyan")
    table.add_column("Count", justify="right", style="dim")
    table.add_column("Value", overflow="fold")
    for path, argument in iter_seen(specification):
        if argument.takes_value and len(argument.values) > 1:
            value = repr(argument.values)
        elif argument.takes_value or argument.action is ArgumentAction.PROMPT:
            value = repr(argument.value)
        else:
            value = ""
        table.add_row(escape(path), str(argument.count), escape(value))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    arguments = get_arguments()
    parse_or_quit(
        arguments,
        prolog=PROLOG,
        epilog=EPILOG,
        args=sys.argv[1:] if argv is None else list(argv),
        command="therapist",
    )

    setup_logging(
        mode=arguments["log_mode"].value or None,
        console_log_level=(
            logging.DEBUG if arguments["verbose"].seen else logging.WARNING
        ),
    )

    config_path: Path = arguments["config"].value
    try:
        specification = loader(config_path)
    except (ValueError, FileNotFoundError, SpecificationError) as error:
        error_console.print(f"❌ {escape(str(error))}")
        return 1

    command = arguments["command"].value or config_path.stem
    success, message = parse_or_message(
        specification, args=arguments["tokens"].values, command=command
    )
    if message is not None:
        target = console if success else error_console
        target.print(message, markup=False, highlight=False, soft_wrap=True)
        return 0 if success else 1

    console.print(render_table(specification, f"{command}: parsed arguments"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
