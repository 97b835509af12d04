# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry points for parsing a command line with therapist.

All of them take the same inputs: the arguments (a mapping of names to
`Argument`/`Alternatives`, or a built `Specification`), an optional prolog and
epilog for the help text, the tokens to parse and the command name shown in help.

- `parse`: Parse in place. Raises `ParseError` or `MessageError`.
- `parse_copy`: Parse an independent copy; returns a `ParseResult`.
- `parse_or_message`: Parse in place; returns `(success, message)`.
- `parse_or_quit`: Parse in place; print any message and exit (status 0 for
  help or version, 1 for parse errors).

`args` may be a list of tokens or a single shell-like string, which is split
honouring quotes. When omitted, `sys.argv[1:]` is used; when `command` is omitted
the name the program was invoked as is used.

Example:
    spec = {
        "name": string_arg("<name>", help="Person to greet"),
        "version": message_arg("--version", "0.1.0", help="Prints version"),
        "help": help_arg(),
    }
    parse_or_quit(spec, prolog="Greeter", args="World", command="hello")
    spec["name"].value  # 'World'
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, Mapping, NamedTuple, Sequence

from therapist.console import console, error_console
from therapist.exceptions import MessageError, ParseError
from therapist.logger import logger
from therapist.parser.argument import Alternatives, Argument
from therapist.parser.command_argument_parser import CommandArgumentParser
from therapist.parser.specification import Specification, build_specification
from therapist.utils import get_program_invocation, split_args

Arguments = (
    Specification
    | Mapping[str, Argument | Alternatives]
    | Iterable[tuple[str, Argument | Alternatives]]
)


class ParseResult(NamedTuple):
    """
    Outcome of `parse_copy`.

    Attributes:
        success (bool): False only for parse errors.
        message (str | None): Help, message or error text, if any.
        specification (Specification | None): The parsed copy, when parsing
            completed without a message.
    """

    success: bool
    message: str | None
    specification: Specification | None


def _build(arguments: Arguments, prolog: str, epilog: str) -> Specification:
    if isinstance(arguments, Specification):
        if prolog:
            arguments.prolog = prolog
        if epilog:
            arguments.epilog = epilog
        return arguments
    return build_specification(arguments, prolog=prolog, epilog=epilog)


def _tokens(args: Sequence[str] | str | None) -> list[str]:
    if args is None:
        return sys.argv[1:]
    if isinstance(args, str):
        return split_args(args)
    return list(args)


def _run(
    specification: Specification,
    args: Sequence[str] | str | None,
    command: str | None,
) -> Specification:
    tokens = _tokens(args)
    command = command or get_program_invocation()
    return CommandArgumentParser(specification, command).parse_args(tokens)


def parse(
    arguments: Arguments,
    prolog: str = "",
    epilog: str = "",
    args: Sequence[str] | str | None = None,
    command: str | None = None,
) -> Specification:
    """
    Parse `args` against `arguments`, mutating the descriptors in place.

    Returns:
        Specification: The built (and now parsed) specification.

    Raises:
        SpecificationError: If the arguments are malformed.
        ParseError: If the input does not match.
        MessageError: If help, a message or a completion script was requested.
    """
    return _run(_build(arguments, prolog, epilog), args, command)


def parse_copy(
    arguments: Arguments,
    prolog: str = "",
    epilog: str = "",
    args: Sequence[str] | str | None = None,
    command: str | None = None,
) -> ParseResult:
    """
    Parse an independent copy of `arguments`, leaving the originals untouched.

    Useful when the same arguments are parsed more than once, e.g. in tests.
    """
    specification = _build(arguments, prolog, epilog).copy()
    try:
        _run(specification, args, command)
    except MessageError as error:
        return ParseResult(True, error.message, None)
    except ParseError as error:
        return ParseResult(False, error.message, None)
    return ParseResult(True, None, specification)


def parse_or_message(
    arguments: Arguments,
    prolog: str = "",
    epilog: str = "",
    args: Sequence[str] | str | None = None,
    command: str | None = None,
) -> tuple[bool, str | None]:
    """
    Parse in place and report the outcome instead of raising.

    Returns:
        tuple[bool, str | None]: `(True, None)` on success, `(True, message)`
        when help or a message was requested and `(False, error)` on failure.
    """
    try:
        parse(arguments, prolog, epilog, args, command)
    except MessageError as error:
        return True, error.message
    except ParseError as error:
        return False, error.message
    return True, None


def parse_or_quit(
    arguments: Arguments,
    prolog: str = "",
    epilog: str = "",
    args: Sequence[str] | str | None = None,
    command: str | None = None,
) -> Specification:
    """
    Parse in place; on a message or error print it and exit.

    Help and messages go to stdout with exit status 0, parse errors go to stderr
    with exit status 1.
    """
    try:
        return parse(arguments, prolog, epilog, args, command)
    except MessageError as error:
        _print(console, error.message)
        sys.exit(0)
    except ParseError as error:
        logger.debug("Parse failed: %s", error.message)
        _print(error_console, error.message)
        sys.exit(1)


def _print(target: Any, message: str) -> None:
    target.print(message, markup=False, highlight=False, soft_wrap=True)
