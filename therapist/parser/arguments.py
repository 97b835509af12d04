# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Factories for building `Argument` descriptors.

Value arguments are produced by `define_arg`, which turns a parse function and a
default into a constructor. The built-in constructors (`string_arg`, `int_arg`,
`float_arg`, `bool_arg`, `path_arg`, `file_arg`, `dir_arg`, `date_arg`) are all made
that way, and user code can do the same for its own types:

    ip_arg = define_arg("IP address", ipaddress.ip_address)
    spec = {"host": ip_arg("<host>", help="Host to ping")}

Zero-token constructors cover counted flags, help, messages, prompts, fish
completion and subcommands.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

from therapist.parser.argument import Alternatives, Argument
from therapist.parser.argument_action import ArgumentAction
from therapist.parser.parser_types import HelpStyle
from therapist.parser.specification import Specification, build_specification
from therapist.parser.utils import (
    coerce_bool,
    coerce_date,
    coerce_dir,
    coerce_file,
    coerce_path,
)

Variants = Sequence[str] | str
ArgumentFactory = Callable[..., Argument]


def define_arg(
    type_name: str, parse: Callable[[str], Any], default: Any = None
) -> ArgumentFactory:
    """
    Create a constructor for value arguments of a custom type.

    Args:
        type_name: Name used in error messages ("Expected a <type_name> for ...").
        parse: Converts raw text to the typed value. Raise `ValueError` for bad
            input, or `ParseError` to control the message shown to the user.
        default: Default value used when the constructor is not given one.

    Returns:
        Callable: A constructor accepting `(variants, help="", default=..., ...)`.
    """

    def factory(
        variants: Variants,
        help: str = "",
        default: Any = default,
        choices: Iterable[Any] = (),
        help_var: str = "",
        group: str = "",
        help_level: int = 0,
        long_help: str = "",
        required: bool = False,
        optional: bool = False,
        multi: bool = False,
        env: str = "",
    ) -> Argument:
        return Argument(
            variants=variants,
            action=ArgumentAction.VALUE,
            help=help,
            long_help=long_help,
            help_var=help_var,
            group=group,
            help_level=help_level,
            required=required,
            optional=optional,
            multi=multi,
            env=env,
            type=parse,
            type_name=type_name,
            default=default,
            choices=tuple(choices),
        )

    factory.__name__ = f"{type_name.replace(' ', '_')}_arg"
    factory.__doc__ = f"Create an argument whose value is a {type_name}."
    return factory


string_arg = define_arg("string", str, "")
int_arg = define_arg("integer", int, 0)
float_arg = define_arg("float", float, 0.0)
bool_arg = define_arg("boolean", coerce_bool, False)
path_arg = define_arg("path", coerce_path)
file_arg = define_arg("file", coerce_file)
dir_arg = define_arg("directory", coerce_dir)
date_arg = define_arg("date", coerce_date)


def count_arg(
    variants: Variants,
    help: str = "",
    group: str = "",
    help_level: int = 0,
    long_help: str = "",
    required: bool = False,
    multi: bool = True,
) -> Argument:
    """
    Create an option that counts how many times it is seen.

    Paired variants count down: `--[no]x`, `--[no-]x`, `-y/-n` and `--yes/--no`.
    """
    return Argument(
        variants=variants,
        action=ArgumentAction.COUNT,
        help=help,
        long_help=long_help,
        group=group,
        help_level=help_level,
        required=required,
        multi=multi,
    )


def flag_arg(
    variants: Variants,
    help: str = "",
    group: str = "",
    help_level: int = 0,
    long_help: str = "",
    required: bool = False,
) -> Argument:
    """Create a counted option that may appear at most once."""
    return count_arg(
        variants,
        help=help,
        group=group,
        help_level=help_level,
        long_help=long_help,
        required=required,
        multi=False,
    )


def help_arg(
    variants: Variants = "-h, --help",
    help: str = "Show help message",
    group: str = "",
    help_level: int = 0,
    show_level: int = 0,
    help_style: HelpStyle | str = HelpStyle.COLUMNS,
    long_help: str = "",
) -> Argument:
    """
    Create an argument that stops parsing and shows help.

    The help shown is that of the specification in which the argument was seen,
    so `tool sub --help` describes `sub`. `show_level` selects which arguments
    are listed and `help_style` chooses column or paragraph layout.
    """
    return Argument(
        variants=variants,
        action=ArgumentAction.HELP,
        help=help,
        long_help=long_help,
        group=group,
        help_level=help_level,
        show_level=show_level,
        help_style=HelpStyle(help_style),
    )


def help_command_arg(
    variants: Variants = "help",
    help: str = "Show help message",
    group: str = "",
    help_level: int = 0,
    show_level: int = 0,
    help_style: HelpStyle | str = HelpStyle.COLUMNS,
) -> Argument:
    """Create a `help` command; `help <command>` shows that command's help."""
    return help_arg(
        variants,
        help=help,
        group=group,
        help_level=help_level,
        show_level=show_level,
        help_style=help_style,
    )


def message_arg(
    variants: Variants,
    message: str,
    help: str = "",
    group: str = "",
    help_level: int = 0,
) -> Argument:
    """Create an argument that stops parsing and shows `message` (e.g. a version)."""
    return Argument(
        variants=variants,
        action=ArgumentAction.MESSAGE,
        message=message,
        help=help,
        group=group,
        help_level=help_level,
    )


def message_command_arg(
    variants: Variants,
    message: str,
    help: str = "",
    group: str = "",
    help_level: int = 0,
) -> Argument:
    return message_arg(
        variants, message, help=help, group=group, help_level=help_level
    )


def prompt_arg(
    variants: Variants,
    help: str = "",
    prompt: str = "",
    secret: bool = False,
    type: Callable[[str], Any] = str,
    type_name: str = "string",
    default: Any = "",
    choices: Iterable[Any] = (),
    group: str = "",
    help_level: int = 0,
    required: bool = False,
    reader: Callable[..., str] | None = None,
) -> Argument:
    """
    Create an option whose value is read interactively when the option is seen.

    Input is read with prompt_toolkit; `secret=True` hides what is typed. The text
    is parsed and checked against `choices` like any other value.
    """
    return Argument(
        variants=variants,
        action=ArgumentAction.PROMPT,
        help=help,
        prompt=prompt,
        secret=secret,
        type=type,
        type_name=type_name,
        default=default,
        choices=tuple(choices),
        group=group,
        help_level=help_level,
        required=required,
        reader=reader,
    )


def completion_arg(
    variants: Variants = "--fish-completion",
    help: str = "Show a fish completion script",
    group: str = "",
    help_level: int = 0,
) -> Argument:
    """Create an argument that stops parsing and shows a fish completion script."""
    return Argument(
        variants=variants,
        action=ArgumentAction.COMPLETION,
        help=help,
        group=group,
        help_level=help_level,
    )


def completion_command_arg(
    variants: Variants = "fish",
    help: str = "Show a fish completion script",
    group: str = "",
    help_level: int = 0,
) -> Argument:
    return completion_arg(variants, help=help, group=group, help_level=help_level)


def command_arg(
    variants: Variants,
    specification: Any,
    help: str = "",
    prolog: str = "",
    epilog: str = "",
    handler: Callable[..., Any] | None = None,
    group: str = "",
    help_level: int = 0,
    long_help: str = "",
) -> Argument:
    """
    Create a subcommand.

    `specification` is a mapping of names to arguments (or an already built
    `Specification`). Once the command is seen, every remaining token is parsed
    against it. `handler`, if given, is called with the nested specification after
    a successful parse.
    """
    if isinstance(specification, Specification):
        if prolog:
            specification.prolog = prolog
        if epilog:
            specification.epilog = epilog
    else:
        specification = build_specification(specification, prolog=prolog, epilog=epilog)
    return Argument(
        variants=variants,
        action=ArgumentAction.COMMAND,
        specification=specification,
        handler=handler,
        help=help,
        long_help=long_help,
        group=group,
        help_level=help_level,
    )


def alternatives(
    members: Mapping[str, Argument] | None = None, **named: Argument
) -> Alternatives:
    """Group options so that at most one of them may be used per parse."""
    combined = dict(members or {})
    combined.update(named)
    return Alternatives(members=combined)
