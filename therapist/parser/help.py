# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and help text for a `Specification`.

The text is plain (no markup) so it can be compared in tests, written to a pager
or printed through rich with markup disabled.

Layout:

    <prolog>

    Usage:
      tool cmd <arg>
      tool -h|--help

    Commands:
      cmd                 Help text

    Arguments:
      <arg>               Help text

    Options:
      -h, --help          Show help message
          --pager=<TYPE>  When to paginate [default: auto]

    <epilog>

Usage lines recurse into command specifications. Help sections follow the order
in which groups were first seen; empty sections are left out. Arguments whose
`help_level` exceeds the requested `show_level` are hidden.
"""
from __future__ import annotations

import textwrap

from therapist.parser.argument import Argument
from therapist.parser.argument_action import ArgumentAction
from therapist.parser.parser_types import ArgumentKind, HelpStyle
from therapist.parser.specification import Specification
from therapist.parser.utils import render_value

INDENT_WIDTH = 2
INDENT = " " * INDENT_WIDTH
LONG_OPTION_INDENT = " " * 4
PARAGRAPH_INDENT = " " * 8
MAX_WIDTH = 80

USAGE_OPTION_ACTIONS = (
    ArgumentAction.HELP,
    ArgumentAction.MESSAGE,
    ArgumentAction.COMPLETION,
)


def _visible(arguments: list[Argument], show_level: int) -> list[Argument]:
    return [argument for argument in arguments if argument.help_level <= show_level]


def _wrap(text: str, width: int) -> list[str]:
    return textwrap.wrap(
        text, width=max(width, 1), break_long_words=False, break_on_hyphens=False
    )


def _wrap_block(text: str, width: int = MAX_WIDTH) -> str:
    """Wrap free text line by line, keeping blank lines and indented lines."""
    lines: list[str] = []
    for line in text.splitlines():
        if not line.strip() or line[:1].isspace():
            lines.append(line.rstrip())
        else:
            lines.extend(_wrap(line, width))
    return "\n".join(lines)


def render_usage(
    specification: Specification,
    command: str,
    show_level: int = 0,
    lines: list[str] | None = None,
) -> list[str]:
    """Collect one usage line per reachable command path."""
    if lines is None:
        lines = []
    commands = _visible(specification.command_list, show_level)
    for subcommand in commands:
        example = f"{command} {'|'.join(subcommand.variants)}"
        if subcommand.specification is not None:
            render_usage(subcommand.specification, example, show_level, lines)
        else:
            lines.append(f"{INDENT}{example}")

    positionals = _visible(specification.argument_list, show_level)
    if not commands or positionals:
        example = f"{INDENT}{command}"
        for argument in positionals:
            choices = argument.render_choices()
            if choices:
                part = f"[{choices}]" if argument.optional else f"({choices})"
            else:
                variants = "|".join(argument.variants)
                if argument.optional:
                    part = f"[{variants}]"
                elif len(argument.variants) > 1:
                    part = f"({variants})"
                else:
                    part = variants
            if argument.multi:
                part += "..."
            example += f" {part}"
        lines.append(example)
    return lines


def _label(argument: Argument) -> str:
    if argument.kind is ArgumentKind.POSITIONAL and argument.choices:
        return argument.render_choices()
    label = ", ".join(argument.variants)
    if argument.kind is ArgumentKind.OPTION:
        if argument.takes_value and argument.help_var:
            label += f"={argument.help_var}"
        if argument.multi:
            label += "..."
    return label


def _annotation(argument: Argument) -> str:
    if not argument.takes_value or not argument.default:
        return ""
    if argument.kind is ArgumentKind.POSITIONAL:
        required = not argument.optional
    else:
        required = argument.required
    return "" if required else f"[default: {render_value(argument.default)}]"


def _describe(argument: Argument, long: bool = False) -> str:
    text = (argument.long_help or argument.help) if long else argument.help
    annotation = _annotation(argument)
    if long:
        return f"{text}\n\n{annotation}".strip() if annotation else text
    return " ".join(part for part in (text, annotation) if part)


def _entry_columns(label: str, text: str, width: int) -> list[str]:
    help_indent = INDENT_WIDTH + width + INDENT_WIDTH
    wrapped = _wrap(text, MAX_WIDTH - help_indent) or [""]
    lines = [f"{INDENT}{label.ljust(width)}{INDENT}{wrapped[0]}".rstrip()]
    lines.extend(" " * help_indent + line for line in wrapped[1:])
    return lines


def _entry_paragraphs(label: str, text: str) -> list[str]:
    lines = [f"{INDENT}{label}".rstrip()]
    body = _wrap_block(text, MAX_WIDTH - len(PARAGRAPH_INDENT))
    for line in body.splitlines():
        lines.append(f"{PARAGRAPH_INDENT}{line}".rstrip())
    return lines


def render_help(
    specification: Specification,
    command: str,
    show_level: int = 0,
    style: HelpStyle | str | None = None,
) -> str:
    """
    Render the full help text for `specification`.

    Args:
        specification (Specification): Scope to describe.
        command (str): Command path shown in usage lines.
        show_level (int): Hide arguments whose `help_level` is above this.
        style (HelpStyle | str | None): Column (default) or paragraph layout.

    Returns:
        str: The help text, without trailing whitespace.
    """
    style = HelpStyle(style) if style else HelpStyle.COLUMNS

    usage = ["Usage:"]
    render_usage(specification, command, show_level, usage)
    for option in _visible(specification.option_list, show_level):
        if option.action in USAGE_OPTION_ACTIONS:
            usage.append(f"{INDENT}{command} {'|'.join(option.variants)}")

    visible_options = _visible(specification.option_list, show_level)
    indent_long = any(
        not option.variants[0].startswith("--") for option in visible_options
    )

    def display(argument: Argument) -> str:
        label = _label(argument)
        if (
            indent_long
            and argument.kind is ArgumentKind.OPTION
            and argument.variants[0].startswith("--")
        ):
            label = LONG_OPTION_INDENT + label
        return label

    visible = [
        argument
        for argument in (
            *specification.command_list,
            *specification.argument_list,
            *specification.option_list,
        )
        if argument.help_level <= show_level
    ]
    width = max((len(display(argument)) for argument in visible), default=0)

    sections = []
    if specification.prolog:
        sections.append(_wrap_block(specification.prolog))
    sections.append("\n".join(usage))
    for group, members in specification.groups.items():
        members = _visible(members, show_level)
        if not members:
            continue
        lines = [f"{group}:"]
        for index, argument in enumerate(members):
            if style is HelpStyle.PARAGRAPHS:
                if index:
                    lines.append("")
                lines.extend(
                    _entry_paragraphs(display(argument), _describe(argument, long=True))
                )
            else:
                lines.extend(
                    _entry_columns(display(argument), _describe(argument), width)
                )
        sections.append("\n".join(lines))
    if specification.epilog:
        sections.append(_wrap_block(specification.epilog))
    return "\n\n".join(sections).strip()
