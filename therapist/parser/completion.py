# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders fish shell completion scripts from a `Specification`.

Each option variant becomes one `complete` directive carrying its description
and a hint about the value it takes:

- value options: `-r` (a free text value is required)
- value options with choices: `-f -r -a 'a b c'`
- path, file and directory options: `-F -r`

Options inside a command are only offered once that command has been typed;
top level commands and options are only offered before any command:

    complete -e -c pal
    complete -c pal -n "__fish_seen_subcommand_from push" -s f -d 'Force push'
    set -l SUBCOMMAND_LIST auth push
    complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -a "push" -d '...'

Completion triggers themselves (`--fish-completion`, `fish`) are not completed.
"""
from __future__ import annotations

from therapist.parser.argument import Argument
from therapist.parser.argument_action import ArgumentAction
from therapist.parser.parser_types import SHORT_OPTION
from therapist.parser.specification import Specification
from therapist.parser.utils import coerce_dir, coerce_file, coerce_path

PATH_TYPES = (coerce_path, coerce_file, coerce_dir)


def _quote(text: str) -> str:
    first_line = text.strip().splitlines()[0] if text.strip() else ""
    return "'" + first_line.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _completable(arguments: list[Argument]) -> list[Argument]:
    return [
        argument
        for argument in arguments
        if argument.action is not ArgumentAction.COMPLETION
    ]


def _value_hint(argument: Argument) -> str:
    if not argument.takes_value:
        return ""
    if argument.choices:
        choices = " ".join(str(choice) for choice in argument.choices)
        return f" -f -r -a '{choices}'"
    if argument.type in PATH_TYPES:
        return " -F -r"
    return " -r"


def _option_lines(prefix: str, argument: Argument) -> list[str]:
    lines = []
    for token in argument.tokens:
        if SHORT_OPTION.match(token):
            flag = f"-s {token[1:]}"
        else:
            flag = f"-l {token[2:]}"
        lines.append(f"{prefix} {flag} -d {_quote(argument.help)}{_value_hint(argument)}")
    return lines


def _render_scope(
    specification: Specification,
    program: str,
    condition: str,
    lines: list[str],
    top: bool = False,
) -> None:
    commands = _completable(specification.command_list)
    nested = [command for command in commands if command.specification is not None]

    for command in nested:
        seen = f"__fish_seen_subcommand_from {' '.join(command.variants)}"
        child_condition = f"{condition}; and {seen}" if condition else seen
        _render_scope(command.specification, program, child_condition, lines)

    if commands:
        names = " ".join(
            variant for command in commands for variant in command.variants
        )
        if top:
            lines.append(f"set -l SUBCOMMAND_LIST {names}")
            names = "$SUBCOMMAND_LIST"
        not_seen = f"not __fish_seen_subcommand_from {names}"
        condition = f"{condition}; and {not_seen}" if condition else not_seen

    if condition:
        prefix = f'complete -c {program} -n "{condition}"'
    else:
        prefix = f"complete -c {program}"
    for command in commands:
        for variant in command.variants:
            lines.append(f'{prefix} -a "{variant}" -d {_quote(command.help)}')
    for option in _completable(specification.option_list):
        lines.extend(_option_lines(prefix, option))


def render_fish_completion(specification: Specification, program: str) -> str:
    """Render a fish completion script for `program`."""
    lines = [f"complete -e -c {program}"]
    _render_scope(specification, program, "", lines, top=True)
    return "\n".join(lines)
