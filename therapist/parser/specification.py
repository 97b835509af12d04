# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds and holds `Specification`, the validated and indexed form of a set of
`Argument` descriptors.

`build_specification` takes an ordered mapping (or sequence of pairs) of names to
`Argument` or `Alternatives` objects and:

- classifies each descriptor as positional, option or command from its first
  variant (`-` → option, `<` → positional, anything else → command),
- checks every variant against the forms allowed for that kind and action,
- maps every surface token (including the "down" tokens of paired counters) to
  its descriptor, rejecting duplicates,
- derives the placeholder shown after value options (`--times=<times>`),
- buckets descriptors into help groups.

All problems are reported as `SpecificationError` before any input is parsed.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from therapist.exceptions import SpecificationError
from therapist.logger import logger
from therapist.parser.argument import Alternatives, Argument
from therapist.parser.argument_action import ArgumentAction
from therapist.parser.parser_types import (
    COMMAND,
    LONG_OPTION,
    NEGATABLE_OPTION,
    PAIRED_LONG_OPTION,
    PAIRED_SHORT_OPTION,
    POSITIONAL,
    SHORT_OPTION,
    ArgumentKind,
)

DEFAULT_GROUPS = {
    ArgumentKind.COMMAND: "Commands",
    ArgumentKind.POSITIONAL: "Arguments",
    ArgumentKind.OPTION: "Options",
}

ALLOWED_KINDS = {
    ArgumentAction.VALUE: (ArgumentKind.OPTION, ArgumentKind.POSITIONAL),
    ArgumentAction.COUNT: (ArgumentKind.OPTION,),
    ArgumentAction.PROMPT: (ArgumentKind.OPTION,),
    ArgumentAction.COMMAND: (ArgumentKind.COMMAND,),
    ArgumentAction.HELP: (ArgumentKind.OPTION, ArgumentKind.COMMAND),
    ArgumentAction.MESSAGE: (ArgumentKind.OPTION, ArgumentKind.COMMAND),
    ArgumentAction.COMPLETION: (ArgumentKind.OPTION, ArgumentKind.COMMAND),
}


@dataclass
class Specification:
    """
    The indexed, validated form of a set of arguments.

    Attributes:
        prolog (str): Text shown before the generated help.
        epilog (str): Text shown after the generated help.
        options (dict[str, Argument]): Every option and command token.
        arguments (dict[str, Argument]): Every positional variant.
        alternatives (dict[str, Alternatives]): Tokens belonging to alternatives.
        option_list (list[Argument]): Options in declaration order.
        argument_list (list[Argument]): Positionals in consumption order.
        command_list (list[Argument]): Commands in declaration order.
        groups (dict[str, list[Argument]]): Help sections in first-seen order.
        names (dict[str, Argument | Alternatives]): Declared names.
    """

    prolog: str = ""
    epilog: str = ""
    options: dict[str, Argument] = field(default_factory=dict)
    arguments: dict[str, Argument] = field(default_factory=dict)
    alternatives: dict[str, Alternatives] = field(default_factory=dict)
    option_list: list[Argument] = field(default_factory=list)
    argument_list: list[Argument] = field(default_factory=list)
    command_list: list[Argument] = field(default_factory=list)
    groups: dict[str, list[Argument]] = field(
        default_factory=lambda: {group: [] for group in DEFAULT_GROUPS.values()}
    )
    names: dict[str, Argument | Alternatives] = field(default_factory=dict, repr=False)

    def __getitem__(self, name: str) -> Argument | Alternatives:
        return self.names[name]

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def copy(self) -> Specification:
        """
        Return an independent deep copy, nested command specifications included.

        Parse the copy to keep the descriptors of this specification untouched.
        """
        return deepcopy(self)


def build_specification(
    arguments: Mapping[str, Argument | Alternatives]
    | Iterable[tuple[str, Argument | Alternatives]],
    prolog: str = "",
    epilog: str = "",
) -> Specification:
    """
    Validate `arguments` and index them into a `Specification`.

    Args:
        arguments: Ordered names → `Argument` or `Alternatives`.
        prolog: Text shown before the generated help.
        epilog: Text shown after the generated help.

    Raises:
        SpecificationError: If any descriptor is malformed or any token collides.
    """
    specification = Specification(prolog=prolog, epilog=epilog)
    items = arguments.items() if isinstance(arguments, Mapping) else arguments
    for name, item in items:
        if name in specification.names:
            raise SpecificationError(f"Name '{name}' defined twice")
        if isinstance(item, Alternatives):
            _add_alternatives(specification, name, item)
        elif isinstance(item, Argument):
            _add_argument(specification, name, item)
        else:
            raise SpecificationError(
                f"'{name}' must be an Argument or Alternatives, "
                f"got {type(item).__name__}"
            )
        specification.names[name] = item
    logger.debug(
        "Built specification: %d options, %d positionals, %d commands",
        len(specification.option_list),
        len(specification.argument_list),
        len(specification.command_list),
    )
    return specification


def _classify(name: str, argument: Argument) -> ArgumentKind:
    first = argument.variants[0]
    if first.startswith("-"):
        kind = ArgumentKind.OPTION
    elif first.startswith("<"):
        if argument.action is ArgumentAction.COMMAND:
            raise SpecificationError(
                f"Commands must be declared as bare words, not {first}: {name}"
            )
        kind = ArgumentKind.POSITIONAL
    else:
        kind = ArgumentKind.COMMAND

    if kind not in ALLOWED_KINDS[argument.action]:
        if argument.action is ArgumentAction.COMMAND:
            raise SpecificationError(f"Commands must be declared as bare words: {name}")
        if argument.action in (ArgumentAction.COUNT, ArgumentAction.PROMPT):
            raise SpecificationError(
                f"{name} must be declared as an option, -o or --option"
            )
        raise SpecificationError(
            "Arguments must be declared as <argument>, options as -o or --option: "
            f"{name}"
        )
    return kind


def _register(specification: Specification, token: str, argument: Argument) -> None:
    if token in specification.options:
        raise SpecificationError(f"Option {token} defined twice")
    specification.options[token] = argument


def _option_tokens(
    argument: Argument,
) -> tuple[list[str], list[str], list[str]]:
    """Split option variants into up tokens, down tokens and name fragments."""
    up: list[str] = []
    down: list[str] = []
    fragments: list[str] = []
    counting = argument.action is ArgumentAction.COUNT
    for variant in argument.variants:
        match = SHORT_OPTION.match(variant) or LONG_OPTION.match(variant)
        if match:
            up.append(variant)
            fragments.append(match.group(1))
            continue

        negatable = NEGATABLE_OPTION.match(variant)
        if negatable:
            prefix, word = negatable.groups()
            up_token, down_token = f"--{word}", f"--{prefix}{word}"
        elif PAIRED_SHORT_OPTION.match(variant) or PAIRED_LONG_OPTION.match(variant):
            up_token, down_token = variant.split("/")
        else:
            raise SpecificationError(
                f"Option {variant} must be in the form -o or --option"
            )
        if not counting:
            raise SpecificationError(
                f"Option {variant} uses a paired form, which only counting options accept"
            )
        up.append(up_token)
        down.append(down_token)
    return up, down, fragments


def _help_var(argument: Argument, fragments: list[str]) -> str:
    if argument.help_var:
        if argument.help_var.startswith("<"):
            return argument.help_var
        return f"<{argument.help_var}>"
    if argument.choices:
        return f"<{argument.render_choices()}>"
    if fragments:
        return f"<{max(fragments, key=len)}>"
    return ""


def _add_argument(specification: Specification, name: str, argument: Argument) -> None:
    kind = _classify(name, argument)
    argument.kind = kind

    if kind is ArgumentKind.OPTION:
        up, down, fragments = _option_tokens(argument)
        for token in (*up, *down):
            _register(specification, token, argument)
        argument.tokens = (*up, *down)
        argument.down_variants = frozenset(down)
        argument.help_var = _help_var(argument, fragments)
        specification.option_list.append(argument)
    elif kind is ArgumentKind.POSITIONAL:
        for variant in argument.variants:
            if not POSITIONAL.match(variant):
                raise SpecificationError(
                    f"Argument {variant} must be in the form <argument>"
                )
            if variant in specification.arguments:
                raise SpecificationError(f"Argument {variant} defined twice")
            specification.arguments[variant] = argument
        argument.tokens = tuple(argument.variants)
        specification.argument_list.append(argument)
    else:
        if (
            argument.action is ArgumentAction.COMMAND
            and argument.specification is None
        ):
            raise SpecificationError(f"Command {name} has no specification")
        for variant in argument.variants:
            if not COMMAND.match(variant):
                raise SpecificationError(f"Command {variant} must be a single word")
            _register(specification, variant, argument)
        argument.tokens = tuple(argument.variants)
        specification.command_list.append(argument)

    group = argument.group or DEFAULT_GROUPS[kind]
    specification.groups.setdefault(group, []).append(argument)


def _add_alternatives(
    specification: Specification, name: str, alternatives: Alternatives
) -> None:
    if len(alternatives.members) < 2:
        raise SpecificationError(f"Alternatives {name} must have at least two members")
    alternatives.name = name
    for member_name, member in alternatives.members.items():
        if not isinstance(member, Argument):
            raise SpecificationError(
                f"All members of alternatives {name} must be Arguments: {member_name}"
            )
        if member.action not in (ArgumentAction.VALUE, ArgumentAction.COUNT):
            raise SpecificationError(
                f"Alternatives {name} may only contain value or count options: "
                f"{member_name}"
            )
        _add_argument(specification, member_name, member)
        if member.kind is not ArgumentKind.OPTION:
            raise SpecificationError(
                f"Alternatives {name} may only contain options: {member_name}"
            )
        for token in member.tokens:
            specification.alternatives[token] = alternatives
