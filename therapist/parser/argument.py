# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass, the descriptor for one logical command-line
argument, and `Alternatives`, a named set of mutually exclusive descriptors.

Every positional argument, option, counted flag, subcommand, help trigger and
message trigger is an `Argument`. Its `action` decides what happens when the parser
recognises it; its first variant decides whether it is a positional, an option or
a command once a `Specification` is built from it.

Arguments are usually created through the factories in `therapist.parser.arguments`
(`string_arg`, `count_arg`, `command_arg`, ...) or loaded from YAML/TOML with
`therapist.config.loader`.

Key Attributes:
- `variants`: Surface forms (e.g. `-v`, `--verbose`, `<name>`, `push`, `--[no]x`)
- `action`: `ArgumentAction` describing behaviour (value, count, command, ...)
- `type`: Callable converting raw text into a typed value
- `default`: Initial value, optionally seeded from an environment variable
- `choices`: Closed set of allowed values
- `required` / `optional` / `multi`: Cardinality and requiredness
- `help`, `long_help`, `help_var`, `group`, `help_level`: Presentation metadata

Parse state:
- `count`: Signed occurrence counter (down variants of paired flags decrement it)
- `value` / `values`: Last parsed value and every parsed value in order

Parsing mutates descriptors in place. Re-parsing the same descriptors accumulates
state; use `Specification.copy()` (or `parse_copy`) to parse repeatedly.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Sequence

from prompt_toolkit import prompt as toolkit_prompt

from therapist.exceptions import ParseError, SpecificationError
from therapist.logger import logger
from therapist.parser.argument_action import ArgumentAction
from therapist.parser.parser_types import ArgumentKind, HelpStyle
from therapist.parser.utils import split_variants

if TYPE_CHECKING:
    from therapist.parser.specification import Specification


def _with_article(noun: str) -> str:
    article = "an" if noun[:1].lower() in ("a", "e", "i", "o", "u") else "a"
    return f"{article} {noun}"


@dataclass
class Argument:
    """
    Represents a command-line argument.

    Attributes:
        variants (tuple[str, ...]): Surface forms; a comma separated string is split.
        action (ArgumentAction): What to do when the argument is recognised.
        help (str): Short help text.
        long_help (str): Help text used by paragraph style help.
        help_var (str): Placeholder shown after value options (e.g. `<file>`).
        group (str): Help section; defaults to Commands, Arguments or Options.
        help_level (int): Hidden from help rendered below this level.
        required (bool): An option that must be supplied.
        optional (bool): A positional that may be left out.
        multi (bool): May repeat (options) or consume several tokens (positionals).
        env (str): Environment variable seeding the initial value.
        type (Callable[[str], Any]): Converts raw text into a typed value.
        type_name (str): Name of the type used in error messages.
        default (Any): Initial value.
        choices (Sequence[Any]): Allowed values, if restricted.
        message (str): Text shown by message arguments.
        help_style (HelpStyle): Layout used by help arguments.
        show_level (int): Highest help level rendered by help arguments.
        specification (Specification | None): Nested specification of a command.
        handler (Callable | None): Called with the nested specification after a
            command has been parsed.
        prompt (str): Prompt text for interactive arguments.
        secret (bool): Hide typed input for interactive arguments.
        reader (Callable | None): Reads interactive input; prompt_toolkit by default.
    """

    variants: Sequence[str] | str
    action: ArgumentAction | str = ArgumentAction.VALUE
    help: str = ""
    long_help: str = ""
    help_var: str = ""
    group: str = ""
    help_level: int = 0
    required: bool = False
    optional: bool = False
    multi: bool = False
    env: str = ""
    type: Callable[[str], Any] = str
    type_name: str = "string"
    default: Any = None
    choices: Sequence[Any] = ()
    message: str = ""
    help_style: HelpStyle = HelpStyle.COLUMNS
    show_level: int = 0
    specification: Specification | None = field(default=None, repr=False)
    handler: Callable[[Specification], Any] | None = field(default=None, repr=False)
    prompt: str = ""
    secret: bool = False
    reader: Callable[..., str] | None = field(default=None, repr=False)

    count: int = field(default=0, init=False)
    value: Any = field(default=None, init=False)
    values: list[Any] = field(default_factory=list, init=False)

    kind: ArgumentKind | None = field(default=None, init=False)
    tokens: tuple[str, ...] = field(default=(), init=False, repr=False)
    down_variants: frozenset[str] = field(default=frozenset(), init=False, repr=False)

    def __post_init__(self) -> None:
        self.variants = split_variants(self.variants)
        self.action = ArgumentAction(self.action)
        self.choices = tuple(self.choices or ())
        if not self.variants:
            raise SpecificationError("All arguments must have at least one variant")
        if self.required and self.optional:
            raise SpecificationError(
                f"Argument {self.variants[0]} can be required or optional, not both"
            )
        self.value = self.default
        if self.env:
            self._resolve_env_default()

    def _resolve_env_default(self) -> None:
        raw = os.environ.get(self.env)
        if raw is None:
            return
        try:
            self.value = self.type(raw)
        except (ValueError, ParseError) as error:
            raise SpecificationError(
                f"Environment variable {self.env} must be "
                f"{_with_article(self.type_name)}, got: '{raw}'"
            ) from error
        logger.debug("Seeded %s from $%s", self.variants[0], self.env)

    @property
    def seen(self) -> bool:
        """True if the argument appeared in the input (counted up or down)."""
        return self.count != 0

    @property
    def takes_value(self) -> bool:
        return self.action.takes_value

    def register(self, variant: str) -> None:
        """Record an occurrence of `variant`."""
        if variant in self.down_variants:
            self.count -= 1
        else:
            self.count += 1
        if not self.multi and abs(self.count) > 1:
            raise ParseError(f"Duplicate occurrence of {variant}")

    def parse_value(self, raw: str, variant: str) -> Any:
        """
        Convert `raw` with `type`, check it against `choices` and store it.

        A `ValueError` from `type` becomes a `ParseError` naming the expected type;
        a `ParseError` raised by a custom parser is passed through unchanged.
        """
        try:
            parsed = self.type(raw)
        except ValueError as error:
            raise ParseError(
                f"Expected {_with_article(self.type_name)} for {variant}, got: '{raw}'"
            ) from error
        if self.choices and parsed not in self.choices:
            raise ParseError(
                f"Expected value to be one of {self.render_choices()} for {variant}, "
                f"got: '{raw}'"
            )
        self.value = parsed
        self.values.append(parsed)
        return parsed

    def read_value(self, variant: str) -> Any:
        """Read the value for an interactive argument and store it."""
        reader = self.reader or toolkit_prompt
        message = self.prompt or f"{variant.lstrip('-')}: "
        raw = reader(message, is_password=self.secret)
        return self.parse_value(raw, variant)

    def render_choices(self) -> str:
        """Render `choices` as `a|b|c`."""
        return "|".join(str(choice) for choice in self.choices)


@dataclass
class Alternatives:
    """
    A group of mutually exclusive value or count options.

    The first member seen claims the group; seeing a different member afterwards
    is a parse error. Members are looked up by name: `group["insensitive"]`.
    """

    members: dict[str, Argument]
    name: str = ""
    value: Argument | None = None

    @property
    def seen(self) -> bool:
        return self.value is not None

    def claim(self, argument: Argument, variant: str) -> None:
        if self.value is None:
            self.value = argument
        elif self.value is not argument:
            raise ParseError(f"Alternative to {variant} already seen")

    def __getitem__(self, name: str) -> Argument:
        return self.members[name]

    def __iter__(self):
        return iter(self.members.values())
