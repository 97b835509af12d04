# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandArgumentParser`, the state machine that consumes a
list of tokens against a `Specification`.

Parsing runs in two phases over `args[start:]`:

1. Sifting. Options and commands are recognised and consumed left to right;
   everything else is collected as a raw positional. `--` turns every remaining
   token into a positional. Once a command is recognised, a nested parser owns
   every token after it.
2. Assignment. Collected positionals are handed to positional arguments in
   declaration order. Optional positionals only take a value if one is left;
   multi positionals are greedy but leave one value for each later required
   positional.

Token classification order (phase 1):
- `--`
- an exact registered token (option, down token or command)
- an attached value: `--option=value`, `--option:value`, `-o=value`, `-o:value`
- a well formed but unknown option (`-x`, `--xxx`)
- a short option cluster (`-abc`, `-vvs10`); the first value taking letter
  consumes the rest of the token as its value
- anything else: a positional, or a mistyped command

Outcomes:
- success: descriptor state (`count`, `value`, `values`) is mutated in place
- `ParseError`: malformed input, with a one line message
- `MessageError`: help, a fixed message or a completion script to show

Example Usage:
    specification = build_specification({
        "name": string_arg("<name>", help="Person to greet"),
        "times": int_arg("-t, --times", default=1, help="How many times to greet"),
        "help": help_arg(),
    })
    CommandArgumentParser(specification, "hello").parse_args(["-t", "2", "World"])
    specification["name"].value    # 'World'
    specification["times"].value   # 2
"""
from __future__ import annotations

from typing import Sequence

from therapist.exceptions import MessageError, ParseError
from therapist.logger import logger
from therapist.parser.argument import Argument
from therapist.parser.argument_action import ArgumentAction
from therapist.parser.completion import render_fish_completion
from therapist.parser.dldistance import closest
from therapist.parser.help import render_help
from therapist.parser.parser_types import (
    ATTACHED_VALUE,
    LONG_OPTION,
    OPTION_CLUSTER,
    SHORT_OPTION,
    ArgumentKind,
)
from therapist.parser.specification import Specification
from therapist.signals import HelpSignal


class CommandArgumentParser:
    """
    Parses tokens against one `Specification` scope.

    A parser is created per scope: recognising a command creates a nested parser
    for the command's specification with the command path extended by the
    matched variant (e.g. `pal` → `pal push`).

    Attributes:
        specification (Specification): The scope being parsed.
        command (str): Command path used in help and usage text.
    """

    def __init__(self, specification: Specification, command: str) -> None:
        self.specification: Specification = specification
        self.command: str = command

    def parse_args(self, args: Sequence[str], start: int = 0) -> Specification:
        """
        Consume `args[start:]`, mutating the descriptors of the specification.

        Raises:
            ParseError: If the input does not match the specification.
            MessageError: If parsing stopped to show help or a message.
        """
        args = list(args)
        positionals: list[str] = []
        logger.debug("Parsing %s against '%s'", args[start:], self.command)
        try:
            i = start
            while i < len(args):
                i = self._handle_token(args, i, positionals)
            self._check_required_options()
            self._consume_all_positional_args(positionals)
        except HelpSignal as signal:
            raise MessageError(self._render_help(signal)) from None
        return self.specification

    def _handle_token(self, args: list[str], i: int, positionals: list[str]) -> int:
        token = args[i]
        options = self.specification.options

        if token == "--":
            positionals.extend(args[i + 1 :])
            return len(args)

        if token in options:
            argument = options[token]
            self._claim_alternative(argument, token)
            return self._consume(argument, args, token, i + 1)

        attached = ATTACHED_VALUE.match(token)
        if attached:
            variant, value = attached.groups()
            argument = options.get(variant)
            if argument is None:
                raise ParseError(f"Unrecognised option: {variant}")
            if not argument.takes_value:
                raise ParseError(f"Option {variant} does not take a value")
            self._claim_alternative(argument, variant)
            self._consume(argument, [value], variant, 0)
            return i + 1

        if SHORT_OPTION.match(token) or LONG_OPTION.match(token):
            raise ParseError(f"Unrecognised option: {token}")

        if OPTION_CLUSTER.match(token):
            self._consume_cluster(token)
            return i + 1

        if self.specification.argument_list:
            positionals.append(token)
            return i + 1
        if self.specification.command_list:
            raise ParseError(self._unexpected_command_message(token))
        raise ParseError(f"Unexpected argument: {token}")

    def _consume_cluster(self, token: str) -> None:
        """Consume a short option cluster such as `-vvx` or `-vs10`."""
        for index, letter in enumerate(token[1:], start=1):
            variant = f"-{letter}"
            argument = self.specification.options.get(variant)
            if argument is None or argument.kind is not ArgumentKind.OPTION:
                raise ParseError(f"Unrecognised option: {variant} in {token}")
            self._claim_alternative(argument, variant)
            if argument.takes_value:
                rest = token[index + 1 :]
                self._consume(argument, [rest] if rest else [], variant, 0)
                return
            self._consume(argument, [], variant, 0)

    def _claim_alternative(self, argument: Argument, variant: str) -> None:
        alternatives = self.specification.alternatives.get(variant)
        if alternatives is not None:
            alternatives.claim(argument, variant)

    def _consume(
        self, argument: Argument, args: list[str], variant: str, pos: int
    ) -> int:
        """
        Register `argument` as seen via `variant` and consume its values.

        Returns:
            int: Position of the first token not consumed.
        """
        argument.register(variant)
        action = argument.action

        if action is ArgumentAction.VALUE:
            if pos >= len(args):
                raise ParseError(f"Missing value for {variant}")
            argument.parse_value(args[pos], variant)
            return pos + 1
        elif action is ArgumentAction.COUNT:
            return pos
        elif action is ArgumentAction.PROMPT:
            argument.read_value(variant)
            return pos
        elif action is ArgumentAction.MESSAGE:
            logger.debug("Message requested by %s in '%s'", variant, self.command)
            raise MessageError(argument.message)
        elif action is ArgumentAction.HELP:
            target = None
            if argument.kind is ArgumentKind.COMMAND and pos < len(args):
                target = args[pos]
            raise HelpSignal(
                show_level=argument.show_level,
                style=argument.help_style,
                target=target,
            )
        elif action is ArgumentAction.COMPLETION:
            logger.debug("Completion requested by %s in '%s'", variant, self.command)
            program = self.command.split(" ")[0]
            raise MessageError(render_fish_completion(self.specification, program))
        elif action is ArgumentAction.COMMAND:
            assert argument.specification is not None, "command without specification"
            logger.debug("Entering command '%s %s'", self.command, variant)
            parser = CommandArgumentParser(
                argument.specification, f"{self.command} {variant}"
            )
            parser.parse_args(args, start=pos)
            if argument.handler is not None:
                argument.handler(argument.specification)
            return len(args)
        raise ParseError(f"Unsupported action {action} for {variant}")

    def _check_required_options(self) -> None:
        for argument in self.specification.option_list:
            if argument.required and not argument.seen:
                raise ParseError(f"Missing option: {', '.join(argument.variants)}")

    def _consume_all_positional_args(self, positionals: list[str]) -> None:
        argument_list = self.specification.argument_list
        pos = 0
        for index, argument in enumerate(argument_list):
            if pos < len(positionals) or not argument.optional:
                variant = argument.variants[0]
                pos = self._consume(argument, positionals, variant, pos)
                if argument.multi:
                    reserved = sum(
                        1 for later in argument_list[index + 1 :] if not later.optional
                    )
                    while pos < len(positionals) - reserved:
                        pos = self._consume(argument, positionals, variant, pos)
        if pos < len(positionals):
            raise ParseError(f"Unconsumed argument: {positionals[pos]}")

    def _unexpected_command_message(self, token: str) -> str:
        candidates = [
            variant
            for command in self.specification.command_list
            for variant in command.variants
        ]
        suggestion, distance = closest(token, candidates)
        if suggestion is not None and distance == 1:
            return f"Unexpected command: '{token}' - did you mean '{suggestion}'?"
        return f"Unexpected command: '{token}'"

    def _render_help(self, signal: HelpSignal) -> str:
        specification, command = self.specification, self.command
        if signal.target:
            target = specification.options.get(signal.target)
            if (
                target is not None
                and target.action is ArgumentAction.COMMAND
                and target.specification is not None
            ):
                specification = target.specification
                command = f"{command} {signal.target}"
        logger.debug("Rendering help for '%s'", command)
        return render_help(
            specification,
            command,
            show_level=signal.show_level,
            style=signal.style,
        )

    def __str__(self) -> str:
        return f"CommandArgumentParser(command={self.command!r})"
