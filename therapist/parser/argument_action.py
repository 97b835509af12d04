# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentAction`, the enum that tags what a descriptor does when the
parser recognises it.

Every `Argument` carries exactly one action. The parser, the help renderer and the
completion renderer dispatch on it, so adding a behaviour means adding a member
here and a branch in each of those places.

Supports alias coercion for config-friendly values.

Example:
    ArgumentAction("value")   → ArgumentAction.VALUE
    ArgumentAction("store")   → ArgumentAction.VALUE (via alias)
    ArgumentAction("version") → ArgumentAction.MESSAGE (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        VALUE: Consume one token and parse it into a typed value.
        COUNT: Consume nothing; count (or, for "down" variants, count down).
        COMMAND: Hand every remaining token to a nested specification.
        HELP: Stop parsing and show help for the active specification.
        MESSAGE: Stop parsing and show a fixed message (e.g. a version).
        PROMPT: Consume nothing; read the value interactively.
        COMPLETION: Stop parsing and show a fish completion script.

    Aliases:
        - "store" → "value"
        - "flag", "counter" → "count"
        - "version" → "message"
        - "input" → "prompt"
    """

    VALUE = "value"
    COUNT = "count"
    COMMAND = "command"
    HELP = "help"
    MESSAGE = "message"
    PROMPT = "prompt"
    COMPLETION = "completion"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "store": "value",
            "flag": "count",
            "counter": "count",
            "version": "message",
            "input": "prompt",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """True if the action consumes one token from the argument list."""
        return self is ArgumentAction.VALUE

    @property
    def short_circuits(self) -> bool:
        """True if recognising the action always ends the parse with a message."""
        return self in (
            ArgumentAction.HELP,
            ArgumentAction.MESSAGE,
            ArgumentAction.COMPLETION,
        )

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value
