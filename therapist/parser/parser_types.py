# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shared types and lexical matchers for the therapist parser.

Contents:
- `ArgumentKind`: Positional, option or command, derived from a descriptor's first
  variant when a specification is built.
- `HelpStyle`: Column or paragraph layout for rendered help.
- Precompiled patterns recognising the surface forms of variants and tokens. They
  are built once at import time and never mutated.

Variant forms:
    -o                  short option
    --option            long option
    --[no]option        counts up on --option, down on --nooption
    --[no-]option       counts up on --option, down on --no-option
    -y/-n               counts up on -y, down on -n
    --yes/--no          counts up on --yes, down on --no
    <name>              positional argument
    name                command
"""
import re
from enum import Enum


class ArgumentKind(Enum):
    """Lexical kind of a descriptor."""

    POSITIONAL = "positional"
    OPTION = "option"
    COMMAND = "command"

    def __str__(self) -> str:
        return self.value


class HelpStyle(Enum):
    """Layout used to render help text."""

    COLUMNS = "columns"
    PARAGRAPHS = "paragraphs"

    def __str__(self) -> str:
        return self.value


SHORT_OPTION = re.compile(r"^-(\w)$")
LONG_OPTION = re.compile(r"^--(\w[\w-]*)$")
NEGATABLE_OPTION = re.compile(r"^--\[(no-?)\](\w[\w-]*)$")
PAIRED_SHORT_OPTION = re.compile(r"^-(\w)/-(\w)$")
PAIRED_LONG_OPTION = re.compile(r"^--(\w[\w-]*)/--(\w[\w-]*)$")
POSITIONAL = re.compile(r"^<([^\W\d][\w-]*)>$")
COMMAND = re.compile(r"^\w[\w.-]*$")

ATTACHED_VALUE = re.compile(r"^(--\w[\w-]*|-\w)[=:](.*)$", re.DOTALL)
OPTION_CLUSTER = re.compile(r"^-\w.+$", re.DOTALL)
