"""
Therapist CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgError,
    MessageError,
    ParseError,
    SpecificationError,
    TherapistError,
)
from .parser import (
    Alternatives,
    Argument,
    ArgumentAction,
    CommandArgumentParser,
    HelpStyle,
    Specification,
    alternatives,
    bool_arg,
    build_specification,
    command_arg,
    completion_arg,
    completion_command_arg,
    count_arg,
    date_arg,
    define_arg,
    dir_arg,
    file_arg,
    flag_arg,
    float_arg,
    help_arg,
    help_command_arg,
    int_arg,
    message_arg,
    message_command_arg,
    path_arg,
    prompt_arg,
    render_fish_completion,
    render_help,
    string_arg,
)
from .therapist import (
    ParseResult,
    parse,
    parse_copy,
    parse_or_message,
    parse_or_quit,
)
from .version import __version__

logger = logging.getLogger("therapist")


__all__ = [
    "Alternatives",
    "ArgError",
    "Argument",
    "ArgumentAction",
    "CommandArgumentParser",
    "HelpStyle",
    "MessageError",
    "ParseError",
    "ParseResult",
    "Specification",
    "SpecificationError",
    "TherapistError",
    "__version__",
    "alternatives",
    "bool_arg",
    "build_specification",
    "command_arg",
    "completion_arg",
    "completion_command_arg",
    "count_arg",
    "date_arg",
    "define_arg",
    "dir_arg",
    "file_arg",
    "flag_arg",
    "float_arg",
    "help_arg",
    "help_command_arg",
    "int_arg",
    "message_arg",
    "message_command_arg",
    "parse",
    "parse_copy",
    "parse_or_message",
    "parse_or_quit",
    "path_arg",
    "prompt_arg",
    "render_fish_completion",
    "render_help",
    "string_arg",
]
