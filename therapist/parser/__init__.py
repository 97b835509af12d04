"""
Therapist CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Alternatives, Argument
from .argument_action import ArgumentAction
from .arguments import (
    alternatives,
    bool_arg,
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
    string_arg,
)
from .command_argument_parser import CommandArgumentParser
from .completion import render_fish_completion
from .dldistance import damerau_levenshtein_distance, dldistance
from .help import render_help
from .parser_types import ArgumentKind, HelpStyle
from .specification import Specification, build_specification

__all__ = [
    "Alternatives",
    "Argument",
    "ArgumentAction",
    "ArgumentKind",
    "CommandArgumentParser",
    "HelpStyle",
    "Specification",
    "alternatives",
    "bool_arg",
    "build_specification",
    "command_arg",
    "completion_arg",
    "completion_command_arg",
    "count_arg",
    "damerau_levenshtein_distance",
    "date_arg",
    "define_arg",
    "dir_arg",
    "dldistance",
    "file_arg",
    "flag_arg",
    "float_arg",
    "help_arg",
    "help_command_arg",
    "int_arg",
    "message_arg",
    "message_command_arg",
    "path_arg",
    "prompt_arg",
    "render_fish_completion",
    "render_help",
    "string_arg",
]
