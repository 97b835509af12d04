# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads argument specifications declared in YAML or TOML files.

A file holds an optional `prolog` and `epilog` and an ordered `arguments` table
mapping names to argument definitions:

    prolog: Greet someone
    arguments:
      name: {type: string, variants: "<name>", help: Person to greet}
      times: {type: int, variants: "-t, --times", default: 1}
      sensitivity:
        alternatives:
          insensitive: {type: count, variants: "-i"}
          sensitive: {type: count, variants: "-s"}
      push:
        type: command
        variants: push
        handler: my_package.commands.push
        arguments:
          remote: {type: string, variants: "<remote>"}
      help: {type: help}

`type` is one of the built-in argument types below, or a dotted import path to a
callable converting text into a value (a custom value type).
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from therapist.logger import logger
from therapist.parser.argument import Alternatives, Argument
from therapist.parser.arguments import (
    alternatives,
    bool_arg,
    command_arg,
    completion_arg,
    count_arg,
    date_arg,
    define_arg,
    dir_arg,
    file_arg,
    flag_arg,
    float_arg,
    help_arg,
    int_arg,
    message_arg,
    path_arg,
    prompt_arg,
    string_arg,
)
from therapist.parser.parser_types import HelpStyle
from therapist.parser.specification import Specification, build_specification

MAX_DEPTH = 8

VALUE_FACTORIES = {
    "string": string_arg,
    "str": string_arg,
    "int": int_arg,
    "integer": int_arg,
    "float": float_arg,
    "bool": bool_arg,
    "boolean": bool_arg,
    "path": path_arg,
    "file": file_arg,
    "dir": dir_arg,
    "directory": dir_arg,
    "date": date_arg,
}

DEFAULT_VARIANTS = {
    "help": "-h, --help",
    "completion": "--fish-completion",
}

ZERO_TOKEN_TYPES = {"count", "flag", "help", "message", "version", "prompt", "completion"}


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Import a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ValueError(f"Invalid import path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ValueError(f"Could not import '{dotted_path}': {error}") from error
    try:
        target = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ValueError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(target):
        raise ValueError(f"'{dotted_path}' is not callable")
    return target


class RawArgument(BaseModel):
    """One argument as written in a configuration file."""

    model_config = ConfigDict(extra="forbid")

    type: str = "string"
    variants: str | list[str] = ""
    help: str = ""
    long_help: str = ""
    help_var: str = ""
    group: str = ""
    help_level: int = 0
    required: bool = False
    optional: bool = False
    multi: bool | None = None
    env: str = ""
    default: Any = None
    choices: list[Any] = Field(default_factory=list)
    message: str = ""
    show_level: int = 0
    help_style: HelpStyle = HelpStyle.COLUMNS
    prompt: str = ""
    secret: bool = False
    prolog: str = ""
    epilog: str = ""
    handler: str = ""
    arguments: dict[str, Any] = Field(default_factory=dict)
    alternatives: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        value = value.strip()
        known = (
            value in VALUE_FACTORIES
            or value in ZERO_TOKEN_TYPES
            or value in ("command", "alternatives")
        )
        if not known and "." not in value:
            raise ValueError(f"Unknown argument type: '{value}'")
        return value

    @model_validator(mode="after")
    def validate_shape(self) -> RawArgument:
        if self.alternatives or self.type == "alternatives":
            if not self.alternatives:
                raise ValueError("Alternatives need members")
            self.type = "alternatives"
            return self
        if not self.variants and self.type not in DEFAULT_VARIANTS:
            raise ValueError(f"Arguments of type '{self.type}' need variants")
        if self.type == "command" and not self.arguments:
            logger.debug("Command %s declares no arguments", self.variants)
        return self

    def to_argument(self, depth: int = 0) -> Argument | Alternatives:
        if self.type == "alternatives":
            return alternatives(dict(convert_arguments(self.alternatives, depth)))
        variants = self.variants or DEFAULT_VARIANTS[self.type]
        presentation = {"help": self.help, "group": self.group, "help_level": self.help_level}

        if self.type == "command":
            return command_arg(
                variants,
                convert_arguments(self.arguments, depth=depth + 1),
                prolog=self.prolog,
                epilog=self.epilog,
                handler=import_callable(self.handler) if self.handler else None,
                long_help=self.long_help,
                **presentation,
            )
        if self.type == "help":
            return help_arg(
                variants,
                show_level=self.show_level,
                help_style=self.help_style,
                long_help=self.long_help,
                **{**presentation, "help": self.help or "Show help message"},
            )
        if self.type in ("message", "version"):
            return message_arg(variants, self.message, **presentation)
        if self.type == "completion":
            return completion_arg(
                variants,
                **{**presentation, "help": self.help or "Show a fish completion script"},
            )
        if self.type in ("count", "flag"):
            factory = count_arg if self.type == "count" else flag_arg
            return factory(
                variants,
                long_help=self.long_help,
                required=self.required,
                **presentation,
            )
        if self.type == "prompt":
            return prompt_arg(
                variants,
                prompt=self.prompt,
                secret=self.secret,
                default=self.default if self.default is not None else "",
                choices=self.choices,
                required=self.required,
                **presentation,
            )

        if self.type in VALUE_FACTORIES:
            factory = VALUE_FACTORIES[self.type]
        else:
            factory = define_arg(self.type.rpartition(".")[2], import_callable(self.type))
        options: dict[str, Any] = {
            "choices": self.choices,
            "help_var": self.help_var,
            "long_help": self.long_help,
            "required": self.required,
            "optional": self.optional,
            "multi": bool(self.multi),
            "env": self.env,
        }
        if self.default is not None:
            options["default"] = self.default
        return factory(variants, **options, **presentation)


def convert_arguments(
    raw_arguments: dict[str, Any], depth: int = 0
) -> list[tuple[str, Argument | Alternatives]]:
    if depth > MAX_DEPTH:
        raise ValueError(f"Maximum command depth exceeded ({MAX_DEPTH} levels deep)")
    converted = []
    for name, entry in raw_arguments.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Argument '{name}' must be a table of settings")
        converted.append((name, RawArgument(**entry).to_argument(depth)))
    return converted


class SpecificationConfig(BaseModel):
    """Top level model of a specification file."""

    prolog: str = ""
    epilog: str = ""
    arguments: dict[str, Any] = Field(default_factory=dict)

    def to_specification(self) -> Specification:
        return build_specification(
            convert_arguments(self.arguments), prolog=self.prolog, epilog=self.epilog
        )


def loader(file_path: Path | str) -> Specification:
    """
    Load an argument specification from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the specification file.

    Returns:
        Specification: The built specification, ready to parse.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is invalid.
        SpecificationError: If the arguments themselves are malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such specification file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Specification file must contain a table of arguments.\n"
            "Example:\n"
            "prolog: 'Greet someone'\n"
            "arguments:\n"
            "  name:\n"
            "    type: string\n"
            "    variants: '<name>'"
        )

    logger.debug("Loading specification from %s", path)
    return SpecificationConfig(**raw_config).to_specification()
