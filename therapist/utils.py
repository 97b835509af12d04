# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shlex
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from therapist.exceptions import ParseError
from therapist.logger import logger

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
LOG_TIME_FORMAT = "[%Y-%m-%d %H:%M:%S]"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def get_program_invocation() -> str:
    """Returns the name the running program was invoked as."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "therapist"
    name = os.path.basename(script)
    if name in ("__main__.py", "-c", "-m"):
        return "therapist"
    return name


def split_args(args: str) -> list[str]:
    """Split a shell-like string into tokens, honouring quotes."""
    try:
        return shlex.split(args)
    except ValueError as error:
        raise ParseError(f"Unable to split: {args}") from error


def running_in_container() -> bool:
    """True when the init process runs under a container runtime."""
    try:
        content = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_FORMAT)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root handlers so that "therapist" records are shown.

    `mode` is "cli" (Rich console) or "json"; it defaults to `$THERAPIST_LOG_MODE`,
    else "json" inside a container and "cli" elsewhere. A `log_filename` adds a
    file handler, JSON formatted when `json_log_to_file` is set.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv("THERAPIST_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"

    handlers: list[logging.Handler] = []
    if mode == "cli":
        handlers.append(
            RichHandler(show_path=False, markup=False, log_time_format=LOG_TIME_FORMAT)
        )
    elif mode == "json":
        handlers.append(logging.StreamHandler())
        handlers[0].setFormatter(_json_formatter())
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    handlers[0].setLevel(console_log_level)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            _json_formatter()
            if json_log_to_file
            else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers[:] = handlers
    logger.debug("Logging initialized in '%s' mode.", mode)
