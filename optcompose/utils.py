# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "OPTCOMPOSE_LOG_MODE"
_JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"
_NON_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]")
_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def normalize_key(name: str) -> str:
    """Turn an option name into its accessor key (`db-name` -> `db_name`)."""
    return _NON_IDENTIFIER.sub("_", name.strip().lstrip("-")).lower()


def get_program_invocation() -> str:
    """Name to show for the running program in usage and error messages."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    if shutil.which(script):
        return os.path.basename(script)
    if script.endswith(".py"):
        return f"python {script}"
    return os.path.basename(script)


def running_in_container() -> bool:
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in _CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FIELDS))
        return handler
    raise ValueError(f"Invalid log mode: '{mode}'. Expected 'cli' or 'json'.")


def _file_handler(filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FIELDS))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Install log handlers for an application built on Optcompose.

    The library itself only logs to the "optcompose" logger and never installs
    handlers; call this once from the program's entry point. Existing root
    handlers are replaced.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per line. Defaults to `$OPTCOMPOSE_LOG_MODE`, else "json"
            inside a container and "cli" everywhere else.
        log_filename (str | None): Also log to this file when given.
        json_log_to_file (bool): Write the file log as JSON instead of text.
        file_log_level (int): Threshold for the file log.
        console_log_level (int): Threshold for the console log.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")

    handlers = [_console_handler(mode)]
    handlers[0].setLevel(console_log_level)
    if log_filename:
        handlers.append(_file_handler(log_filename, json_log_to_file))
        handlers[-1].setLevel(file_log_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    for handler in handlers:
        root.addHandler(handler)

    logging.getLogger("optcompose").debug("Logging initialized in '%s' mode.", mode)
