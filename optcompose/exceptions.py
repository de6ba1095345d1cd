# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Optcompose framework.

The errors fall into two groups. Configuration-time errors signal a programming
mistake in how option modules are declared or composed; they are raised before any
argument is parsed and are never the user's fault. Runtime errors are raised while
parsing or validating the arguments of one invocation and carry enough detail
(offending names, the module that complained) for the user to fix the input.

All exceptions inherit from `OptcomposeError`, the base exception for the framework.

Exception Hierarchy:
- OptcomposeError
    ├── InvalidDescriptorError
    ├── InvalidModuleError
    ├── DuplicateOptionError
    ├── ConfigurationError
    ├── StateError
    ├── UnknownOptionError
    ├── ParseError
    └── ValidationError
"""
from __future__ import annotations

from typing import Any


class OptcomposeError(Exception):
    """Base exception for the Optcompose framework."""


class InvalidDescriptorError(OptcomposeError):
    """Exception raised when an option declaration is malformed."""


class InvalidModuleError(OptcomposeError):
    """Exception raised when something composed is not a well-behaved option module."""


class DuplicateOptionError(OptcomposeError):
    """
    Exception raised when two composed descriptors share a name or accessor key.

    Attributes:
        first (str): The earlier descriptor, e.g. `dbname|d`.
        second (str): The later descriptor, e.g. `debug|d`.
        name (str): The shared name or accessor key.
        first_module (str): Module that contributed the earlier descriptor.
        second_module (str): Module that contributed the later descriptor.
    """

    def __init__(
        self,
        first: str,
        second: str,
        first_module: str = "",
        second_module: str = "",
        name: str = "",
    ) -> None:
        self.name = name
        self.first = first
        self.second = second
        self.first_module = first_module
        self.second_module = second_module
        where_first = f" (from {first_module})" if first_module else ""
        where_second = f" (from {second_module})" if second_module else ""
        shared = f" '{name}'" if name else ""
        super().__init__(
            f"Duplicate option{shared}: '{second}'{where_second} "
            f"conflicts with '{first}'{where_first}."
        )


class ConfigurationError(OptcomposeError):
    """Exception raised when the parser configuration cannot be understood."""


class StateError(OptcomposeError):
    """Exception raised when an application step is invoked in the wrong state."""


class UnknownOptionError(OptcomposeError, KeyError):
    """Exception raised when looking up an option key that was never declared."""

    def __init__(self, key: str, known: tuple[str, ...] = ()) -> None:
        self.key = key
        self.known = known
        message = f"Unknown option key: '{key}'."
        if known:
            message += f" Declared keys: {', '.join(known)}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class ParseError(OptcomposeError):
    """Exception raised when the raw arguments do not match the option specification."""


class ValidationError(OptcomposeError):
    """
    Exception raised by an option module's validation hook.

    Attributes:
        module (Any): The module (or its name) that rejected the options.
        usage (str): Optional usage text to show next to the message.
    """

    def __init__(self, message: str, module: Any = None, usage: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.module = module
        self.usage = usage

    @property
    def module_name(self) -> str:
        if self.module is None:
            return ""
        if isinstance(self.module, str):
            return self.module
        return getattr(self.module, "name", type(self.module).__name__)
