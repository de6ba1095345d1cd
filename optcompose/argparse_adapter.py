# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ArgparseAdapter`, the default `ParsingAdapter`, backed by the standard
library's `argparse`.

A fresh `ArgumentParser` is built for every call from the option specification:
each descriptor becomes one argument whose `dest` is the descriptor's accessor
key, and a hidden positional collects the leftover arguments. Options and
positional arguments may be intermixed; `--` ends option parsing.

`ParserConfig` is honoured as follows:
- `allow_abbreviation` → `allow_abbrev`
- `case_sensitive=False` → flags are registered lower-cased and option tokens
  (never their values) are lower-cased before parsing
- `bundling=True` → single-letter names are `-x`, longer names only `--name`;
  without bundling `-name` is accepted as well, as Getopt::Long does
- `pass_through=True` → unknown options are appended to the leftover arguments

argparse never gets to exit the process: every error it reports is raised as
`ParseError` carrying argparse's message.
"""
from __future__ import annotations

from argparse import SUPPRESS, ArgumentParser
from typing import Any, NoReturn, Sequence

from optcompose.descriptor import OptionDescriptor
from optcompose.exceptions import DuplicateOptionError, ParseError
from optcompose.logger import logger
from optcompose.option_action import OptionAction
from optcompose.parsed_options import ParsedOptions
from optcompose.parser_config import ParserConfig
from optcompose.specification import OptionSpecification
from optcompose.utils import get_program_invocation

LEFTOVER_DEST = "__leftover__"

_OPTIONAL_CONSTS: dict[Any, Any] = {str: "", int: 0, float: 0.0}


class _RaisingArgumentParser(ArgumentParser):
    """ArgumentParser that raises `ParseError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


class ArgparseAdapter:
    """
    `ParsingAdapter` implementation on top of `argparse`.

    Usage:
        adapter = ArgparseAdapter()
        opts, args = adapter.parse(spec, ["--dbname", "Emma"], ParserConfig())
    """

    def parse(
        self,
        spec: OptionSpecification,
        raw_args: Sequence[str],
        config: ParserConfig,
    ) -> tuple[ParsedOptions, list[str]]:
        """
        Parse `raw_args` against `spec`.

        Raises:
            ParseError: On unknown options, missing or malformed values, or
                missing required options.
        """
        parser = self.build_parser(spec, config)
        tokens = list(raw_args)
        if not config.case_sensitive:
            tokens = _fold_option_tokens(tokens)
        logger.debug("Parsing %r with %d declared options.", tokens, len(spec))

        if config.pass_through:
            namespace, unknown = parser.parse_known_intermixed_args(tokens)
        else:
            namespace, unknown = parser.parse_intermixed_args(tokens), []

        parsed = vars(namespace)
        leftover = list(parsed.pop(LEFTOVER_DEST, None) or [])
        leftover.extend(unknown)
        values = {descriptor.key: parsed.get(descriptor.key) for descriptor in spec}
        given = [key for key, value in values.items() if value is not None]
        return ParsedOptions.from_spec(spec, values, given), leftover

    def build_parser(
        self, spec: OptionSpecification, config: ParserConfig
    ) -> ArgumentParser:
        """Build the `ArgumentParser` that `parse` uses for `spec`."""
        parser = _RaisingArgumentParser(
            prog=config.prog or get_program_invocation(),
            add_help=False,
            allow_abbrev=config.allow_abbreviation,
        )
        seen: dict[str, OptionDescriptor] = {}
        for descriptor in spec:
            flags = self._flags(descriptor, config)
            for flag in flags:
                other = seen.get(flag)
                if other is not None:
                    raise DuplicateOptionError(
                        str(other),
                        str(descriptor),
                        spec.owner_of(other.key).module_name,
                        spec.owner_of(descriptor.key).module_name,
                        name=flag.lstrip("-"),
                    )
                seen[flag] = descriptor
            parser.add_argument(*flags, **self._kwargs(descriptor))
        parser.add_argument(LEFTOVER_DEST, nargs="*", help=SUPPRESS)
        return parser

    @staticmethod
    def _flags(descriptor: OptionDescriptor, config: ParserConfig) -> list[str]:
        flags: list[str] = []
        for name in descriptor.names:
            if not config.case_sensitive:
                name = name.lower()
            if len(name) == 1:
                flags.append(f"-{name}")
                continue
            flags.append(f"--{name}")
            if not config.bundling:
                flags.append(f"-{name}")
        return flags

    @staticmethod
    def _kwargs(descriptor: OptionDescriptor) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "dest": descriptor.key,
            "default": None,
            "help": descriptor.description.replace("%", "%%") or None,
        }
        action = descriptor.action
        kwargs["action"] = action.argparse_action
        if action.takes_value:
            kwargs["type"] = descriptor.value_type
            kwargs["metavar"] = descriptor.metavar
            if descriptor.choices is not None:
                kwargs["choices"] = list(descriptor.choices)
        if action is OptionAction.STORE_OPTIONAL:
            kwargs["nargs"] = "?"
            kwargs["const"] = descriptor.metadata.get(
                "const", _OPTIONAL_CONSTS.get(descriptor.value_type)
            )
        if descriptor.required:
            kwargs["required"] = True
        return kwargs


def _fold_option_tokens(tokens: list[str]) -> list[str]:
    """Lower-case option tokens (and `--name=` prefixes) up to a bare `--`."""
    folded: list[str] = []
    for index, token in enumerate(tokens):
        if token == "--":
            folded.extend(tokens[index:])
            break
        if token.startswith("-") and len(token) > 1 and not _is_number(token):
            name, sep, value = token.partition("=")
            token = f"{name.lower()}{sep}{value}"
        folded.append(token)
    return folded


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True
