# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the pluggable parts of Optcompose.

These runtime-checkable `Protocol` classes specify the expected interfaces without
requiring explicit base classes.

Protocols:
- ParsingAdapter: Turns an option specification and raw arguments into parsed
  options plus leftover arguments.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from optcompose.parsed_options import ParsedOptions
from optcompose.parser_config import ParserConfig
from optcompose.specification import OptionSpecification


@runtime_checkable
class ParsingAdapter(Protocol):
    """
    Tokenizer boundary used by `Application.parse`.

    Implementations receive the configuration unmodified and must raise
    `ParseError` for malformed input, unknown options, or values of the wrong type.
    """

    def parse(
        self,
        spec: OptionSpecification,
        raw_args: Sequence[str],
        config: ParserConfig,
    ) -> tuple[ParsedOptions, list[str]]: ...
