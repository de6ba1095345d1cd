# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParserConfig`, the configuration handed unmodified to a parsing adapter.

The configuration is a frozen pydantic model, built once when the application is
configured. It can also be created from Getopt::Long style configure strings,
which is how existing option declarations usually express it:

    ParserConfig.from_getopt(["bundling", "no_ignore_case", "pass_through"])

Recognized Getopt strings (each may be prefixed with `no_` to negate it):
- `auto_abbrev`   → allow_abbreviation
- `ignore_case`   → case_sensitive (inverted)
- `bundling`      → bundling
- `pass_through`  → pass_through
"""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from optcompose.exceptions import ConfigurationError

_GETOPT_FIELDS: dict[str, tuple[str, bool]] = {
    "auto_abbrev": ("allow_abbreviation", True),
    "ignore_case": ("case_sensitive", False),
    "bundling": ("bundling", True),
    "pass_through": ("pass_through", True),
}


class ParserConfig(BaseModel):
    """
    Options that control how raw arguments are tokenized.

    Attributes:
        prog (str | None): Program name used in usage and error messages.
        allow_abbreviation (bool): Accept unambiguous prefixes of long options.
        case_sensitive (bool): Treat `--DBName` and `--dbname` as different.
        bundling (bool): Allow `-abc` for `-a -b -c`. Multi-letter names then
            require `--`; without bundling `-dbhost` is accepted as a long option.
        pass_through (bool): Leave unknown options in the leftover arguments
            instead of failing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prog: str | None = None
    allow_abbreviation: bool = True
    case_sensitive: bool = True
    bundling: bool = False
    pass_through: bool = False

    @field_validator("prog")
    @classmethod
    def validate_prog(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("prog must not be blank.")
        return value

    @classmethod
    def from_getopt(cls, settings: Iterable[str], **overrides) -> ParserConfig:
        """
        Build a configuration from Getopt::Long configure strings.

        Raises:
            ConfigurationError: If a string is not recognized.
        """
        values: dict[str, bool] = {}
        for setting in settings:
            name = setting.strip().lower().replace("-", "_")
            negated = name.startswith("no_")
            if negated:
                name = name[3:]
            if name not in _GETOPT_FIELDS:
                valid = ", ".join(_GETOPT_FIELDS)
                raise ConfigurationError(
                    f"Unsupported parser setting: '{setting}'. Must be one of: {valid}"
                )
            field_name, enabled = _GETOPT_FIELDS[name]
            values[field_name] = enabled != negated
        values.update(overrides)
        return cls.build(**values)

    @classmethod
    def build(cls, **values) -> ParserConfig:
        """Validate `values` into a configuration, raising `ConfigurationError`."""
        try:
            return cls(**values)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid parser configuration: {error}") from error
