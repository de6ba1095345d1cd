# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionAction`, what an option does with the command-line tokens it
receives.

The Getopt-style declaration suffixes map onto these members:

    (none) → STORE_TRUE     =s =i =f → STORE     :s :i :f → STORE_OPTIONAL
    =s@    → APPEND         !        → STORE_BOOL_OPTIONAL   + → COUNT

Metadata may name an action directly, either by value or through one of the
config-friendly aliases:

    OptionAction("true")    → OptionAction.STORE_TRUE
    OptionAction("counter") → OptionAction.COUNT
"""
from __future__ import annotations

from argparse import BooleanOptionalAction
from enum import Enum
from typing import Any

_ACTION_ALIASES = {
    "true": "store_true",
    "false": "store_false",
    "optional": "store_bool_optional",
    "negatable": "store_bool_optional",
    "list": "append",
    "counter": "count",
}


class OptionAction(Enum):
    """
    Members:
        STORE: Keep the single value that follows the flag.
        STORE_TRUE: A plain switch; `True` when present.
        STORE_FALSE: An inverted switch; `False` when present.
        STORE_BOOL_OPTIONAL: `--name` gives `True`, `--no-name` gives `False`.
        STORE_OPTIONAL: Keep the value if one follows, else the type's empty value.
        APPEND: Every occurrence adds its value to a list.
        COUNT: The number of times the flag was given.
    """

    STORE = "store"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    STORE_BOOL_OPTIONAL = "store_bool_optional"
    STORE_OPTIONAL = "store_optional"
    APPEND = "append"
    COUNT = "count"

    @classmethod
    def choices(cls) -> list[OptionAction]:
        return list(cls)

    @classmethod
    def _missing_(cls, value: object) -> OptionAction:
        if isinstance(value, str):
            wanted = value.strip().lower()
            wanted = _ACTION_ALIASES.get(wanted, wanted)
            for member in cls:
                if member.value == wanted:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown option action {value!r}. Expected one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether the option consumes a value from the command line."""
        return self in (
            OptionAction.STORE,
            OptionAction.STORE_OPTIONAL,
            OptionAction.APPEND,
        )

    @property
    def argparse_action(self) -> Any:
        """The `action=` argument `argparse.add_argument` needs for this member."""
        if self is OptionAction.STORE_BOOL_OPTIONAL:
            return BooleanOptionalAction
        if self is OptionAction.STORE_OPTIONAL:
            return "store"
        return self.value

    def __str__(self) -> str:
        return self.value
