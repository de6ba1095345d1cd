# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionDescriptor` dataclass, the declarative unit every option module
is built from.

Each descriptor describes one command-line option: the names it answers to (the
first one is primary, the rest are aliases), a short description for usage text,
and a read-only metadata mapping that tells parsing adapters how values are
handled (action, type, default, choices, ...).

Descriptors are usually written in the compact Getopt-style textual form and
turned into objects with `OptionDescriptor.from_spec()`:

    "dbname=s"        → --dbname VALUE (string)
    "dbport=i"        → --dbport VALUE (int)
    "ratio=f"         → --ratio VALUE (float)
    "level:i"         → --level [VALUE] (0 when given without a value)
    "tag=s@"          → --tag VALUE, repeatable, collected into a list
    "color!"          → --color / --no-color
    "verbose|v+"      → -v -v counts to 2
    "version|v"       → plain switch

Key Attributes:
- `names`: Primary name followed by aliases, without leading dashes
- `key`: Normalized primary name used as the accessor key on parsed options
- `metadata`: Read-only mapping with `action`, `type`, `default`, `required`,
  `choices`, `metavar`, `hidden`

Descriptors are immutable values: modules share them, specifications include them,
and nothing ever mutates them after construction.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from optcompose.exceptions import InvalidDescriptorError
from optcompose.option_action import OptionAction
from optcompose.utils import normalize_key

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][\w-]*$")
_SPEC_PATTERN = re.compile(
    r"^(?P<names>[^=:!+]+)(?P<kind>[=:][sif]@?|!|\+)?$",
)
_TYPE_CODES: dict[str, type] = {"s": str, "i": int, "f": float}
_OPTIONAL_CONSTS: dict[type, Any] = {str: "", int: 0, float: 0.0}


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Represents one declared command-line option.

    Attributes:
        names (tuple[str, ...]): Primary name first, then aliases.
        description (str): Short description shown in usage text.
        metadata (Mapping[str, Any]): Read-only adapter hints (action, type, ...).
    """

    names: tuple[str, ...]
    description: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if isinstance(self.names, str):
            names: tuple[str, ...] = (self.names,)
        else:
            names = tuple(self.names)
        if not names:
            raise InvalidDescriptorError("An option needs at least one name.")
        cleaned = []
        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise InvalidDescriptorError(f"Invalid option name: {name!r}")
            name = name.strip().lstrip("-")
            if not _NAME_PATTERN.match(name):
                raise InvalidDescriptorError(
                    f"Invalid option name: '{name}'. Names use letters, digits, "
                    "'-' and '_' and must not start with a separator."
                )
            if name in cleaned:
                raise InvalidDescriptorError(
                    f"Option name '{name}' is listed twice in {names!r}."
                )
            cleaned.append(name)
        metadata = dict(self.metadata or {})
        if "action" in metadata:
            try:
                metadata["action"] = OptionAction(metadata["action"])
            except ValueError as error:
                raise InvalidDescriptorError(str(error)) from error
        object.__setattr__(self, "names", tuple(cleaned))
        object.__setattr__(self, "metadata", MappingProxyType(metadata))

    @classmethod
    def from_spec(
        cls,
        spec: str,
        description: str = "",
        metadata: Mapping[str, Any] | None = None,
    ) -> OptionDescriptor:
        """
        Build a descriptor from a Getopt-style textual declaration.

        Explicit `metadata` entries win over what the declaration implies.

        Raises:
            InvalidDescriptorError: If the declaration cannot be understood.
        """
        if not isinstance(spec, str):
            raise InvalidDescriptorError(f"Option spec must be a string, got {spec!r}")
        match = _SPEC_PATTERN.match(spec.strip())
        if not match:
            raise InvalidDescriptorError(f"Malformed option spec: '{spec}'")
        names = tuple(match.group("names").split("|"))
        derived = _metadata_for_kind(match.group("kind"))
        derived.update(metadata or {})
        return cls(names=names, description=description, metadata=derived)

    @property
    def primary(self) -> str:
        return self.names[0]

    @property
    def aliases(self) -> tuple[str, ...]:
        return self.names[1:]

    @property
    def key(self) -> str:
        """Accessor key of this option on parsed options."""
        return normalize_key(self.primary)

    @property
    def action(self) -> OptionAction:
        return self.metadata.get("action", OptionAction.STORE_TRUE)

    @property
    def value_type(self) -> Any:
        if not self.action.takes_value:
            return None
        return self.metadata.get("type", str)

    @property
    def default(self) -> Any:
        """Value when the option is absent; an inverted switch is `True` then."""
        if "default" in self.metadata:
            return self.metadata["default"]
        if self.action is OptionAction.STORE_FALSE:
            return True
        return None

    @property
    def required(self) -> bool:
        return bool(self.metadata.get("required", False))

    @property
    def choices(self) -> Sequence[Any] | None:
        return self.metadata.get("choices")

    @property
    def hidden(self) -> bool:
        return bool(self.metadata.get("hidden", False))

    @property
    def metavar(self) -> str | None:
        if not self.action.takes_value:
            return None
        return self.metadata.get("metavar") or self.key.upper()

    def usage_flags(self) -> str:
        """Flags as shown in usage text, e.g. `-v, --version`."""
        flags = []
        for name in sorted(self.names, key=len):
            flags.append(f"-{name}" if len(name) == 1 else f"--{name}")
        text = ", ".join(flags)
        if self.action is OptionAction.STORE_BOOL_OPTIONAL:
            text += f" / --no-{self.primary}"
        elif self.action is OptionAction.STORE_OPTIONAL:
            text += f" [{self.metavar}]"
        elif self.action.takes_value:
            text += f" {self.metavar}"
        return text

    def __str__(self) -> str:
        return "|".join(self.names)


def _metadata_for_kind(kind: str | None) -> dict[str, Any]:
    if kind is None:
        return {"action": OptionAction.STORE_TRUE}
    if kind == "!":
        return {"action": OptionAction.STORE_BOOL_OPTIONAL}
    if kind == "+":
        return {"action": OptionAction.COUNT}
    value_type = _TYPE_CODES[kind[1]]
    if kind.endswith("@"):
        return {"action": OptionAction.APPEND, "type": value_type}
    if kind[0] == ":":
        return {
            "action": OptionAction.STORE_OPTIONAL,
            "type": value_type,
            "const": _OPTIONAL_CONSTS[value_type],
        }
    return {"action": OptionAction.STORE, "type": value_type}


def descriptor_from(entry: Any) -> OptionDescriptor:
    """
    Coerce a declaration into an `OptionDescriptor`.

    Accepts a descriptor, a spec string, or a `(spec, description[, metadata])`
    tuple as written in module declarations.
    """
    if isinstance(entry, OptionDescriptor):
        return entry
    if isinstance(entry, str):
        return OptionDescriptor.from_spec(entry)
    if isinstance(entry, (tuple, list)) and 1 <= len(entry) <= 3:
        return OptionDescriptor.from_spec(*entry)
    raise InvalidDescriptorError(f"Cannot build an option descriptor from {entry!r}")


def descriptors_from(entries: Sequence[Any]) -> list[OptionDescriptor]:
    return [descriptor_from(entry) for entry in entries]
