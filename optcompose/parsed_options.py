# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedOptions`, the read-only result of parsing arguments against an
`OptionSpecification`.

Values are keyed by each descriptor's accessor key (the primary name, lower-cased,
separators turned into `_`). Every declared key is present: options the user did
not give hold their declared default, or `None`.

Looking up a key that was never declared raises `UnknownOptionError` instead of
quietly returning `None`, whichever access style is used:

    opts["dbname"]
    opts.get("dbname")
    opts.dbname

Typical Usage:
    opts, args = app.run(["--dbname", "Emma"])
    if opts.get("dbshow"):
        ...
    if opts.is_given("dbport"):
        ...
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from optcompose.exceptions import UnknownOptionError
from optcompose.specification import OptionSpecification
from optcompose.utils import normalize_key


class ParsedOptions(Mapping[str, Any]):
    """
    Read-only mapping of accessor key to parsed value.

    Args:
        values (Mapping[str, Any]): Value for every known key.
        given (Iterable[str]): Keys the user actually supplied.
    """

    __slots__ = ("_values", "_given")

    def __init__(self, values: Mapping[str, Any], given: Iterable[str] = ()) -> None:
        normalized = {normalize_key(key): value for key, value in values.items()}
        given_keys = frozenset(normalize_key(key) for key in given)
        unknown = sorted(given_keys - normalized.keys())
        if unknown:
            raise UnknownOptionError(unknown[0], tuple(normalized))
        object.__setattr__(self, "_values", MappingProxyType(normalized))
        object.__setattr__(self, "_given", given_keys)

    @classmethod
    def from_spec(
        cls,
        spec: OptionSpecification,
        values: Mapping[str, Any],
        given: Iterable[str] = (),
    ) -> ParsedOptions:
        """
        Build parsed options for `spec`, filling absent keys with their defaults.

        Raises:
            UnknownOptionError: If `values` holds a key `spec` does not declare.
        """
        known = spec.keys()
        merged: dict[str, Any] = {}
        for key, value in values.items():
            normalized = normalize_key(key)
            if normalized not in known:
                raise UnknownOptionError(key, known)
            merged[normalized] = value
        for descriptor in spec:
            if merged.get(descriptor.key) is None:
                merged[descriptor.key] = descriptor.default
        return cls({key: merged[key] for key in known}, given)

    def __getitem__(self, key: str) -> Any:
        normalized = normalize_key(key)
        if normalized not in self._values:
            raise UnknownOptionError(key, tuple(self._values))
        return self._values[normalized]

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for `key`, or `default` when it is `None`."""
        value = self[key]
        return default if value is None else value

    def is_given(self, key: str) -> bool:
        """Whether the user supplied the option (as opposed to a default)."""
        normalized = normalize_key(key)
        if normalized not in self._values:
            raise UnknownOptionError(key, tuple(self._values))
        return normalized in self._given

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ParsedOptions is read-only.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ParsedOptions is read-only.")

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        values = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"ParsedOptions({values})"
