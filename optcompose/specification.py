# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionSpecification`, the merged, ordered set of option descriptors
produced by composing option modules, and `Provenance`, which records where each
descriptor came from.

A specification is read-only. It is what parsing adapters consume, what usage
text is rendered from, and, through `modules`, the order in which validation
hooks run.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from optcompose.descriptor import OptionDescriptor
from optcompose.exceptions import UnknownOptionError
from optcompose.module import OptionModule
from optcompose.utils import normalize_key


@dataclass(frozen=True)
class Provenance:
    """Which module contributed a descriptor and which class declared it."""

    module: OptionModule
    declared_by: str

    @property
    def module_name(self) -> str:
        return self.module.name


@dataclass(frozen=True)
class OptionSpecification:
    """
    Ordered descriptors plus their provenance and the contributing modules.

    Attributes:
        descriptors (tuple[OptionDescriptor, ...]): Merged descriptors in order.
        provenance (tuple[Provenance, ...]): One entry per descriptor.
        modules (tuple[OptionModule, ...]): Contributing modules in composition
            order (the validation chain).
    """

    descriptors: tuple[OptionDescriptor, ...] = ()
    provenance: tuple[Provenance, ...] = ()
    modules: tuple[OptionModule, ...] = ()

    def __post_init__(self) -> None:
        if len(self.descriptors) != len(self.provenance):
            raise ValueError("Every descriptor needs exactly one provenance entry.")

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self.keys()

    def keys(self) -> tuple[str, ...]:
        return tuple(descriptor.key for descriptor in self.descriptors)

    def names(self) -> tuple[str, ...]:
        """All names (primary and aliases) in declaration order."""
        return tuple(name for descriptor in self.descriptors for name in descriptor.names)

    def get(self, key: str) -> OptionDescriptor:
        """Return the descriptor for an accessor key or any of its names."""
        return self.descriptors[self._index(key)]

    def owner_of(self, key: str) -> Provenance:
        """Return the provenance of the descriptor behind `key`."""
        return self.provenance[self._index(key)]

    def descriptors_of(self, module: OptionModule) -> tuple[OptionDescriptor, ...]:
        """Descriptors contributed by `module`."""
        return tuple(
            descriptor
            for descriptor, origin in zip(self.descriptors, self.provenance)
            if origin.module is module
        )

    def _index(self, key: str) -> int:
        wanted = normalize_key(key)
        for index, descriptor in enumerate(self.descriptors):
            if descriptor.key == wanted or key.lstrip("-") in descriptor.names:
                return index
        raise UnknownOptionError(key, self.keys())

    def __str__(self) -> str:
        lines = ["<OptionSpecification>"]
        for descriptor, origin in zip(self.descriptors, self.provenance):
            lines.append(f"  {descriptor} ({origin.declared_by})")
        return "\n".join(lines)
