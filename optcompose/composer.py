# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Composer`, which merges the declarations of several option modules
into one `OptionSpecification`.

Composition walks the modules in the order the caller gives them and appends each
module's `get_opt_spec()` result to one running list. For every descriptor it
records the contributing module and the deepest class in that module's hierarchy
that declared it: each ancestor's `get_opt_spec` is evaluated on the module and
only the tail a level adds on top of its parent is attributed to that level.

A module that extends another one already in the composition (say `DBOptions`
followed by `ExtDBOptions`) brings the parent's declarations along a second time.
Those inherited copies are the very same declarations, so they are merged into
the earlier entry instead of being treated as a clash.

Once everything is merged, every pair of descriptors is checked for a shared name
(primary or alias) or a shared accessor key. A clash is a programming mistake in
how the modules were put together, so it is reported as `DuplicateOptionError`
before any argument is parsed.

Usage:
    spec = Composer().compose([ExtDBOptions(), BasicOptions()])
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from optcompose.descriptor import OptionDescriptor
from optcompose.exceptions import DuplicateOptionError, InvalidModuleError
from optcompose.logger import logger
from optcompose.module import OptionModule
from optcompose.specification import OptionSpecification, Provenance


@dataclass(frozen=True)
class Declaration:
    """One descriptor of a module together with the class that declared it."""

    descriptor: OptionDescriptor
    declared_in: type
    declared_by: str
    inherited: bool
    contributed_by: type

    def same_origin(self, other: Declaration) -> bool:
        """
        Whether both entries are one class's declaration, brought in by two
        different module classes of which one extends the other.
        """
        return (
            self.contributed_by is not other.contributed_by
            and (self.inherited or other.inherited)
            and self.declared_in is other.declared_in
            and self.descriptor == other.descriptor
        )


class Composer:
    """Merges option modules into an `OptionSpecification`."""

    def compose(
        self, modules: Sequence[OptionModule], case_sensitive: bool = True
    ) -> OptionSpecification:
        """
        Merge the declarations of `modules`, in order, into one specification.

        Raises:
            InvalidModuleError: If an entry is not an `OptionModule` or its
                `get_opt_spec` does not extend its parent's declarations.
            DuplicateOptionError: If two descriptors share a name or accessor key.
                With `case_sensitive=False`, names that differ only in case
                count as shared.
        """
        merged: list[Declaration] = []
        provenance: list[Provenance] = []
        for module in modules:
            if not isinstance(module, OptionModule):
                raise InvalidModuleError(
                    f"Cannot compose {module!r}: it is not an OptionModule instance."
                )
            for declaration in self.declarations(module):
                if any(declaration.same_origin(earlier) for earlier in merged):
                    logger.debug(
                        "Option '%s' of %s is already composed.",
                        declaration.descriptor,
                        declaration.declared_by,
                    )
                    continue
                merged.append(declaration)
                provenance.append(
                    Provenance(module=module, declared_by=declaration.declared_by)
                )
            logger.debug(
                "Composed module '%s' (%d options so far).", module.name, len(merged)
            )

        descriptors = [declaration.descriptor for declaration in merged]
        check_for_duplicates(descriptors, provenance, case_sensitive=case_sensitive)
        return OptionSpecification(
            descriptors=tuple(descriptors),
            provenance=tuple(provenance),
            modules=tuple(modules),
        )

    def declarations(self, module: OptionModule) -> list[Declaration]:
        """
        Return `module.get_opt_spec()` with the class that declared each entry.

        Raises:
            InvalidModuleError: If a level reorders or drops its parent's
                descriptors, or returns something that is not a descriptor.
        """
        result: list[Declaration] = []
        previous: list[OptionDescriptor] = []
        for level in _spec_levels(type(module)):
            current = list(level.get_opt_spec(module))
            for descriptor in current:
                if not isinstance(descriptor, OptionDescriptor):
                    raise InvalidModuleError(
                        f"{level.__name__}.get_opt_spec returned {descriptor!r}, "
                        "expected OptionDescriptor objects."
                    )
            if current[: len(previous)] != previous:
                raise InvalidModuleError(
                    f"{level.__name__}.get_opt_spec must start with the options "
                    "declared by its parent module."
                )
            for descriptor in current[len(previous) :]:
                result.append(
                    Declaration(
                        descriptor=descriptor,
                        declared_in=level,
                        declared_by=_declared_name(level, module),
                        inherited=level is not type(module),
                        contributed_by=type(module),
                    )
                )
            previous = current
        return result


def _spec_levels(module_type: type) -> list[type]:
    """Classes from the root down that define their own `get_opt_spec`."""
    return [
        cls
        for cls in reversed(module_type.__mro__)
        if issubclass(cls, OptionModule) and "get_opt_spec" in vars(cls)
    ]


def _declared_name(level: type, module: OptionModule) -> str:
    if level is type(module):
        return module.name
    return level.__name__


def check_for_duplicates(
    descriptors: Sequence[OptionDescriptor],
    provenance: Sequence[Provenance] | None = None,
    case_sensitive: bool = True,
) -> None:
    """
    Reject descriptors that share a name (primary or alias) or an accessor key.

    Every pair is compared; the first clash found, in declaration order, is
    reported with both identifiers and, when known, both owning modules. When the
    parser folds case, names are compared lower-cased.

    Raises:
        DuplicateOptionError: On the first clash.
    """
    for index, first in enumerate(descriptors):
        for offset, second in enumerate(descriptors[index + 1 :], start=index + 1):
            shared = _clash(first, second, case_sensitive)
            if shared is None:
                continue
            first_module = second_module = ""
            if provenance is not None:
                first_module = provenance[index].module_name
                second_module = provenance[offset].module_name
            logger.debug(
                "Duplicate option '%s': '%s' (%s) / '%s' (%s).",
                shared,
                first,
                first_module,
                second,
                second_module,
            )
            raise DuplicateOptionError(
                str(first), str(second), first_module, second_module, name=shared
            )


def _clash(
    first: OptionDescriptor, second: OptionDescriptor, case_sensitive: bool = True
) -> str | None:
    fold = (lambda name: name) if case_sensitive else str.lower
    other_names = {fold(name) for name in second.names}
    for name in first.names:
        if fold(name) in other_names:
            return fold(name)
    if first.key == second.key:
        return first.key
    return None
