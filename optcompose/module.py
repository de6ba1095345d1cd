# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionModule`, the role-like unit that contributes options to an
application, and `InlineModule`, which turns an application's own declarations
into a module.

An option module offers two capabilities:

- `get_opt_spec()`: the ordered list of `OptionDescriptor` objects it declares.
- `validate_opts(app, caller, opts, args)`: a post-parse check run after the
  arguments were parsed. Raise `ValidationError` (or call `app.usage_error()`)
  to reject them. The default does nothing.

A module extends another by subclassing it and explicitly appending to the
parent's declarations:

    class ExtDBOptions(DBOptions):
        def get_opt_spec(self):
            return [*super().get_opt_spec(), *descriptors_from(OPT_SPEC)]

The parent's descriptors always come first. The composer relies on that when it
works out which class in the hierarchy declared each descriptor.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Sequence

from optcompose.descriptor import OptionDescriptor, descriptors_from

if TYPE_CHECKING:
    from optcompose.application import Application
    from optcompose.parsed_options import ParsedOptions


class OptionModule:
    """
    Base class for option modules.

    Subclasses override `get_opt_spec()` (calling `super().get_opt_spec()` first)
    and optionally `validate_opts()`. Modules hold no per-invocation state, so
    one instance can take part in any number of compositions.
    """

    name: str = ""

    def __init__(self, name: str | None = None) -> None:
        if name:
            self.name = name
        elif not self.name:
            self.name = type(self).__name__

    def get_opt_spec(self) -> list[OptionDescriptor]:
        """Return the descriptors declared by this module, parents first."""
        return []

    def validate_opts(
        self,
        app: Application,
        caller: Any,
        opts: ParsedOptions,
        args: Sequence[str],
    ) -> None:
        """Check the parsed options. Raise `ValidationError` to reject them."""
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.name}'>"


Validator = Callable[["Application", Any, "ParsedOptions", Sequence[str]], None]


class InlineModule(OptionModule):
    """
    An option module assembled from plain declarations.

    Used for the options an application declares itself, next to the modules it
    is composed of.

    Args:
        opt_spec (Sequence[Any]): Descriptors, spec strings or
            `(spec, description[, metadata])` tuples.
        validator (Callable | None): Optional validation hook with the
            `validate_opts` signature.
        name (str): Name used in errors and logs.
    """

    def __init__(
        self,
        opt_spec: Sequence[Any],
        validator: Validator | None = None,
        name: str = "InlineModule",
    ) -> None:
        super().__init__(name)
        self._descriptors: tuple[OptionDescriptor, ...] = tuple(
            descriptors_from(opt_spec)
        )
        if validator is not None and not callable(validator):
            raise TypeError("validator must be callable")
        self._validator = validator

    def get_opt_spec(self) -> list[OptionDescriptor]:
        return [*super().get_opt_spec(), *self._descriptors]

    def validate_opts(
        self,
        app: Application,
        caller: Any,
        opts: ParsedOptions,
        args: Sequence[str],
    ) -> None:
        if self._validator is not None:
            self._validator(app, caller, opts, args)
