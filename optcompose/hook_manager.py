# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lifecycle hooks around the validation chain of an `Application`.

Every option module's `validate_opts` call is bracketed by four phases:

    before → (on_success | on_error) → after

A hook is any callable taking the `ValidationContext` of that call. Hooks observe;
they cannot veto or rescue a module's verdict. A hook that raises is logged and
the remaining hooks of the phase still run, with one exception: when an
`on_error` hook fails, the module's own exception is re-raised so that it is not
masked by the hook's.

Usage:
    app.hooks.register("before", lambda ctx: print("validating", ctx.name))
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

from optcompose.context import ValidationContext
from optcompose.logger import logger

Hook = Callable[[ValidationContext], None]

_HOOK_ALIASES = {
    "success": "on_success",
    "error": "on_error",
    "failure": "on_error",
}


class HookType(Enum):
    """
    Phases of one module's validation.

    Accepts `"success"` for `on_success` and `"error"`/`"failure"` for `on_error`.
    """

    BEFORE = "before"
    ON_SUCCESS = "on_success"
    ON_ERROR = "on_error"
    AFTER = "after"

    @classmethod
    def _missing_(cls, value: object) -> HookType:
        if isinstance(value, str):
            wanted = value.strip().lower()
            wanted = _HOOK_ALIASES.get(wanted, wanted)
            for member in cls:
                if member.value == wanted:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown hook type {value!r}. Expected one of: {valid}")

    def __str__(self) -> str:
        return self.value


class HookManager:
    """Keeps the hooks registered for each `HookType`, in registration order."""

    def __init__(self) -> None:
        self._hooks: dict[HookType, list[Hook]] = {phase: [] for phase in HookType}

    def register(self, hook_type: HookType | str, hook: Hook) -> None:
        """
        Add `hook` to a phase.

        Raises:
            ValueError: If `hook_type` names no phase.
            TypeError: If `hook` is not callable.
        """
        phase = HookType(hook_type)
        if not callable(hook):
            raise TypeError(f"Hook for '{phase}' must be callable, got {hook!r}")
        self._hooks[phase].append(hook)

    def hooks_for(self, hook_type: HookType | str) -> tuple[Hook, ...]:
        return tuple(self._hooks[HookType(hook_type)])

    def clear(self, hook_type: HookType | str | None = None) -> None:
        """Drop the hooks of one phase, or of every phase."""
        phases = list(HookType) if hook_type is None else [HookType(hook_type)]
        for phase in phases:
            self._hooks[phase] = []

    def trigger(self, hook_type: HookType, context: ValidationContext) -> None:
        """
        Call every hook of `hook_type` with `context`.

        Raises:
            Exception: `context.exception`, when an `on_error` hook fails.
        """
        for hook in self._hooks[hook_type]:
            try:
                hook(context)
            except Exception as hook_error:
                logger.warning(
                    "Hook %s failed during '%s' of '%s': %s",
                    getattr(hook, "__name__", repr(hook)),
                    hook_type,
                    context.name,
                    hook_error,
                )
                if hook_type is HookType.ON_ERROR and context.exception is not None:
                    raise context.exception from hook_error

    def __str__(self) -> str:
        lines = ["<HookManager>"]
        for phase, hooks in self._hooks.items():
            names = ", ".join(getattr(h, "__name__", repr(h)) for h in hooks)
            lines.append(f"  {phase.value}: {names or '—'}")
        return "\n".join(lines)
