# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""debug.py"""
from optcompose.context import ValidationContext
from optcompose.hook_manager import HookManager, HookType
from optcompose.logger import logger


def log_before(context: ValidationContext):
    """Log the start of a module's validation."""
    logger.info("[%s] Validating (position %d)", context.name, context.index)


def log_success(context: ValidationContext):
    """Log a module accepting the options."""
    logger.debug("[%s] Options accepted", context.name)


def log_after(context: ValidationContext):
    """Log the end of a module's validation, regardless of the outcome."""
    logger.debug("Validated %s", context.to_log_line())


def log_error(context: ValidationContext):
    """Log a module rejecting the options."""
    logger.error(
        "[%s] Rejected (%s): %s",
        context.name,
        type(context.exception).__name__,
        context.exception,
    )


def register_debug_hooks(hooks: HookManager):
    hooks.register(HookType.BEFORE, log_before)
    hooks.register(HookType.AFTER, log_after)
    hooks.register(HookType.ON_SUCCESS, log_success)
    hooks.register(HookType.ON_ERROR, log_error)
