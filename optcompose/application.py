# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Application`, which composes option modules, parses arguments against
the merged specification and runs every module's validation hook.

An application moves through four states during one invocation:

    unconfigured → configured → parsed → validated

- `configure()` composes the modules (and the application's own options) into an
  `OptionSpecification`. A `DuplicateOptionError` stops it right there.
- `parse()` hands the specification, the raw arguments and the `ParserConfig`
  to the parsing adapter. A `ParseError` leaves the application `configured`.
- `validate()` calls each module's `validate_opts` in composition order with the
  same parsed options and leftover arguments. The first `ValidationError` stops
  the chain; later modules are not consulted.
- `run()` does all three, configuring only if needed.

`main()` is the process-level error boundary: it renders errors and usage text on
the console and returns an exit code instead of raising.

Example:
    app = Application(
        program="myapp",
        usage="%c %o <file>",
        opt_spec=[("check|c", "only check the configuration")],
        modules=[ExtDBOptions(), BasicOptions()],
    )
    opts, args = app.run(["--dbshow", "--dbname", "Emma"])

One instance serves one invocation at a time; `reset()` (or `configure()`)
starts over.
"""
from __future__ import annotations

import sys
from typing import Any, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from optcompose.app_state import AppState
from optcompose.argparse_adapter import ArgparseAdapter
from optcompose.composer import Composer
from optcompose.console import console, err_console
from optcompose.context import ValidationContext
from optcompose.debug import register_debug_hooks
from optcompose.exceptions import (
    OptcomposeError,
    ParseError,
    StateError,
    ValidationError,
)
from optcompose.hook_manager import HookManager, HookType
from optcompose.logger import logger
from optcompose.module import InlineModule, OptionModule, Validator
from optcompose.parsed_options import ParsedOptions
from optcompose.parser_config import ParserConfig
from optcompose.protocols import ParsingAdapter
from optcompose.signals import FlowSignal, HelpSignal, VersionSignal
from optcompose.specification import OptionSpecification
from optcompose.utils import get_program_invocation


class Application:
    """
    Orchestrates composition, parsing and the validation chain.

    Args:
        program (str | None): Program name for usage text (`%c`).
        version (str): Version reported by modules that print it.
        usage (str): One-line usage description; `%c` is replaced by the program
            name and `%o` by `[options]`.
        modules (Sequence[OptionModule] | None): Modules composed by `run()`
            when the application is not configured yet.
        opt_spec (Sequence[Any] | None): The application's own declarations;
            composed first, ahead of `modules`.
        validator (Callable | None): Validation hook for `opt_spec`.
        parser_config (ParserConfig | None): Passed unmodified to the adapter.
        adapter (ParsingAdapter | None): Tokenizer; `ArgparseAdapter` by default.
        caller (Any): Object passed to hooks as `caller`; the application itself
            by default.
        debug_hooks (bool): Attach logging hooks to the validation chain.
    """

    def __init__(
        self,
        program: str | None = None,
        version: str = "",
        usage: str = "",
        modules: Sequence[OptionModule] | None = None,
        opt_spec: Sequence[Any] | None = None,
        validator: Validator | None = None,
        parser_config: ParserConfig | None = None,
        adapter: ParsingAdapter | None = None,
        caller: Any = None,
        debug_hooks: bool = False,
    ) -> None:
        self.program: str = program or get_program_invocation()
        self.version: str = version
        self.console: Console = console
        self.err_console: Console = err_console
        self.composer: Composer = Composer()
        self.adapter: ParsingAdapter = adapter or ArgparseAdapter()
        if not isinstance(self.adapter, ParsingAdapter):
            raise OptcomposeError("adapter must implement the ParsingAdapter protocol.")
        self.caller: Any = self if caller is None else caller
        self.hooks: HookManager = HookManager()
        if debug_hooks:
            register_debug_hooks(self.hooks)

        self._modules: tuple[OptionModule, ...] = tuple(modules or ())
        self._opt_spec: tuple[Any, ...] = tuple(opt_spec or ())
        self._validator: Validator | None = validator
        self._usage: str = usage
        self._parser_config: ParserConfig | None = parser_config
        self.reset()

    def reset(self) -> None:
        """Forget the configuration and results; back to `unconfigured`."""
        self.state: AppState = AppState.UNCONFIGURED
        self.spec: OptionSpecification | None = None
        self.usage: str = self._usage
        self.parser_config: ParserConfig = self._parser_config or ParserConfig(
            prog=self.program
        )
        self._clear_results()

    def _clear_results(self) -> None:
        self.opts: ParsedOptions | None = None
        self.args: tuple[str, ...] = ()

    def configure(
        self,
        modules: Sequence[OptionModule] | None = None,
        usage: str | None = None,
        parser_config: ParserConfig | None = None,
        opt_spec: Sequence[Any] | None = None,
        validator: Validator | None = None,
    ) -> OptionSpecification:
        """
        Compose the option specification; moves to `configured`.

        Arguments left as `None` fall back to what the application was
        constructed with. Calling this again starts a fresh cycle.

        Raises:
            DuplicateOptionError: If two descriptors share a name or key, or,
                when the parser configuration ignores case, names that differ
                only in case.
            InvalidModuleError: If a module is malformed.
        """
        self.reset()
        own = self._opt_spec if opt_spec is None else tuple(opt_spec)
        own_validator = self._validator if validator is None else validator
        chain: list[OptionModule] = []
        if own or own_validator is not None:
            chain.append(InlineModule(own, own_validator, name=self.program))
        chain.extend(self._modules if modules is None else modules)
        config = self.parser_config if parser_config is None else parser_config

        spec = self.composer.compose(chain, case_sensitive=config.case_sensitive)

        self.spec = spec
        self.parser_config = config
        if usage is not None:
            self.usage = usage
        self.state = AppState.CONFIGURED
        logger.debug(
            "Configured '%s' with modules %s.",
            self.program,
            [module.name for module in spec.modules],
        )
        return spec

    def parse(self, raw_args: Sequence[str] | None = None) -> ParsedOptions:
        """
        Parse `raw_args` (default: `sys.argv[1:]`); moves to `parsed`.

        Raises:
            StateError: If the application is not configured.
            ParseError: If the adapter rejects the arguments; the application
                stays `configured`.
        """
        if self.state is AppState.UNCONFIGURED or self.spec is None:
            raise StateError("Application must be configured before parsing.")
        self._clear_results()
        self.state = AppState.CONFIGURED
        if raw_args is None:
            raw_args = sys.argv[1:]

        try:
            opts, args = self.adapter.parse(self.spec, list(raw_args), self.parser_config)
        except ParseError as error:
            logger.debug("Parsing failed: %s", error)
            raise

        self.opts = opts
        self.args = tuple(args)
        self.state = AppState.PARSED
        logger.debug("Parsed %r with leftover arguments %r.", opts, self.args)
        return opts

    def validate(self) -> None:
        """
        Run every module's `validate_opts` in composition order.

        All modules see the same parsed options and leftover arguments. The first
        failure ends the chain.

        Raises:
            StateError: If nothing has been parsed yet.
            ValidationError: From the first module that rejects the options,
                with `module` set to that module.
        """
        if self.state not in (AppState.PARSED, AppState.VALIDATED):
            raise StateError("Arguments must be parsed before they are validated.")
        assert self.spec is not None and self.opts is not None
        self.state = AppState.PARSED

        for index, module in enumerate(self.spec.modules):
            context = ValidationContext(name=module.name, module=module, index=index)
            context.start_timer()
            try:
                self.hooks.trigger(HookType.BEFORE, context)
                module.validate_opts(self, self.caller, self.opts, self.args)
                self.hooks.trigger(HookType.ON_SUCCESS, context)
            except ValidationError as error:
                if error.module is None:
                    error.module = module
                context.exception = error
                self.hooks.trigger(HookType.ON_ERROR, context)
                raise
            except Exception as error:
                context.exception = error
                self.hooks.trigger(HookType.ON_ERROR, context)
                raise
            except FlowSignal as signal:
                context.exception = signal
                raise
            finally:
                context.stop_timer()
                self.hooks.trigger(HookType.AFTER, context)

        self.state = AppState.VALIDATED

    def run(
        self, raw_args: Sequence[str] | None = None
    ) -> tuple[ParsedOptions, tuple[str, ...]]:
        """Configure if needed, parse and validate; return options and leftovers."""
        if self.state is AppState.UNCONFIGURED:
            self.configure()
        opts = self.parse(raw_args)
        self.validate()
        return opts, self.args

    def usage_error(self, message: str, module: Any = None) -> NoReturn:
        """Reject the options with `message`, attaching the usage text."""
        raise ValidationError(message, module=module, usage=self.usage_text())

    def usage_line(self) -> str:
        description = self.usage or "%c %o"
        return description.replace("%c", self.program).replace("%o", "[options]")

    def usage_text(self) -> str:
        """Usage line followed by one line per visible option."""
        lines = [self.usage_line()]
        if self.spec is None:
            return lines[0]
        visible = [descriptor for descriptor in self.spec if not descriptor.hidden]
        flags = [descriptor.usage_flags() for descriptor in visible]
        width = max((len(flag) for flag in flags), default=0)
        for flag, descriptor in zip(flags, visible):
            lines.append(f"    {flag:<{width}}  {descriptor.description}".rstrip())
        return "\n".join(lines)

    def render_usage(self) -> None:
        self.console.print(escape(self.usage_text()), highlight=False)

    def main(self, raw_args: Sequence[str] | None = None) -> int:
        """
        Run the application and translate the outcome into an exit code.

        Returns:
            0 on success, help or version output; 1 when the arguments are
            rejected (ParseError, ValidationError); 2 on configuration mistakes
            (DuplicateOptionError and other framework errors); 130 on Ctrl+C.
        """
        try:
            self.run(raw_args)
        except HelpSignal as signal:
            self.console.print(escape(signal.text), highlight=False)
            return 0
        except VersionSignal as signal:
            self.console.print(escape(signal.text), highlight=False)
            return 0
        except (ParseError, ValidationError) as error:
            where = ""
            if isinstance(error, ValidationError) and error.module_name:
                where = f"[{error.module_name}] "
            self.err_console.print(f"[bold red]Error:[/] {escape(where + str(error))}")
            usage = getattr(error, "usage", "") or self.usage_text()
            self.err_console.print(f"Usage: {escape(usage)}", highlight=False)
            return 1
        except OptcomposeError as error:
            logger.error("Configuration error in '%s': %s", self.program, error)
            self.err_console.print(f"[bold red]Configuration error:[/] {escape(str(error))}")
            return 2
        except KeyboardInterrupt:
            self.err_console.print("\n[yellow]Aborted by user.[/]")
            return 130
        return 0

    def exit(self, raw_args: Sequence[str] | None = None) -> NoReturn:
        """Run `main()` and exit the process with its code."""
        sys.exit(self.main(raw_args))

    def __repr__(self) -> str:
        return f"<Application '{self.program}' state={self.state.value}>"
