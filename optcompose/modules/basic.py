# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Basic options almost every command-line application wants: a short usage
message and the program version.

    -h             display a short usage message
    -v, --version  display a version

Both stop the invocation through a flow signal; the application's error boundary
prints the text and exits with status 0.
"""
from __future__ import annotations

from typing import Any, Sequence

from optcompose.descriptor import OptionDescriptor, descriptors_from
from optcompose.module import OptionModule
from optcompose.signals import HelpSignal, VersionSignal

OPT_SPEC = (
    ("h", "display a short usage message"),
    ("version|v", "display a version"),
)


class BasicOptions(OptionModule):
    """Adds `-h` and `--version`/`-v`."""

    def get_opt_spec(self) -> list[OptionDescriptor]:
        return [*super().get_opt_spec(), *descriptors_from(OPT_SPEC)]

    def validate_opts(self, app, caller: Any, opts, args: Sequence[str]) -> None:
        if opts.get("h"):
            raise HelpSignal(app.usage_text())
        if opts.get("version"):
            version = app.version or "unknown version"
            raise VersionSignal(f"{app.program} {version}")
