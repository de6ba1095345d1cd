"""
Optcompose CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
from typing import Any, Sequence

from optcompose.application import Application
from optcompose.console import console
from optcompose.modules import BasicOptions, ExtDBOptions
from optcompose.utils import setup_logging
from optcompose.version import __version__

OPT_SPEC = (("check|c", "only check the configuration"),)


def no_arguments(app: Application, caller: Any, opts, args: Sequence[str]) -> None:
    if args:
        app.usage_error("No arguments allowed, only options.")


def build_app() -> Application:
    return Application(
        program="optcompose",
        version=__version__,
        usage="%c %o",
        opt_spec=OPT_SPEC,
        validator=no_arguments,
        modules=[ExtDBOptions(), BasicOptions()],
    )


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(console_log_level=logging.WARNING)
    app = build_app()
    code = app.main(argv)
    if code == 0 and app.opts is not None and app.opts.get("check"):
        console.print("Configuration OK.")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
