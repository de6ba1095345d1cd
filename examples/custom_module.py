from typing import Any, Sequence

from optcompose import Application, OptionModule, ParserConfig, descriptors_from
from optcompose.debug import register_debug_hooks
from optcompose.modules import BasicOptions
from optcompose.utils import setup_logging

setup_logging()


class OutputOptions(OptionModule):
    """Where and how to write results."""

    def get_opt_spec(self):
        return [
            *super().get_opt_spec(),
            *descriptors_from(
                [
                    ("output|o=s", "output file", {"required": True}),
                    ("format=s", "output format", {"choices": ["json", "csv"]}),
                    ("verbose+", "more output (repeatable)"),
                ]
            ),
        ]

    def validate_opts(self, app: Application, caller: Any, opts, args: Sequence[str]):
        if opts.get("format") == "csv" and not opts.get("output").endswith(".csv"):
            app.usage_error("CSV output needs a .csv file name.")


app = Application(
    program="custom",
    usage="%c %o <input>...",
    modules=[OutputOptions(), BasicOptions()],
    parser_config=ParserConfig.from_getopt(["bundling"], prog="custom"),
)
register_debug_hooks(app.hooks)

# Try: python examples/custom_module.py -o out.csv --format csv data.txt
if __name__ == "__main__":
    app.exit()
