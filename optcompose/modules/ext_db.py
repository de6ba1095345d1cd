# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Extended database options: everything `DBOptions` declares plus `--dbshow`,
which prints how the database options ended up being set.

    $ myapp --dbshow --dbname Emma --dbpasswd vrrr -dbhost 12.13.14.15
    DBNAME: Emma
    DBHOST: 12.13.14.15
    DBPORT: n/a
    DBUSER: n/a
    DBPASS: ...given but not shown
    DBSOCK: n/a
"""
from __future__ import annotations

from typing import Any, Sequence

from optcompose.descriptor import OptionDescriptor, descriptors_from
from optcompose.modules.db import DBOptions
from optcompose.parsed_options import ParsedOptions

OPT_SPEC = (("dbshow", "show database access properties"),)

NOT_AVAILABLE = "n/a"
PASSWORD_GIVEN = "...given but not shown"


def db_settings_report(opts: ParsedOptions) -> list[str]:
    """Lines describing the database settings, with the password redacted."""

    def shown(key: str) -> str:
        value = opts.get(key)
        return NOT_AVAILABLE if value in (None, "") else str(value)

    return [
        f"DBNAME: {shown('dbname')}",
        f"DBHOST: {shown('dbhost')}",
        f"DBPORT: {shown('dbport')}",
        f"DBUSER: {shown('dbuser')}",
        f"DBPASS: {PASSWORD_GIVEN if opts.get('dbpasswd') else NOT_AVAILABLE}",
        f"DBSOCK: {shown('dbsocket')}",
    ]


class ExtDBOptions(DBOptions):
    """`DBOptions` plus `--dbshow`."""

    def get_opt_spec(self) -> list[OptionDescriptor]:
        return [*super().get_opt_spec(), *descriptors_from(OPT_SPEC)]

    def validate_opts(self, app, caller: Any, opts, args: Sequence[str]) -> None:
        if opts.get("dbshow"):
            for line in db_settings_report(opts):
                app.console.print(line, markup=False, highlight=False)
