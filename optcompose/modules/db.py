# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Database access options.

    --dbname NAME      database name
    --dbhost HOST      hostname
    --dbport PORT      port number
    --dbuser USER      user name
    --dbpasswd PASSWD  password
    --dbsocket SOCKET  socket

The module only declares the options; it accepts whatever was given. Extend it
(see `ExtDBOptions`) to act on them.
"""
from __future__ import annotations

from optcompose.descriptor import OptionDescriptor, descriptors_from
from optcompose.module import OptionModule

OPT_SPEC = (
    ("dbname=s", "database name"),
    ("dbhost=s", "hostname"),
    ("dbport=s", "port number"),
    ("dbuser=s", "user name"),
    ("dbpasswd=s", "password"),
    ("dbsocket=s", "socket"),
)


class DBOptions(OptionModule):
    """Declares the basic database-related options."""

    def get_opt_spec(self) -> list[OptionDescriptor]:
        return [*super().get_opt_spec(), *descriptors_from(OPT_SPEC)]
