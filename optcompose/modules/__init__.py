"""
Optcompose CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .basic import BasicOptions
from .db import DBOptions
from .ext_db import ExtDBOptions

__all__ = [
    "BasicOptions",
    "DBOptions",
    "ExtDBOptions",
]
