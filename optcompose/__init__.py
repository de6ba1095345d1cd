"""
Optcompose CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app_state import AppState
from .application import Application
from .argparse_adapter import ArgparseAdapter
from .composer import Composer, check_for_duplicates
from .descriptor import OptionDescriptor, descriptor_from, descriptors_from
from .exceptions import (
    DuplicateOptionError,
    OptcomposeError,
    ParseError,
    UnknownOptionError,
    ValidationError,
)
from .hook_manager import HookManager, HookType
from .module import InlineModule, OptionModule
from .option_action import OptionAction
from .parsed_options import ParsedOptions
from .parser_config import ParserConfig
from .protocols import ParsingAdapter
from .specification import OptionSpecification, Provenance
from .version import __version__

logger = logging.getLogger("optcompose")


__all__ = [
    "Application",
    "AppState",
    "ArgparseAdapter",
    "Composer",
    "check_for_duplicates",
    "DuplicateOptionError",
    "HookManager",
    "HookType",
    "InlineModule",
    "OptcomposeError",
    "OptionAction",
    "OptionDescriptor",
    "OptionModule",
    "OptionSpecification",
    "ParsedOptions",
    "ParseError",
    "ParserConfig",
    "ParsingAdapter",
    "Provenance",
    "UnknownOptionError",
    "ValidationError",
    "descriptor_from",
    "descriptors_from",
    "__version__",
]
