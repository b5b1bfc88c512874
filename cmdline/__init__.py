"""
Cmdline Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .identity import ToolIdentity, get_tool_identity, set_tool_identity
from .logger import logger
from .parser import (
    Arity,
    CommandLineParser,
    OptionDescriptor,
    ParseResult,
    ResultItem,
    Status,
    check_store,
    parse,
)
from .show_help import HelpCatalog, show_help_string
from .version import __version__

__all__ = [
    "Arity",
    "CommandLineParser",
    "HelpCatalog",
    "OptionDescriptor",
    "ParseResult",
    "ResultItem",
    "Status",
    "ToolIdentity",
    "__version__",
    "check_store",
    "get_tool_identity",
    "logger",
    "parse",
    "set_tool_identity",
    "show_help_string",
]
