"""
Cmdline Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_line_parser import CommandLineParser, parse
from .option import Arity, OptionDescriptor
from .parser_types import Status
from .result import (
    ParseResult,
    ResultItem,
    StoreFn,
    check_store,
    store_last_wins,
    store_unique,
)
from .scanner import OptionScanner

__all__ = [
    "Arity",
    "CommandLineParser",
    "OptionDescriptor",
    "OptionScanner",
    "ParseResult",
    "ResultItem",
    "Status",
    "StoreFn",
    "check_store",
    "parse",
    "store_last_wins",
    "store_unique",
]
