"""
Cmdline Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from cmdline.config import loader
from cmdline.console import console
from cmdline.identity import ToolIdentity
from cmdline.parser import (
    Arity,
    CommandLineParser,
    OptionDescriptor,
    ParseResult,
    Status,
)
from cmdline.utils import get_program_basename, setup_logging

DEMO_SHORTS = "h::Vvn:x::"

DEMO_OPTIONS = [
    OptionDescriptor("help", Arity.OPTIONAL, "h"),
    OptionDescriptor("version", Arity.NONE, "V"),
    OptionDescriptor("verbose", Arity.NONE, "v"),
    OptionDescriptor("np", Arity.REQUIRED, "n"),
    OptionDescriptor("map-by", Arity.REQUIRED),
    OptionDescriptor("display", Arity.OPTIONAL, "x"),
    OptionDescriptor("output-filename", Arity.REQUIRED),
    OptionDescriptor("pmixmca", Arity.REQUIRED),
    OptionDescriptor("prtemca", Arity.REQUIRED),
]


def find_cmdline_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdline.yaml",
        Path.cwd() / "cmdline.toml",
        Path.cwd() / ".cmdline.yaml",
        Path.cwd() / ".cmdline.toml",
        Path(os.environ.get("CMDLINE_CONFIG", "cmdline.yaml")),
        Path.home() / ".config" / "cmdline" / "cmdline.yaml",
        Path.home() / ".config" / "cmdline" / "cmdline.toml",
        Path.home() / ".cmdline.yaml",
        Path.home() / ".cmdline.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def get_demo_parser() -> CommandLineParser:
    identity = ToolIdentity(basename=get_program_basename(), product="cmdline demo")
    return CommandLineParser(
        DEMO_SHORTS, DEMO_OPTIONS, help_file="help-cmdline.txt", identity=identity
    )


def render_result(result: ParseResult, parser: CommandLineParser) -> None:
    table = Table(title="Parsed options", box=box.SIMPLE)
    table.add_column("Option", style="bold")
    table.add_column("Flags")
    table.add_column("Values")
    for item in result:
        option = parser.get_option(item.key)
        flags = ""
        if option is not None:
            flags = " ".join([", ".join(option.flags), option.get_choice_text()]).strip()
        table.add_row(
            escape(item.key),
            escape(flags),
            escape(", ".join(item.values)) or "(set)",
        )
    console.print(table)
    if result.tail:
        tail = escape(" ".join(result.tail))
        console.print(f"[bold]tail:[/bold] {tail}", highlight=False)


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(console_log_level=logging.WARNING)
    config_path = find_cmdline_config()
    parser = loader(config_path) if config_path else get_demo_parser()

    result = ParseResult()
    status = parser.parse(list(argv) if argv is not None else sys.argv, result)
    if status == Status.ERR_SILENT:
        return 1
    render_result(result, parser)
    return 0


if __name__ == "__main__":
    sys.exit(main())
