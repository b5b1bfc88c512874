# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, the option parsing engine.

It drives an `OptionScanner` over a copy of the command line and turns every
match into a `(key, value)` pair for a store callback, with three special
cases folded into the same loop:

- Help requests: `-h`/`--help` with or without a following option name, and
  any option whose argument is a help literal (`--np help`), render the
  matching help topic and stop parsing.
- Version requests: `-V`/`--version` render the version topic and stop.
- MCA options: a long option whose name ends in `mca` consumes two tokens and
  stores them as one `name=value` string (`--prtemca foo bar` → `foo=bar`).

Help, version and diagnostics for bad options are printed to standard output
and reported as `Status.ERR_SILENT`; the caller should exit non-zero without
printing anything else. Everything else ends in `Status.SUCCESS`, with the
positional arguments left in `ParseResult.tail`.

Example Usage:
    options = [
        OptionDescriptor("help", Arity.OPTIONAL, "h"),
        OptionDescriptor("version", Arity.NONE, "V"),
        OptionDescriptor("np", Arity.REQUIRED, "n"),
        OptionDescriptor("prtemca", Arity.REQUIRED),
    ]
    parser = CommandLineParser("h::Vn:", options, help_file="help-prun.txt")
    result = ParseResult()
    status = parser.parse(["prun", "-n", "4", "--prtemca", "a", "b", "hostname"], result)

    # status == Status.SUCCESS
    # result.to_dict() == {"np": ["4"], "prtemca": ["a=b"]}
    # result.tail == ["hostname"]
"""
from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Sequence

from rich.console import Console

from cmdline.console import console as default_console
from cmdline.identity import ToolIdentity, get_tool_identity
from cmdline.logger import logger
from cmdline.parser.option import (
    Arity,
    OptionDescriptor,
    short_arity,
    validate_option_table,
)
from cmdline.parser.parser_types import Status
from cmdline.parser.result import ParseResult, StoreFn, check_store
from cmdline.parser.scanner import MISSING_ARGUMENT, UNKNOWN, OptionScanner
from cmdline.parser.utils import copy_strip, is_help_request, strip_dashes
from cmdline.show_help import CLI_HELP_FILE, HelpCatalog, get_catalog
from cmdline.signals import HelpSignal


class CommandLineParser:
    """
    Option parsing engine for one tool's option grammar.

    The grammar is the short option spec plus the long option table. A parser
    holds no state between calls to `parse()`; each call scans with a fresh
    cursor, so one parser can be reused for any number of command lines.

    Args:
        shorts (str): Short option spec (`"h::Vn:x::"`).
        long_options (Sequence[OptionDescriptor]): Long option table.
        help_file (str | Path): Help file holding `usage`, `version` and one
            topic per option.
        store (StoreFn | None): Store callback, `check_store` by default.
        identity (ToolIdentity | None): Names substituted into help text.
            Defaults to the process-wide identity at parse time.
        catalog (HelpCatalog | None): Where help files are looked up.
        console (Console | None): Where help text is printed.
    """

    def __init__(
        self,
        shorts: str,
        long_options: Sequence[OptionDescriptor],
        help_file: str | Path,
        store: StoreFn | None = None,
        identity: ToolIdentity | None = None,
        catalog: HelpCatalog | None = None,
        console: Console | None = None,
    ) -> None:
        validate_option_table(shorts, long_options)
        self.shorts: str = shorts
        self.long_options: tuple[OptionDescriptor, ...] = tuple(long_options)
        self.help_file: str | Path = help_file
        self.store: StoreFn = store or check_store
        self._identity: ToolIdentity | None = identity
        self.catalog: HelpCatalog = catalog or get_catalog()
        self.console: Console = console or default_console

    @property
    def identity(self) -> ToolIdentity:
        return self._identity or get_tool_identity()

    def get_option(self, name: str) -> OptionDescriptor | None:
        for option in self.long_options:
            if option.name == name:
                return option
        return None

    def get_option_by_short(self, code: str) -> OptionDescriptor | None:
        for option in self.long_options:
            if option.short == code:
                return option
        return None

    def parse(self, argv: Sequence[str], result: ParseResult) -> Status:
        """
        Parse `argv` (program name first) into `result`.

        Args:
            argv (Sequence[str]): The command line; left untouched.
            result (ParseResult): Receives options through the store callback
                and, on success, the tail of positional arguments.

        Returns:
            Status: `SUCCESS`, or `ERR_SILENT` once help or a diagnostic has
            been printed.
        """
        args = copy_strip(argv)
        scanner = OptionScanner(args, self.shorts, self.long_options)
        try:
            for match in scanner:
                logger.debug("Matched %r at argument %s", match, scanner.token_index)
                if isinstance(match, int):
                    self._handle_long(self.long_options[match], scanner, result)
                elif match == "h":
                    self._handle_help_request(scanner)
                elif match == "V":
                    identity = self.identity
                    self._render(
                        self.help_file,
                        "version",
                        False,
                        identity.basename,
                        identity.product,
                        identity.version,
                        identity.bugreport,
                    )
                else:
                    self._handle_short(match, scanner, result)
        except HelpSignal as signal:
            logger.debug("Parsing stopped after rendering [%s]", signal.topic)
            return Status.ERR_SILENT

        if scanner.optind < scanner.argc:
            result.tail = scanner.argv[scanner.optind :]
        return Status.SUCCESS

    def _render(
        self,
        filename: str | Path,
        topic: str,
        want_error_header: bool,
        *substitutions: str,
    ) -> NoReturn:
        """Print a help topic and stop parsing."""
        text = self.catalog.show_help_string(
            filename, topic, want_error_header, *substitutions
        )
        if text is not None:
            self.console.print(
                text,
                end="",
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        raise HelpSignal(topic)

    def _handle_long(
        self, option: OptionDescriptor, scanner: OptionScanner, result: ParseResult
    ) -> None:
        if is_help_request(scanner.optarg):
            self._render(self.help_file, option.name, False)

        if option.is_mca:
            if scanner.optarg is None or scanner.optind >= scanner.argc:
                self._render(
                    CLI_HELP_FILE,
                    "mca-missing-value",
                    True,
                    self.identity.basename,
                    option.name,
                )
            value = f"{scanner.optarg}={scanner.argv[scanner.optind]}"
            self.store(option.name, value, result)
            scanner.optind += 1
            return

        value = None if option.arity == Arity.NONE else scanner.optarg
        self.store(option.name, value, result)

    def _handle_help_request(self, scanner: OptionScanner) -> NoReturn:
        """
        Render help for `-h`/`--help`.

        The help argument is optional, so a following option name is left in
        `argv[optind]` by the scanner rather than returned as `optarg`.
        """
        basename = self.identity.basename
        if scanner.optarg is None and scanner.optind < scanner.argc:
            requested = strip_dashes(scanner.argv[scanner.optind])
            if requested in ("version", "V"):
                self._render(CLI_HELP_FILE, "version", False)
            if requested in ("verbose", "v"):
                self._render(CLI_HELP_FILE, "verbose", False)
            if requested in ("help", "h"):
                self._render(CLI_HELP_FILE, "help", False, *([basename] * 8))
            if self.get_option(requested) is not None:
                self._render(self.help_file, requested, False)
            self._render(CLI_HELP_FILE, "unknown-option", True, requested, basename)

        if scanner.optarg is None:
            identity = self.identity
            self._render(
                self.help_file,
                "usage",
                False,
                basename,
                identity.product,
                identity.version,
                basename,
                identity.bugreport,
            )

        self._render(
            CLI_HELP_FILE, "unrecognized-option", True, basename, scanner.optarg
        )

    def _handle_short(
        self, code: str, scanner: OptionScanner, result: ParseResult
    ) -> None:
        token = scanner.argv[scanner.token_index]
        basename = self.identity.basename
        arity: Arity | None = None
        if code not in (UNKNOWN, MISSING_ARGUMENT):
            arity = short_arity(self.shorts, code)
        if arity is None:
            self._render(
                CLI_HELP_FILE, "unregistered-option", True, basename, token, basename
            )

        if arity == Arity.REQUIRED:
            value = scanner.optarg
        elif arity == Arity.OPTIONAL:
            if token.startswith("--"):
                value = scanner.optarg
            else:
                # attached only: "-zfoo" gives "foo", "-z foo" gives nothing
                value = token[2:] or None
        else:
            value = None

        option = self.get_option_by_short(code)
        if option is None:
            self._render(CLI_HELP_FILE, "short-no-long", True, basename, token)

        if is_help_request(value):
            self._render(self.help_file, option.name, True)

        if option.arity == Arity.NONE:
            value = None
        self.store(option.name, value, result)

    def __str__(self) -> str:
        return (
            f"CommandLineParser(shorts={self.shorts!r}, "
            f"long_options={len(self.long_options)}, help_file={str(self.help_file)!r})"
        )

    def __repr__(self) -> str:
        return str(self)


def parse(
    argv: Sequence[str],
    shorts: str,
    long_options: Sequence[OptionDescriptor],
    store: StoreFn | None,
    result: ParseResult,
    help_file: str | Path,
) -> Status:
    """
    Parse `argv` against `shorts` and `long_options` in a single call.

    Equivalent to `CommandLineParser(shorts, long_options, help_file,
    store).parse(argv, result)`.
    """
    parser = CommandLineParser(shorts, long_options, help_file, store=store)
    return parser.parse(argv, result)
