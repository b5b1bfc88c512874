# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionScanner`, a GNU `getopt_long` style option scanner whose
cursor lives on the scanner instance instead of in process-wide globals.

Each call to `next()` walks the working argument list and returns a single
matched option:

- `None` once scanning is exhausted,
- an `int` (index into the long option table) for a long option without a
  short code,
- the short code (`str`) for a short option, or for a long option that
  carries a short code,
- `"?"` for an unrecognized option or an argument given to a flag,
- `":"` for a missing required argument when the short spec starts with `:`.

Ordering follows GNU defaults: non-option arguments are permuted behind the
options so that, once `next()` returns `None`, `argv[optind:]` holds every
positional argument. A leading `+` in the short spec (or `POSIXLY_CORRECT` in
the environment) stops at the first non-option instead. `--` always ends
option scanning.

Example:
    scanner = OptionScanner(["prog", "-n", "4", "app"], "n:", [])
    scanner.next()   # "n", scanner.optarg == "4"
    scanner.next()   # None
    scanner.argv[scanner.optind:]  # ["app"]
"""
from __future__ import annotations

import os
from enum import Enum
from typing import Sequence

from cmdline.logger import logger
from cmdline.parser.option import Arity, OptionDescriptor, short_arity

UNKNOWN = "?"
MISSING_ARGUMENT = ":"


class Ordering(Enum):
    PERMUTE = "permute"
    REQUIRE_ORDER = "require_order"


def is_nonoption(token: str) -> bool:
    """A lone dash and anything not starting with a dash are not options."""
    return not token.startswith("-") or token == "-"


class OptionScanner:
    """
    Option scanner with an explicit cursor.

    Attributes:
        argv (list[str]): Working argument list, permuted in place.
        optind (int): Index of the next token to scan.
        optarg (str | None): Argument of the last matched option, if any.
        optopt (str | None): Offending short code of the last error.
        token_index (int | None): Index of the token the last match came from.
    """

    def __init__(
        self,
        argv: Sequence[str],
        shorts: str,
        long_options: Sequence[OptionDescriptor],
    ) -> None:
        self.argv: list[str] = list(argv)
        self.shorts: str = shorts
        self.long_options: tuple[OptionDescriptor, ...] = tuple(long_options)
        spec = shorts
        if spec.startswith("+") or os.environ.get("POSIXLY_CORRECT") is not None:
            self.ordering = Ordering.REQUIRE_ORDER
        else:
            self.ordering = Ordering.PERMUTE
        spec = spec.lstrip("+-")
        self.missing_colon: bool = spec.startswith(":")
        self.reset()

    def reset(self) -> None:
        """Rewind the cursor so scanning starts over after the program name."""
        self.optind: int = 1
        self.optarg: str | None = None
        self.optopt: str | None = None
        self.token_index: int | None = None
        self._nextchar: str = ""
        self._first_nonopt: int = 1
        self._last_nonopt: int = 1

    @property
    def argc(self) -> int:
        return len(self.argv)

    def __iter__(self):
        while True:
            match = self.next()
            if match is None:
                return
            yield match

    def _exchange(self) -> None:
        """Move the skipped non-options behind the options scanned since."""
        bottom, middle, top = self._first_nonopt, self._last_nonopt, self.optind
        nonoptions = self.argv[bottom:middle]
        self.argv[bottom:top] = self.argv[middle:top] + nonoptions
        self._first_nonopt += top - middle
        self._last_nonopt = top

    def _advance_to_option(self) -> bool:
        """Position the cursor on the next option token. False if none remain."""
        if self._last_nonopt > self.optind:
            self._last_nonopt = self.optind
        if self._first_nonopt > self.optind:
            self._first_nonopt = self.optind

        if self.ordering == Ordering.PERMUTE:
            if self._first_nonopt != self._last_nonopt and self._last_nonopt != self.optind:
                self._exchange()
            elif self._last_nonopt != self.optind:
                self._first_nonopt = self.optind
            while self.optind < self.argc and is_nonoption(self.argv[self.optind]):
                self.optind += 1
            self._last_nonopt = self.optind

        if self.optind != self.argc and self.argv[self.optind] == "--":
            self.optind += 1
            if self._first_nonopt != self._last_nonopt and self._last_nonopt != self.optind:
                self._exchange()
            elif self._first_nonopt == self._last_nonopt:
                self._first_nonopt = self.optind
            self._last_nonopt = self.argc
            self.optind = self.argc

        if self.optind == self.argc:
            if self._first_nonopt != self._last_nonopt:
                self.optind = self._first_nonopt
            return False

        return not is_nonoption(self.argv[self.optind])

    def next(self) -> str | int | None:
        """Return the next matched option, or None when scanning is done."""
        self.optarg = None

        if not self._nextchar:
            if not self._advance_to_option():
                return None
            self.token_index = self.optind
            token = self.argv[self.optind]
            if token.startswith("--"):
                return self._match_long(token[2:])
            self._nextchar = token[1:]

        return self._match_short()

    def _match_short(self) -> str:
        code, self._nextchar = self._nextchar[0], self._nextchar[1:]
        if not self._nextchar:
            self.optind += 1

        arity = short_arity(self.shorts, code) if code != ":" else None
        if arity is None:
            logger.debug("Unrecognized short option '-%s'", code)
            self.optopt = code
            return UNKNOWN

        if arity == Arity.OPTIONAL:
            if self._nextchar:
                self.optarg = self._nextchar
                self.optind += 1
            self._nextchar = ""
        elif arity == Arity.REQUIRED:
            if self._nextchar:
                self.optarg = self._nextchar
                self.optind += 1
            elif self.optind == self.argc:
                logger.debug("Short option '-%s' requires an argument", code)
                self.optopt = code
                self._nextchar = ""
                return MISSING_ARGUMENT if self.missing_colon else UNKNOWN
            else:
                self.optarg = self.argv[self.optind]
                self.optind += 1
            self._nextchar = ""
        return code

    def _find_long(self, name: str) -> int | None:
        """Exact match first, then a unique prefix abbreviation."""
        for index, option in enumerate(self.long_options):
            if option.name == name:
                return index
        candidates = [
            index
            for index, option in enumerate(self.long_options)
            if option.name.startswith(name)
        ]
        if len(candidates) == 1:
            return candidates[0]
        if candidates:
            logger.debug(
                "Ambiguous long option '--%s': %s",
                name,
                ", ".join(self.long_options[index].name for index in candidates),
            )
        return None

    def _match_long(self, body: str) -> str | int:
        name, has_value, value = body.partition("=")
        self.optind += 1
        index = self._find_long(name) if name else None
        if index is None:
            logger.debug("Unrecognized long option '--%s'", name)
            self.optopt = None
            return UNKNOWN

        option = self.long_options[index]
        if has_value:
            if option.arity == Arity.NONE:
                logger.debug("Long option '--%s' doesn't allow an argument", name)
                self.optopt = option.short
                return UNKNOWN
            self.optarg = value
        elif option.arity == Arity.REQUIRED:
            if self.optind < self.argc:
                self.optarg = self.argv[self.optind]
                self.optind += 1
            else:
                logger.debug("Long option '--%s' requires an argument", name)
                self.optopt = option.short
                return MISSING_ARGUMENT if self.missing_colon else UNKNOWN

        if option.short:
            return option.short
        return index
