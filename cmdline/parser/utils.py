# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token helpers shared by the scanner and the parser.

Functions:
- copy_strip: Copy an argument list, removing surrounding quote characters.
- is_help_request: Check whether an option argument asks for help.
- strip_dashes: Remove every leading dash from a token.
"""
from typing import Iterable

QUOTES = ("'", '"')

HELP_REQUESTS = frozenset({"--help", "-help", "help", "h", "-h"})


def copy_strip(argv: Iterable[str]) -> list[str]:
    """
    Return a new list with one leading and one trailing quote character
    stripped from each token.

    Raises:
        TypeError: If a token is not a string.
    """
    stripped = []
    for token in argv:
        if not isinstance(token, str):
            raise TypeError(f"Arguments must be strings, got {type(token).__name__}")
        if token[:1] in QUOTES:
            token = token[1:]
        if token[-1:] in QUOTES:
            token = token[:-1]
        stripped.append(token)
    return stripped


def is_help_request(value: str | None) -> bool:
    return value is not None and value in HELP_REQUESTS


def strip_dashes(token: str) -> str:
    return token.lstrip("-")
