# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help file lookup and rendering.

Help text lives in plain text files made of topics:

    # comment lines start with a hash
    [usage]
    Usage: %s [OPTION]...
    ...

    [version]
    %s (%s) %s

A topic's body runs until the next `[topic]` header. `%s` placeholders are
filled, in order, from the substitutions passed to `show_help_string`; a
literal percent sign is written `%%`.

`HelpCatalog` finds help files by name along a search path (explicit
directories, then `CMDLINE_HELP_PATH`, then the files shipped in
`cmdline/help/`) and caches each file after the first read.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable

from cmdline.exceptions import HelpFileError
from cmdline.logger import logger

PACKAGE_HELP_DIR = Path(__file__).parent / "help"
CLI_HELP_FILE = "help-cli.txt"
ERROR_RULE = "-" * 74

_TOPIC_RE = re.compile(r"^\[([^\]]+)\]\s*$")


def parse_help_text(text: str, source: str = "<string>") -> dict[str, str]:
    """
    Split help file text into `{topic: body}`.

    Raises:
        HelpFileError: On text before the first topic or a repeated topic.
    """
    topics: dict[str, str] = {}
    current: str | None = None
    lines: list[str] = []

    def _close() -> None:
        if current is not None:
            topics[current] = "".join(lines).rstrip("\n") + "\n"

    for number, line in enumerate(text.splitlines(keepends=True), start=1):
        if line.startswith("#"):
            continue
        match = _TOPIC_RE.match(line.rstrip("\r\n"))
        if match:
            _close()
            current = match.group(1).strip()
            if current in topics:
                raise HelpFileError(f"{source}:{number}: duplicate topic [{current}]")
            lines = []
            continue
        if current is None:
            if line.strip():
                raise HelpFileError(f"{source}:{number}: text outside of any topic")
            continue
        lines.append(line)
    _close()
    return topics


class HelpCatalog:
    """
    Loads help files from a search path and renders their topics.

    Args:
        search_paths (Iterable[str | Path] | None): Directories searched before
            `CMDLINE_HELP_PATH` and the packaged help directory.
    """

    def __init__(self, search_paths: Iterable[str | Path] | None = None) -> None:
        self.search_paths: list[Path] = [Path(path) for path in search_paths or []]
        self._files: dict[Path, dict[str, str]] = {}

    def get_search_path(self) -> list[Path]:
        paths = list(self.search_paths)
        env_path = os.environ.get("CMDLINE_HELP_PATH")
        if env_path:
            paths.extend(Path(entry) for entry in env_path.split(os.pathsep) if entry)
        paths.append(PACKAGE_HELP_DIR)
        return paths

    def find(self, filename: str | Path) -> Path | None:
        """Resolve a help file name to a path, or None if it can't be found."""
        candidate = Path(filename)
        if candidate.is_absolute():
            return candidate if candidate.is_file() else None
        for directory in self.get_search_path():
            path = directory / candidate
            if path.is_file():
                return path
        return None

    def load(self, filename: str | Path) -> dict[str, str] | None:
        path = self.find(filename)
        if path is None:
            logger.warning("Help file '%s' not found", filename)
            return None
        if path not in self._files:
            text = path.read_text(encoding="UTF-8")
            self._files[path] = parse_help_text(text, source=str(path))
            logger.debug("Loaded %d help topics from %s", len(self._files[path]), path)
        return self._files[path]

    def topics(self, filename: str | Path) -> list[str]:
        return list(self.load(filename) or {})

    def show_help_string(
        self,
        filename: str | Path,
        topic: str,
        want_error_header: bool,
        *substitutions: str,
    ) -> str | None:
        """
        Render `topic` from `filename`.

        Args:
            filename (str | Path): Help file name or path.
            topic (str): Topic to render.
            want_error_header (bool): Frame the text with dashed rules.
            *substitutions (str): Values for the topic's `%s` placeholders.

        Returns:
            str | None: The rendered text, or None if the file or topic is
            missing.
        """
        topics = self.load(filename)
        if topics is None:
            return None
        body = topics.get(topic)
        if body is None:
            logger.warning("Help topic [%s] not found in '%s'", topic, filename)
            return None
        try:
            text = body % tuple(substitutions)
        except (TypeError, ValueError) as error:
            logger.warning(
                "Help topic [%s] in '%s' could not be formatted with %d values: %s",
                topic,
                filename,
                len(substitutions),
                error,
            )
            text = body
        if want_error_header:
            text = f"{ERROR_RULE}\n{text}{ERROR_RULE}\n"
        return text

    def clear(self) -> None:
        self._files.clear()


_default_catalog = HelpCatalog()


def get_catalog() -> HelpCatalog:
    return _default_catalog


def show_help_string(
    filename: str | Path, topic: str, want_error_header: bool, *substitutions: str
) -> str | None:
    """Render a help topic through the default catalog."""
    return _default_catalog.show_help_string(
        filename, topic, want_error_header, *substitutions
    )
