# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result model for the command line parser.

- `ResultItem`: One distinct option key and every value seen for it, in
  command line order. An item with no values records a flag's presence.
- `ParseResult`: The ordered items plus the `tail` of positional arguments
  left after scanning.
- `check_store`: The default store callback; creates items on first sight and
  appends values on repeats.
- `store_last_wins` / `store_unique`: Alternate store policies with the same
  signature.

The parser only mutates a `ParseResult`; the caller creates and owns it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from cmdline.logger import logger

StoreFn = Callable[[str, "str | None", "ParseResult"], None]


@dataclass
class ResultItem:
    """One option key and its values."""

    key: str
    values: list[str] = field(default_factory=list)

    @property
    def value(self) -> str | None:
        """The most recent value, or None for a flag."""
        return self.values[-1] if self.values else None


@dataclass
class ParseResult:
    """
    Accumulated result of one parse.

    Attributes:
        instances (list[ResultItem]): Items in first-seen order of their keys.
        tail (list[str] | None): Unconsumed trailing arguments, or None.
    """

    instances: list[ResultItem] = field(default_factory=list)
    tail: list[str] | None = None

    def get(self, key: str) -> ResultItem | None:
        """Return the item for `key`, or None if the option was not given."""
        for item in self.instances:
            if item.key == key:
                return item
        return None

    def is_taken(self, key: str) -> bool:
        return self.get(key) is not None

    def get_value(self, key: str, default: Any = None) -> Any:
        """Return the last value given for `key`, else `default`."""
        item = self.get(key)
        if item is None or not item.values:
            return default
        return item.values[-1]

    def to_dict(self) -> dict[str, list[str]]:
        return {item.key: list(item.values) for item in self.instances}

    def clear(self) -> None:
        """Drop all items and the tail so the result can be reused."""
        self.instances.clear()
        self.tail = None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.is_taken(key)

    def __iter__(self) -> Iterator[ResultItem]:
        return iter(self.instances)

    def __len__(self) -> int:
        return len(self.instances)


def check_store(key: str, value: str | None, result: ParseResult) -> None:
    """
    Record `value` under `key`.

    An existing item gets the value appended; a new key creates an item at the
    end of `result.instances`. A None value only records presence, so a flag
    given twice leaves a single item with no values.
    """
    item = result.get(key)
    if item is None:
        item = ResultItem(key=key)
        result.instances.append(item)
        logger.debug("New option '%s'", key)
    if value is not None:
        item.values.append(value)
        logger.debug("Stored '%s' = %r", key, value)


def store_last_wins(key: str, value: str | None, result: ParseResult) -> None:
    """Like `check_store`, but a repeated option replaces earlier values."""
    item = result.get(key)
    if item is None:
        item = ResultItem(key=key)
        result.instances.append(item)
    if value is not None:
        item.values[:] = [value]


def store_unique(key: str, value: str | None, result: ParseResult) -> None:
    """Like `check_store`, but a value already recorded for `key` is skipped."""
    item = result.get(key)
    if item is not None and value in item.values:
        logger.debug("Skipping duplicate value %r for '%s'", value, key)
        return
    check_store(key, value, result)
