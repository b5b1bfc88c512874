# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Outcome type for the command line parser.

- `Status.SUCCESS`: Scanning completed, whether or not any options were found.
- `Status.ERR_SILENT`: Help, version or a diagnostic was already printed. The
  caller should exit non-zero without printing anything else.
"""
from enum import Enum


class Status(Enum):
    """Result of `CommandLineParser.parse`."""

    SUCCESS = "success"
    ERR_SILENT = "silent_error"

    def __bool__(self) -> bool:
        return self is Status.SUCCESS

    def __str__(self) -> str:
        return self.value
