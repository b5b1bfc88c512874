# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the cmdline package.

These exceptions cover malformed calls into the parser: bad option tables,
unreadable configuration and broken help files. Help requests and user
mistakes on the command line are not exceptions; they are rendered by the
parser and reported through `Status.ERR_SILENT`.

Exception Hierarchy:
- CmdLineError
    ├── OptionTableError
    ├── CmdLineConfigError
    └── HelpFileError
"""


class CmdLineError(Exception):
    """Base exception for the cmdline package."""


class OptionTableError(CmdLineError):
    """Exception raised when a short spec or long option table is malformed."""


class CmdLineConfigError(CmdLineError):
    """Exception raised when a configuration file cannot be loaded."""


class HelpFileError(CmdLineError):
    """Exception raised when a help file cannot be parsed."""
