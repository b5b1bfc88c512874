# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-wide tool identity substituted into rendered help text.

`ToolIdentity` carries the tool's basename, product name, version string and
bug report address. The parser only reads it; `set_tool_identity` replaces
the default, which is derived from `sys.argv[0]` on first use.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cmdline.utils import get_program_basename
from cmdline.version import __version__


class ToolIdentity(BaseModel):
    """Names and version strings shown in usage and version topics."""

    model_config = ConfigDict(frozen=True)

    basename: str = Field(default_factory=get_program_basename)
    product: str = "cmdline"
    version: str = __version__
    bugreport: str = "the project issue tracker"


_identity: ToolIdentity | None = None


def get_tool_identity() -> ToolIdentity:
    global _identity
    if _identity is None:
        _identity = ToolIdentity()
    return _identity


def set_tool_identity(identity: ToolIdentity | None) -> None:
    """Install `identity` as the default. None resets it to `sys.argv[0]`."""
    global _identity
    _identity = identity
