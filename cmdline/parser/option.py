# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity` and `OptionDescriptor`, the read-only description of the long
options a tool accepts.

A long option table is an ordered sequence of `OptionDescriptor` objects. Each
descriptor names the option, says whether it takes an argument, and optionally
ties it to a single-character short code declared in the short option spec.

Exports:
    - Arity: Enum of argument arities (none, required, optional).
    - OptionDescriptor: One entry of the long option table.
    - validate_option_table: Sanity checks for a table and its short spec.

Example:
    Arity("required")  → Arity.REQUIRED
    Arity(2)           → Arity.OPTIONAL  (getopt's optional_argument)
    OptionDescriptor("np", Arity.REQUIRED, "n")
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from cmdline.exceptions import OptionTableError

MCA_SUFFIX = "mca"


class Arity(Enum):
    """
    Whether an option accepts an argument.

    Members:
        NONE: The option is a flag and never takes an argument.
        REQUIRED: The option always consumes an argument.
        OPTIONAL: The option may take an argument. For short options the
            argument must be attached to the flag (`-zfoo`).

    Aliases:
        - "no", "no_argument", 0 → NONE
        - "reqd", "required_argument", 1 → REQUIRED
        - "opt", "optional_argument", 2 → OPTIONAL
    """

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "no": "none",
            "no_argument": "none",
            "0": "none",
            "reqd": "required",
            "required_argument": "required",
            "1": "required",
            "opt": "optional",
            "optional_argument": "optional",
            "2": "optional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = str(value).strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Represents one long option.

    Attributes:
        name (str): Canonical option name, used as the key in parse results.
        arity (Arity): Whether the option takes an argument.
        short (str | None): Short option code that maps onto this option.
    """

    name: str
    arity: Arity = Arity.NONE
    short: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.arity, Arity):
            object.__setattr__(self, "arity", Arity(self.arity))

    @property
    def is_mca(self) -> bool:
        """True if arguments of this option are merged as `name=value` pairs."""
        return self.name.endswith(MCA_SUFFIX)

    @property
    def flags(self) -> tuple[str, ...]:
        if self.short:
            return (f"-{self.short}", f"--{self.name}")
        return (f"--{self.name}",)

    def get_choice_text(self) -> str:
        if self.is_mca:
            return "KEY VALUE"
        if self.arity == Arity.REQUIRED:
            return self.name.upper().replace("-", "_")
        if self.arity == Arity.OPTIONAL:
            return f"[{self.name.upper().replace('-', '_')}]"
        return ""


def validate_option_table(shorts: str, long_options: Sequence[OptionDescriptor]) -> None:
    """
    Check a short spec and long option table for mistakes the scanner can't
    report on its own.

    Raises:
        OptionTableError: On empty or duplicate names, or short codes that
            are not single characters declared in `shorts`.
    """
    if not isinstance(shorts, str):
        raise OptionTableError("shorts must be a string")
    seen: dict[str, OptionDescriptor] = {}
    for option in long_options:
        if not isinstance(option, OptionDescriptor):
            raise OptionTableError(f"Expected an OptionDescriptor, got {option!r}")
        if not option.name or option.name.startswith("-") or "=" in option.name:
            raise OptionTableError(f"Invalid long option name: {option.name!r}")
        if option.name in seen:
            raise OptionTableError(f"Duplicate long option: '{option.name}'")
        seen[option.name] = option
        if option.short is None:
            continue
        if len(option.short) != 1 or option.short in ":+-?":
            raise OptionTableError(
                f"Short code for '{option.name}' must be a single character, "
                f"got {option.short!r}"
            )
        if short_arity(shorts, option.short) is None:
            raise OptionTableError(
                f"Short code '{option.short}' of '{option.name}' is not declared "
                f"in '{shorts}'"
            )


def short_arity(shorts: str, code: str) -> Arity | None:
    """
    Re-scan the short spec for `code` and return its arity.

    A code followed by one colon requires an argument, by two colons takes an
    optional attached argument. Returns None if `code` is not declared.
    """
    spec = shorts.lstrip("+-")
    if spec.startswith(":"):
        spec = spec[1:]
    index = 0
    while index < len(spec):
        char = spec[index]
        if char == ":":
            index += 1
            continue
        if char == code:
            if spec[index + 1 : index + 2] == ":":
                if spec[index + 2 : index + 3] == ":":
                    return Arity.OPTIONAL
                return Arity.REQUIRED
            return Arity.NONE
        index += 1
    return None
