# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for command line option grammars."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from cmdline.exceptions import CmdLineConfigError
from cmdline.identity import ToolIdentity
from cmdline.logger import logger
from cmdline.parser.command_line_parser import CommandLineParser
from cmdline.parser.option import Arity, OptionDescriptor, short_arity
from cmdline.show_help import HelpCatalog


class LongOptionConfig(BaseModel):
    """Raw long option entry."""

    name: str
    arity: Arity = Arity.NONE
    short: str | None = None

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: Any) -> Arity:
        if isinstance(value, Arity):
            return value
        return Arity(value)

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError(f"short must be a single character, got {value!r}")
        return value

    def to_descriptor(self) -> OptionDescriptor:
        return OptionDescriptor(name=self.name, arity=self.arity, short=self.short)


class CmdLineConfig(BaseModel):
    """Option grammar of one tool."""

    shorts: str = ""
    options: list[LongOptionConfig] = Field(default_factory=list)
    help_file: str
    help_dirs: list[Path] = Field(default_factory=list)
    identity: ToolIdentity = Field(default_factory=ToolIdentity)

    @model_validator(mode="after")
    def validate_options(self) -> CmdLineConfig:
        names: set[str] = set()
        for option in self.options:
            if option.name in names:
                raise ValueError(f"Duplicate option '{option.name}'")
            names.add(option.name)
            if option.short and short_arity(self.shorts, option.short) is None:
                raise ValueError(
                    f"Short code '{option.short}' of '{option.name}' is not declared "
                    f"in shorts '{self.shorts}'"
                )
        return self

    def to_parser(self, base_dir: Path | None = None) -> CommandLineParser:
        help_dirs = [
            directory if directory.is_absolute() or base_dir is None
            else (base_dir / directory).resolve()
            for directory in self.help_dirs
        ]
        if base_dir is not None:
            help_dirs.append(base_dir)
        return CommandLineParser(
            self.shorts,
            [option.to_descriptor() for option in self.options],
            help_file=self.help_file,
            identity=self.identity,
            catalog=HelpCatalog(help_dirs),
        )


def load_config(file_path: Path | str) -> CmdLineConfig:
    """
    Load an option grammar from a YAML or TOML file.

    Example (YAML):
        shorts: "h::Vn:"
        help_file: help-prun.txt
        identity:
          basename: prun
          product: PRRTE
          version: "3.0.0"
        options:
          - {name: help, arity: optional, short: h}
          - {name: version, short: V}
          - {name: np, arity: required, short: n}
          - {name: prtemca, arity: required}

    Raises:
        FileNotFoundError: If the file does not exist.
        CmdLineConfigError: If the file can't be parsed or fails validation.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise CmdLineConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise CmdLineConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise CmdLineConfigError(
            "Configuration file must contain a dictionary.\n"
            "Example:\n"
            "shorts: 'hVn:'\n"
            "help_file: 'help-mytool.txt'\n"
            "options:\n"
            "  - name: 'np'\n"
            "    arity: 'required'\n"
            "    short: 'n'"
        )

    try:
        config = CmdLineConfig(**raw_config)
    except ValidationError as error:
        raise CmdLineConfigError(f"Invalid config {path}:\n{error}") from error
    logger.debug("Loaded %d options from %s", len(config.options), path)
    return config


def loader(file_path: Path | str) -> CommandLineParser:
    """Load a config file and build its `CommandLineParser`.

    Relative help directories, and the help file itself, are looked up next
    to the config file.
    """
    path = Path(file_path)
    return load_config(path).to_parser(base_dir=path.resolve().parent)
