import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from cmdline.__main__ import find_cmdline_config, get_demo_parser, main
from cmdline.parser import CommandLineParser


@pytest.fixture(autouse=True)
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def restore_logging():
    """main() installs its own root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory without CMDLINE_CONFIG."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CMDLINE_CONFIG", raising=False)
    yield tmp_path


def test_find_cmdline_config(isolated_cwd):
    """Test if the config file in the current directory is found."""
    config_file = isolated_cwd / "cmdline.yaml"
    config_file.touch()
    assert find_cmdline_config().resolve() == config_file.resolve()


def test_find_cmdline_config_none():
    assert find_cmdline_config() is None


def test_find_cmdline_config_from_environment(tmp_path, monkeypatch):
    config_file = tmp_path / "elsewhere" / "tool.toml"
    config_file.parent.mkdir()
    config_file.touch()
    monkeypatch.setenv("CMDLINE_CONFIG", str(config_file))
    assert find_cmdline_config() == config_file


def test_find_cmdline_config_global(fake_home):
    config_file = fake_home / ".config" / "cmdline" / "cmdline.yaml"
    config_file.parent.mkdir(parents=True)
    config_file.touch()
    assert find_cmdline_config() == config_file


def test_demo_parser():
    parser = get_demo_parser()
    assert isinstance(parser, CommandLineParser)
    assert parser.get_option("np").short == "n"
    assert parser.get_option_by_short("x").name == "display"


def test_main_prints_result(capsys):
    assert main(["cmdline", "-v", "-n", "4", "--prtemca", "a", "b", "app"]) == 0
    out = capsys.readouterr().out
    assert "np" in out
    assert "a=b" in out
    assert "-n, --np NP" in out
    assert "--prtemca KEY VALUE" in out
    assert "tail:" in out
    assert "app" in out


def test_main_version(capsys):
    assert main(["cmdline", "-V"]) == 1
    out = capsys.readouterr().out
    assert "(cmdline demo)" in out
    assert "Parsed options" not in out


def test_main_option_help(capsys):
    assert main(["cmdline", "-h", "map-by"]) == 1
    assert "Map processes to resources" in capsys.readouterr().out


def test_main_with_config(isolated_cwd, capsys):
    (isolated_cwd / "help-tool.txt").write_text("[version]\ntool %s %s %s %s\n")
    (isolated_cwd / "cmdline.yaml").write_text(
        "shorts: 'V'\nhelp_file: help-tool.txt\n"
        "identity: {basename: tool, product: T, version: '1', bugreport: me}\n"
        "options:\n  - {name: version, short: V}\n"
    )
    assert main(["tool", "-V"]) == 1
    assert capsys.readouterr().out == "tool tool T 1 me\n"
