import pytest

from cmdline.config import CmdLineConfig, LongOptionConfig, load_config, loader
from cmdline.exceptions import CmdLineConfigError
from cmdline.parser import Arity, CommandLineParser, ParseResult, Status

YAML_CONFIG = """\
shorts: "h::Vn:"
help_file: help-prun.txt
identity:
  basename: prun
  product: PRRTE
  version: "3.0.0"
  bugreport: bugs@example.org
options:
  - {name: help, arity: optional, short: h}
  - {name: version, short: V}
  - {name: np, arity: reqd, short: n}
  - {name: prtemca, arity: 1}
"""

TOML_CONFIG = """\
shorts = "vn:"
help_file = "help-prun.txt"

[[options]]
name = "verbose"
short = "v"

[[options]]
name = "np"
arity = "required"
short = "n"
"""

HELP_TEXT = """\
[version]
%s %s %s %s
[np]
Help for np.
"""


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "help-prun.txt").write_text(HELP_TEXT, encoding="UTF-8")
    return tmp_path


def test_load_yaml(config_dir):
    path = config_dir / "prun.yaml"
    path.write_text(YAML_CONFIG, encoding="UTF-8")
    config = load_config(path)
    assert config.shorts == "h::Vn:"
    assert [option.name for option in config.options] == [
        "help",
        "version",
        "np",
        "prtemca",
    ]
    assert config.options[2].arity is Arity.REQUIRED
    assert config.options[3].arity is Arity.REQUIRED
    assert config.identity.basename == "prun"


def test_loader_builds_parser(config_dir, capsys):
    path = config_dir / "prun.yaml"
    path.write_text(YAML_CONFIG, encoding="UTF-8")
    parser = loader(str(path))
    assert isinstance(parser, CommandLineParser)

    result = ParseResult()
    status = parser.parse(["prun", "-n", "2", "--prtemca", "a", "b", "app"], result)
    assert status == Status.SUCCESS
    assert result.to_dict() == {"np": ["2"], "prtemca": ["a=b"]}
    assert result.tail == ["app"]

    assert parser.parse(["prun", "-V"], ParseResult()) == Status.ERR_SILENT
    assert capsys.readouterr().out == "prun PRRTE 3.0.0 bugs@example.org\n"


def test_load_toml(config_dir, capsys):
    path = config_dir / "prun.toml"
    path.write_text(TOML_CONFIG, encoding="UTF-8")
    parser = loader(path)
    result = ParseResult()
    assert parser.parse(["prun", "-v", "--np", "4"], result) == Status.SUCCESS
    assert result.to_dict() == {"verbose": [], "np": ["4"]}

    assert parser.parse(["prun", "--np", "help"], ParseResult()) == Status.ERR_SILENT
    assert "Help for np." in capsys.readouterr().out


def test_help_dirs_relative_to_config(tmp_path):
    help_dir = tmp_path / "help"
    help_dir.mkdir()
    (help_dir / "help-tool.txt").write_text("[np]\nnested\n", encoding="UTF-8")
    path = tmp_path / "tool.yaml"
    path.write_text(
        "shorts: 'n:'\nhelp_file: help-tool.txt\nhelp_dirs: [help]\n"
        "options:\n  - {name: np, arity: required, short: n}\n",
        encoding="UTF-8",
    )
    parser = loader(path)
    assert parser.catalog.show_help_string("help-tool.txt", "np", False) == "nested\n"


def test_duplicate_option():
    with pytest.raises(ValueError, match="Duplicate option"):
        CmdLineConfig(
            help_file="help.txt",
            options=[{"name": "np"}, {"name": "np", "arity": "required"}],
        )


def test_undeclared_short_code():
    with pytest.raises(ValueError, match="not declared"):
        CmdLineConfig(shorts="v", help_file="help.txt", options=[{"name": "np", "short": "n"}])


def test_long_option_config():
    option = LongOptionConfig(name="display", arity="optional_argument", short="x")
    descriptor = option.to_descriptor()
    assert descriptor.arity is Arity.OPTIONAL
    assert descriptor.short == "x"

    with pytest.raises(ValueError):
        LongOptionConfig(name="np", short="nn")
    with pytest.raises(ValueError):
        LongOptionConfig(name="np", arity="sometimes")


def test_invalid_config_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("options:\n  - {name: np, short: n}\n", encoding="UTF-8")
    with pytest.raises(CmdLineConfigError, match="Invalid config"):
        load_config(path)


def test_config_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="UTF-8")
    with pytest.raises(CmdLineConfigError, match="must contain a dictionary"):
        load_config(path)


def test_unparseable_config(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text('shorts = "unterminated\n', encoding="UTF-8")
    with pytest.raises(CmdLineConfigError, match="Could not parse"):
        load_config(path)


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(CmdLineConfigError, match="Unsupported config format"):
        load_config(path)


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
    with pytest.raises(TypeError):
        load_config(42)
