import pytest

from cmdline.exceptions import OptionTableError
from cmdline.parser.option import (
    Arity,
    OptionDescriptor,
    short_arity,
    validate_option_table,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("none", Arity.NONE),
        ("no_argument", Arity.NONE),
        (0, Arity.NONE),
        ("required", Arity.REQUIRED),
        (" REQD ", Arity.REQUIRED),
        (1, Arity.REQUIRED),
        ("optional", Arity.OPTIONAL),
        ("optional_argument", Arity.OPTIONAL),
        (2, Arity.OPTIONAL),
    ],
)
def test_arity_aliases(value, expected):
    assert Arity(value) is expected


@pytest.mark.parametrize("value", ["maybe", 3, True, None, 1.0])
def test_arity_invalid(value):
    with pytest.raises(ValueError):
        Arity(value)


def test_arity_str():
    assert str(Arity.REQUIRED) == "required"


def test_descriptor_coerces_arity():
    option = OptionDescriptor("np", "required", "n")
    assert option.arity is Arity.REQUIRED
    assert option.flags == ("-n", "--np")
    assert option.get_choice_text() == "NP"


def test_descriptor_defaults():
    option = OptionDescriptor("verbose")
    assert option.arity is Arity.NONE
    assert option.short is None
    assert option.flags == ("--verbose",)
    assert option.get_choice_text() == ""


def test_descriptor_is_mca():
    assert OptionDescriptor("prtemca", Arity.REQUIRED).is_mca
    assert OptionDescriptor("myplugin_mca", Arity.REQUIRED).is_mca
    assert not OptionDescriptor("mca-file", Arity.REQUIRED).is_mca
    assert OptionDescriptor("pmixmca", Arity.REQUIRED).get_choice_text() == "KEY VALUE"


def test_descriptor_optional_choice_text():
    assert OptionDescriptor("map-by", Arity.OPTIONAL).get_choice_text() == "[MAP_BY]"


@pytest.mark.parametrize(
    "code, expected",
    [
        ("a", Arity.NONE),
        ("b", Arity.REQUIRED),
        ("c", Arity.OPTIONAL),
        ("d", Arity.NONE),
        ("z", None),
        (":", None),
    ],
)
def test_short_arity(code, expected):
    assert short_arity("ab:c::d", code) is expected


def test_short_arity_ignores_prefixes():
    assert short_arity("+:n:", "n") is Arity.REQUIRED
    assert short_arity("-v", "v") is Arity.NONE


def test_validate_option_table():
    validate_option_table(
        "hVn:",
        [
            OptionDescriptor("help", Arity.NONE, "h"),
            OptionDescriptor("np", Arity.REQUIRED, "n"),
            OptionDescriptor("prtemca", Arity.REQUIRED),
        ],
    )


@pytest.mark.parametrize(
    "shorts, options",
    [
        ("h", [OptionDescriptor("help", short="h"), OptionDescriptor("help")]),
        ("h", [OptionDescriptor("help", short="x")]),
        ("h", [OptionDescriptor("help", short="hh")]),
        ("h", [OptionDescriptor("")]),
        ("h", [OptionDescriptor("--help")]),
        ("h", [OptionDescriptor("np=4")]),
        ("h", ["help"]),
        (None, []),
    ],
)
def test_validate_option_table_errors(shorts, options):
    with pytest.raises(OptionTableError):
        validate_option_table(shorts, options)
