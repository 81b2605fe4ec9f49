import pytest

from n8lang.arguments import ArgumentParser


def _parser(argv):
    parser = ArgumentParser(argv)
    parser.define_parameter("h", "help", "Show help")
    parser.define_parameter("v", "version", "Show version")
    return parser


def test_program_file_name_is_first_argument():
    parser = _parser(["n8", "main.n8"])
    assert parser.program_file_name == "n8"


def test_program_file_name_requires_arguments():
    with pytest.raises(IndexError):
        _ = ArgumentParser([]).program_file_name


def test_short_flag_is_detected():
    parser = _parser(["n8", "-h"])
    assert parser.has_parameter("h") is True
    assert parser.has_parameter("v") is False


def test_long_flag_is_detected():
    parser = _parser(["n8", "--version"])
    assert parser.has_parameter("v") is True
    assert parser.has_parameter("h") is False


def test_undefined_flag_raises():
    with pytest.raises(KeyError):
        _parser(["n8"]).has_parameter("x")


def test_input_files_exclude_declared_flags():
    parser = _parser(["n8", "-h", "a.n8", "--version", "b.n8"])
    assert parser.input_files() == ["a.n8", "b.n8"]


def test_unknown_flags_are_kept_as_inputs():
    parser = _parser(["n8", "-x", "--nothing", "a.n8"])
    assert parser.input_files() == ["-x", "--nothing", "a.n8"]


def test_program_name_is_not_an_input():
    parser = _parser(["n8"])
    assert parser.input_files() == []


def test_help_text_lists_every_flag():
    text = _parser(["n8"]).help_text()
    assert "  -h, --help: Show help" in text
    assert "  -v, --version: Show version" in text
    assert "Arguments" in text
    assert text.index("-h,") < text.index("-v,")