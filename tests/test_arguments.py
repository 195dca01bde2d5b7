import pytest

from evenodd import messages
from evenodd.arguments import (
    ArgumentError,
    HelpRequested,
    check_argument,
    check_args,
    validate_file_extension,
)


@pytest.mark.parametrize("argv", [[], ["-f", "a.txt", "extra"]])
def test_wrong_argument_count(argv):
    with pytest.raises(ArgumentError) as exc:
        check_args(argv)
    assert str(exc.value) == messages.PARAMS_ERROR


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag):
    with pytest.raises(HelpRequested) as exc:
        check_args([flag])
    assert exc.value.message == messages.HELP_MESSAGE


def test_single_unknown_argument():
    with pytest.raises(ArgumentError) as exc:
        check_args(["-x"])
    assert str(exc.value) == messages.PARAMS_ERROR


@pytest.mark.parametrize("flag", ["-f", "--file"])
def test_file_option_returns_path(flag, capsys):
    assert check_args([flag, "conf.txt"]) == "conf.txt"
    assert capsys.readouterr().out == messages.CONFIG_FILE_PATH.format("conf.txt")


def test_bad_extension_reported_before_option():
    with pytest.raises(ArgumentError) as exc:
        check_args(["-x", "conf.cfg"])
    assert str(exc.value) == messages.NAME_ERROR


def test_unknown_option_with_valid_file():
    with pytest.raises(ArgumentError) as exc:
        check_args(["-x", "conf.txt"])
    assert str(exc.value) == messages.PARAMS_ERROR


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("conf.txt", True),
        ("dir/conf.txt", True),
        ("a.b.txt", True),
        ("conf", False),
        (".txt", False),
        ("conf.txt.bak", False),
        ("conf.TXT", False),
        ("conf.", False),
    ],
)
def test_validate_file_extension(filename, expected):
    assert validate_file_extension(filename) is expected


def test_check_argument():
    assert check_argument("-f", "-f", "--file")
    assert check_argument("--file", "-f", "--file")
    assert not check_argument("-file", "-f", "--file")