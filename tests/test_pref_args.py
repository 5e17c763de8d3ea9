import pytest

from gui.app.pref_args import coerce_arg_value, parse_pref_args

NAMES = ["scratchFolderPath", "scratchFileCleanupAge", "disableHardwareAcceleration"]


def test_space_and_equals_forms():
    values = parse_pref_args(
        NAMES, ["--scratchFolderPath", "/tmp/x", "--scratchFileCleanupAge=7"]
    )
    assert values == {"scratchFolderPath": "/tmp/x", "scratchFileCleanupAge": 7}


def test_unknown_arguments_ignored():
    values = parse_pref_args(NAMES, ["story.html", "--other", "1", "--scratchFolderPath=/a"])
    assert values == {"scratchFolderPath": "/a"}


def test_bare_flag_is_true():
    assert parse_pref_args(NAMES, ["--disableHardwareAcceleration"]) == {
        "disableHardwareAcceleration": True
    }


def test_missing_names_omitted():
    assert parse_pref_args(NAMES, []) == {}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("7", 7),
        ("-3", -3),
        ("2.5", 2.5),
        ("1e3", 1000.0),
        ("true", True),
        ("false", False),
        ("FALSE", "FALSE"),
        ("True", "True"),
        ("0x10", 16),
        ("0XFF", 255),
        ("0x", "0x"),
        ("/tmp/x", "/tmp/x"),
        ("7days", "7days"),
        (True, True),
    ],
)
def test_coerce_arg_value(raw, expected):
    assert coerce_arg_value(raw) == expected
    assert type(coerce_arg_value(raw)) is type(expected)


def test_coerce_without_booleans_keeps_text():
    assert coerce_arg_value("false", booleans=False) == "false"
    assert coerce_arg_value("7", booleans=False) == 7


def test_space_form_converts_booleans():
    assert parse_pref_args(NAMES, ["--disableHardwareAcceleration", "false"]) == {
        "disableHardwareAcceleration": False
    }


def test_equals_form_keeps_boolean_text():
    assert parse_pref_args(NAMES, ["--disableHardwareAcceleration=false"]) == {
        "disableHardwareAcceleration": "false"
    }


def test_equals_form_still_converts_numbers():
    assert parse_pref_args(NAMES, ["--scratchFileCleanupAge=0x10"]) == {
        "scratchFileCleanupAge": 16
    }


def test_last_occurrence_decides_form():
    values = parse_pref_args(
        NAMES,
        ["--disableHardwareAcceleration=true", "--disableHardwareAcceleration", "true"],
    )
    assert values == {"disableHardwareAcceleration": True}
