from argparse import BooleanOptionalAction

import pytest

from optcompose.option_action import OptionAction


@pytest.mark.parametrize(
    "value, expected",
    [
        ("store", OptionAction.STORE),
        ("STORE_TRUE", OptionAction.STORE_TRUE),
        (" true ", OptionAction.STORE_TRUE),
        ("false", OptionAction.STORE_FALSE),
        ("optional", OptionAction.STORE_BOOL_OPTIONAL),
        ("list", OptionAction.APPEND),
        ("counter", OptionAction.COUNT),
    ],
)
def test_option_action_coercion(value, expected):
    assert OptionAction(value) is expected


def test_option_action_invalid():
    with pytest.raises(ValueError, match="Expected one of"):
        OptionAction("explode")
    with pytest.raises(ValueError):
        OptionAction(3)


def test_takes_value():
    assert OptionAction.STORE.takes_value
    assert OptionAction.STORE_OPTIONAL.takes_value
    assert OptionAction.APPEND.takes_value
    assert not OptionAction.STORE_TRUE.takes_value
    assert not OptionAction.COUNT.takes_value
    assert not OptionAction.STORE_BOOL_OPTIONAL.takes_value


def test_str_and_choices():
    assert str(OptionAction.COUNT) == "count"
    assert OptionAction.choices() == list(OptionAction)


def test_argparse_action():
    assert OptionAction.APPEND.argparse_action == "append"
    assert OptionAction.STORE_OPTIONAL.argparse_action == "store"
    assert OptionAction.STORE_BOOL_OPTIONAL.argparse_action is BooleanOptionalAction
