import pytest

from therapist.parser import ArgumentAction


def test_argument_action():
    action = ArgumentAction.COUNT
    assert action == ArgumentAction.COUNT
    assert action != ArgumentAction.VALUE
    assert action != "invalid_action"
    assert action.value == "count"
    assert str(action) == "count"
    assert len(ArgumentAction.choices()) == 7


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("store", ArgumentAction.VALUE),
        ("flag", ArgumentAction.COUNT),
        ("counter", ArgumentAction.COUNT),
        ("version", ArgumentAction.MESSAGE),
        ("input", ArgumentAction.PROMPT),
        (" Help ", ArgumentAction.HELP),
    ],
)
def test_aliases(alias, expected):
    assert ArgumentAction(alias) is expected


def test_invalid_action():
    with pytest.raises(ValueError, match="Must be one of"):
        ArgumentAction("append")
    with pytest.raises(ValueError):
        ArgumentAction(3)


def test_action_properties():
    assert ArgumentAction.VALUE.takes_value
    assert not ArgumentAction.PROMPT.takes_value
    assert ArgumentAction.HELP.short_circuits
    assert ArgumentAction.COMPLETION.short_circuits
    assert not ArgumentAction.COMMAND.short_circuits
