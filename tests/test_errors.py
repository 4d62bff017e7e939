import pytest

from rmwnames.errors import InvalidArgumentError, RmwError
from rmwnames.topic_name import validate_full_topic_name


def test_invalid_argument_is_caught_as_rmw_error():
    with pytest.raises(RmwError) as info:
        validate_full_topic_name(b"/bytes")
    assert type(info.value) is InvalidArgumentError
    assert info.value.message


def test_invalid_argument_is_caught_as_value_error():
    with pytest.raises(ValueError) as info:
        validate_full_topic_name(None)
    assert isinstance(info.value, InvalidArgumentError)
    assert str(info.value) == info.value.message


def test_message_is_kept():
    error = RmwError("something failed")
    assert error.message == "something failed"
    assert str(error) == "something failed"


def test_default_message_is_empty():
    assert RmwError().message == ""


def test_validator_raises_rmw_error_for_missing_name():
    with pytest.raises(RmwError) as info:
        validate_full_topic_name(None)
    assert isinstance(info.value, InvalidArgumentError)
    assert info.value.message