"""Validation of fully qualified topic names."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

from rmwnames.errors import InvalidArgumentError

# 255 is the implementation limit; 8 characters are reserved for prefixes.
TOPIC_MAX_NAME_LENGTH = 255 - 8

_ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_/")
_DIGITS = frozenset(string.digits)


class TopicNameValidationResult(enum.IntEnum):
    """Outcome of checking a fully qualified topic name."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_NOT_ABSOLUTE = 2
    INVALID_ENDS_WITH_FORWARD_SLASH = 3
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 4
    INVALID_CONTAINS_REPEATED_FORWARD_SLASH = 5
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 6
    INVALID_TOO_LONG = 7


_MESSAGES = {
    TopicNameValidationResult.INVALID_IS_EMPTY_STRING: "topic name must not be empty",
    TopicNameValidationResult.INVALID_NOT_ABSOLUTE: (
        "topic name must be absolute, it must lead with a '/'"
    ),
    TopicNameValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH: (
        "topic name must not end with a '/'"
    ),
    TopicNameValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS: (
        "topic name must not contain characters other than alphanumerics, '_', or '/'"
    ),
    TopicNameValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH: (
        "topic name must not contain repeated '/'"
    ),
    TopicNameValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER: (
        "topic name must not have a token that starts with a number"
    ),
    TopicNameValidationResult.INVALID_TOO_LONG: (
        f"topic length should not exceed '{TOPIC_MAX_NAME_LENGTH}'"
    ),
}

_UNKNOWN_MESSAGE = "unknown result code for rwm topic name validation"


@dataclass(frozen=True)
class TopicNameValidation:
    """Result of a validation and, when invalid, where the problem lies."""

    result: TopicNameValidationResult
    invalid_index: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.result is TopicNameValidationResult.VALID

    @property
    def message(self) -> str | None:
        return topic_name_validation_result_string(self.result)


def validate_full_topic_name(topic_name: str) -> TopicNameValidation:
    """Check a fully qualified topic name.

    The length limit is checked last, so a TOO_LONG result means every
    other rule was satisfied.
    """
    if not isinstance(topic_name, str):
        raise InvalidArgumentError("topic_name must be a string")

    result = TopicNameValidationResult
    length = len(topic_name)
    if length == 0:
        return TopicNameValidation(result.INVALID_IS_EMPTY_STRING, 0)
    if topic_name[0] != "/":
        return TopicNameValidation(result.INVALID_NOT_ABSOLUTE, 0)
    if topic_name[-1] == "/":
        # catches both "/foo/" and "/"
        return TopicNameValidation(result.INVALID_ENDS_WITH_FORWARD_SLASH, length - 1)

    for index, char in enumerate(topic_name):
        if char not in _ALLOWED_CHARACTERS:
            return TopicNameValidation(result.INVALID_CONTAINS_UNALLOWED_CHARACTERS, index)

    for index, (current, following) in enumerate(zip(topic_name, topic_name[1:])):
        if current != "/":
            continue
        if following == "/":
            return TopicNameValidation(
                result.INVALID_CONTAINS_REPEATED_FORWARD_SLASH, index + 1
            )
        if following in _DIGITS:
            return TopicNameValidation(
                result.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, index + 1
            )

    if length > TOPIC_MAX_NAME_LENGTH:
        return TopicNameValidation(result.INVALID_TOO_LONG, TOPIC_MAX_NAME_LENGTH - 1)

    return TopicNameValidation(result.VALID)


def topic_name_validation_result_string(validation_result: int) -> str | None:
    """Describe a validation result; None for a valid name."""
    try:
        code = TopicNameValidationResult(validation_result)
    except ValueError:
        return _UNKNOWN_MESSAGE
    if code is TopicNameValidationResult.VALID:
        return None
    return _MESSAGES[code]