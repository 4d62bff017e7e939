"""Validation of node namespaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from rmwnames.errors import InvalidArgumentError, RmwError
from rmwnames.topic_name import (
    TOPIC_MAX_NAME_LENGTH,
    TopicNameValidationResult,
    validate_full_topic_name,
)

# Room is left for a node name to follow the namespace.
NAMESPACE_MAX_LENGTH = TOPIC_MAX_NAME_LENGTH - 2


class NamespaceValidationResult(enum.IntEnum):
    """Outcome of checking a namespace."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_NOT_ABSOLUTE = 2
    INVALID_ENDS_WITH_FORWARD_SLASH = 3
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 4
    INVALID_CONTAINS_REPEATED_FORWARD_SLASH = 5
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 6
    INVALID_TOO_LONG = 7


_FROM_TOPIC_RESULT = {
    TopicNameValidationResult.INVALID_IS_EMPTY_STRING: (
        NamespaceValidationResult.INVALID_IS_EMPTY_STRING
    ),
    TopicNameValidationResult.INVALID_NOT_ABSOLUTE: NamespaceValidationResult.INVALID_NOT_ABSOLUTE,
    TopicNameValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH: (
        NamespaceValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH
    ),
    TopicNameValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS: (
        NamespaceValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS
    ),
    TopicNameValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH: (
        NamespaceValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH
    ),
    TopicNameValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER: (
        NamespaceValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER
    ),
}

_MESSAGES = {
    NamespaceValidationResult.INVALID_IS_EMPTY_STRING: "namespace must not be empty",
    NamespaceValidationResult.INVALID_NOT_ABSOLUTE: (
        "namespace must be absolute, it must lead with a '/'"
    ),
    NamespaceValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH: (
        "namespace must not end with a '/', unless only a '/'"
    ),
    NamespaceValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS: (
        "namespace must not contain characters other than alphanumerics, '_', or '/'"
    ),
    NamespaceValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH: (
        "namespace must not contain repeated '/'"
    ),
    NamespaceValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER: (
        "namespace must not have a token that starts with a number"
    ),
    NamespaceValidationResult.INVALID_TOO_LONG: (
        f"namespace should not exceed '{NAMESPACE_MAX_LENGTH}'"
    ),
}

_UNKNOWN_MESSAGE = "unknown result code for rmw namespace validation"


@dataclass(frozen=True)
class NamespaceValidation:
    """Result of a validation and, when invalid, where the problem lies."""

    result: NamespaceValidationResult
    invalid_index: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.result is NamespaceValidationResult.VALID

    @property
    def message(self) -> str | None:
        return namespace_validation_result_string(self.result)


def validate_namespace(namespace: str) -> NamespaceValidation:
    """Check a namespace.

    The root namespace "/" is valid; every other namespace must pass the
    topic name rules. The length limit is checked last.
    """
    if not isinstance(namespace, str):
        raise InvalidArgumentError("namespace must be a string")

    if namespace == "/":
        return NamespaceValidation(NamespaceValidationResult.VALID)

    topic = validate_full_topic_name(namespace)
    if topic.result not in (
        TopicNameValidationResult.VALID,
        TopicNameValidationResult.INVALID_TOO_LONG,
    ):
        try:
            code = _FROM_TOPIC_RESULT[topic.result]
        except KeyError:
            raise RmwError(
                "validate_namespace(): unknown validate_full_topic_name() result "
                f"'{int(topic.result)}'"
            ) from None
        return NamespaceValidation(code, topic.invalid_index)

    if len(namespace) > NAMESPACE_MAX_LENGTH:
        return NamespaceValidation(
            NamespaceValidationResult.INVALID_TOO_LONG, NAMESPACE_MAX_LENGTH - 1
        )

    return NamespaceValidation(NamespaceValidationResult.VALID)


def namespace_validation_result_string(validation_result: int) -> str | None:
    """Describe a validation result; None for a valid namespace."""
    try:
        code = NamespaceValidationResult(validation_result)
    except ValueError:
        return _UNKNOWN_MESSAGE
    if code is NamespaceValidationResult.VALID:
        return None
    return _MESSAGES[code]