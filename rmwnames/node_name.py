"""Validation of node names."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

from rmwnames.errors import InvalidArgumentError

NODE_NAME_MAX_NAME_LENGTH = 255

_ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)


class NodeNameValidationResult(enum.IntEnum):
    """Outcome of checking a node name."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 2
    INVALID_STARTS_WITH_NUMBER = 3
    INVALID_TOO_LONG = 4


_MESSAGES = {
    NodeNameValidationResult.INVALID_IS_EMPTY_STRING: "node name must not be empty",
    NodeNameValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS: (
        "node name must not contain characters other than alphanumerics or '_'"
    ),
    NodeNameValidationResult.INVALID_STARTS_WITH_NUMBER: (
        "node name must not start with a number"
    ),
    NodeNameValidationResult.INVALID_TOO_LONG: (
        f"node name length should not exceed '{NODE_NAME_MAX_NAME_LENGTH}'"
    ),
}

_UNKNOWN_MESSAGE = "unknown result code for rmw node name validation"


@dataclass(frozen=True)
class NodeNameValidation:
    """Result of a validation and, when invalid, where the problem lies."""

    result: NodeNameValidationResult
    invalid_index: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.result is NodeNameValidationResult.VALID

    @property
    def message(self) -> str | None:
        return node_name_validation_result_string(self.result)


def validate_node_name(node_name: str) -> NodeNameValidation:
    """Check a node name.

    The length limit is checked last, so a TOO_LONG result means every
    other rule was satisfied.
    """
    if not isinstance(node_name, str):
        raise InvalidArgumentError("node_name must be a string")

    result = NodeNameValidationResult
    if not node_name:
        return NodeNameValidation(result.INVALID_IS_EMPTY_STRING, 0)

    for index, char in enumerate(node_name):
        if char not in _ALLOWED_CHARACTERS:
            return NodeNameValidation(result.INVALID_CONTAINS_UNALLOWED_CHARACTERS, index)

    if node_name[0] in _DIGITS:
        return NodeNameValidation(result.INVALID_STARTS_WITH_NUMBER, 0)

    if len(node_name) > NODE_NAME_MAX_NAME_LENGTH:
        return NodeNameValidation(result.INVALID_TOO_LONG, NODE_NAME_MAX_NAME_LENGTH - 1)

    return NodeNameValidation(result.VALID)


def node_name_validation_result_string(validation_result: int) -> str | None:
    """Describe a validation result; None for a valid name."""
    try:
        code = NodeNameValidationResult(validation_result)
    except ValueError:
        return _UNKNOWN_MESSAGE
    if code is NodeNameValidationResult.VALID:
        return None
    return _MESSAGES[code]