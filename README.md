# rmwnames

Validation rules for the names used by a robot middleware layer, together with
small option records that go with them. Pure Python, no dependencies.

## Name validation

Each validator takes a string and returns a frozen result object with:

- `result`: a member of the module's result enum (an `IntEnum`);
- `invalid_index`: the index where the problem was found, or `None` when valid;
- `is_valid`: `True` when `result` is `VALID`;
- `message`: a readable description, or `None` when valid.

Passing something that is not a string raises
`rmwnames.errors.InvalidArgumentError`.

### Topic names: `rmwnames.topic_name`

`validate_full_topic_name(topic_name)` returns a `TopicNameValidation`. The
rules, checked in this order:

1. not empty (`INVALID_IS_EMPTY_STRING`, index 0);
2. starts with `/` (`INVALID_NOT_ABSOLUTE`, index 0);
3. does not end with `/` (`INVALID_ENDS_WITH_FORWARD_SLASH`, index of the last
   character; this also rejects `/` alone);
4. only ASCII letters, digits, `_` and `/`
   (`INVALID_CONTAINS_UNALLOWED_CHARACTERS`, index of the first bad character);
5. no `//` (`INVALID_CONTAINS_REPEATED_FORWARD_SLASH`) and no token starting
   with a digit (`INVALID_NAME_TOKEN_STARTS_WITH_NUMBER`), index of the
   offending character;
6. at most `TOPIC_MAX_NAME_LENGTH` (247) characters (`INVALID_TOO_LONG`, index
   `TOPIC_MAX_NAME_LENGTH - 1`).

`topic_name_validation_result_string(validation_result)` accepts a
`TopicNameValidationResult` or a plain int and returns its message, `None` for
`VALID`, and a fixed "unknown result code" message for any other value.

### Node names: `rmwnames.node_name`

`validate_node_name(node_name)` returns a `NodeNameValidation` with a
`NodeNameValidationResult`: not empty, only ASCII letters, digits and `_`, not
starting with a digit, and at most `NODE_NAME_MAX_NAME_LENGTH` (255)
characters. `node_name_validation_result_string(validation_result)` describes a
result.

### Namespaces: `rmwnames.namespace`

`validate_namespace(namespace)` returns a `NamespaceValidation` with a
`NamespaceValidationResult`. The root namespace `/` is valid; any other
namespace must pass the topic name rules, and may be at most
`NAMESPACE_MAX_LENGTH` (245) characters.
`namespace_validation_result_string(validation_result)` describes a result.

In all three validators the length limit is checked last, so a `TOO_LONG`
result means every other rule passed and the length can be treated as a
warning.

### Example

```python
from rmwnames.topic_name import (
    TopicNameValidationResult,
    validate_full_topic_name,
)

check = validate_full_topic_name("/repeated//slashes")
assert check.result is TopicNameValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH
print(check.invalid_index)  # 10
print(check.message)        # topic name must not contain repeated '/'

assert validate_full_topic_name("/with_one/namespace").is_valid
```

## Option records

- `rmwnames.security_options`: `SecurityOptions`, a dataclass holding an
  `enforce_security` policy (`SecurityEnforcementPolicy.PERMISSIVE` or
  `ENFORCE`) and an optional `security_root_path`. `copy()` returns an
  independent copy, `set_root_path(path)` sets the path (raising
  `InvalidArgumentError` for `None` or a non-string), and `fini()` returns the
  options to their zero state. `get_zero_initialized_security_options()` and
  `get_default_security_options()` both give permissive options with no path.
- `rmwnames.init_options`: `InitOptions`, a dataclass with `instance_id`,
  `implementation_identifier`, `domain_id` (default `DEFAULT_DOMAIN_ID`,
  `2**64 - 1`), `security_options`, `enclave` and `impl`.
  `is_zero_initialized()` tells whether every field still holds its zero value;
  `get_zero_initialized_init_options()` returns such a record.

## Other helpers

- `rmwnames.sanity_checks.check_zero_string_array(array)` raises `RmwError`
  unless `array` is empty: either an object with `size == 0` and
  `data is None`, or an empty sequence. `None` is rejected too.
- `rmwnames.errors`: `RmwError`, the base of every error raised here, and
  `InvalidArgumentError`, which is also a `ValueError`.

## What it does not do

This package only validates names and holds option records. It does not
connect to any middleware, create nodes, publishers or subscriptions, query a
running graph, or initialize anything with the option records it defines. It
has no command-line tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```