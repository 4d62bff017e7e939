import pytest

from rmwnames.errors import InvalidArgumentError
from rmwnames.security_options import (
    SecurityEnforcementPolicy,
    SecurityOptions,
    get_default_security_options,
    get_zero_initialized_security_options,
)


def test_get_zero_init():
    options = get_zero_initialized_security_options()
    assert options.enforce_security is SecurityEnforcementPolicy.PERMISSIVE
    assert options.security_root_path is None


def test_get_default_init():
    options = get_default_security_options()
    assert options.enforce_security is SecurityEnforcementPolicy.PERMISSIVE
    assert options.security_root_path is None


def test_policy_values():
    assert int(get_default_security_options().enforce_security) == 0
    copied = SecurityOptions(SecurityEnforcementPolicy.ENFORCE, "/keys").copy()
    assert int(copied.enforce_security) == 1


def test_options_copy():
    source = get_default_security_options()
    source.set_root_path("root_path")
    destination = source.copy()
    assert destination == source
    assert destination is not source
    assert destination.security_root_path == "root_path"

    source.fini()
    assert source.security_root_path is None
    assert destination.security_root_path == "root_path"
    destination.fini()
    assert destination.security_root_path is None


def test_copy_keeps_enforce_policy():
    source = SecurityOptions(SecurityEnforcementPolicy.ENFORCE, "/keys")
    copied = source.copy()
    assert copied.enforce_security is SecurityEnforcementPolicy.ENFORCE
    assert copied.security_root_path == "/keys"


def test_copy_rejects_invalid_policy():
    source = SecurityOptions(enforce_security=5)
    with pytest.raises(InvalidArgumentError):
        source.copy()


def test_security_root_path():
    options = get_default_security_options()
    assert options.security_root_path is None

    with pytest.raises(InvalidArgumentError):
        options.set_root_path(None)
    assert options.security_root_path is None

    with pytest.raises(InvalidArgumentError):
        options.set_root_path(42)
    assert options.security_root_path is None

    options.set_root_path("root_path")
    assert options.security_root_path == "root_path"

    options.fini()
    assert options.security_root_path is None


def test_security_options_fini():
    options = get_zero_initialized_security_options()
    options.fini()
    assert options == get_zero_initialized_security_options()

    options = SecurityOptions(SecurityEnforcementPolicy.ENFORCE, "root_path")
    options.fini()
    assert options.enforce_security is SecurityEnforcementPolicy.PERMISSIVE
    assert options.security_root_path is None