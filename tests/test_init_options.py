from rmwnames.init_options import (
    DEFAULT_DOMAIN_ID,
    InitOptions,
    get_zero_initialized_init_options,
)
from rmwnames.security_options import SecurityEnforcementPolicy


def test_get_zero_initialized_init_options():
    options = get_zero_initialized_init_options()
    assert options.instance_id == 0
    assert options.implementation_identifier is None
    assert options.impl is None


def test_zero_initialized_other_fields():
    options = get_zero_initialized_init_options()
    assert options.domain_id == DEFAULT_DOMAIN_ID
    assert options.enclave is None
    assert options.security_options.security_root_path is None
    assert options.security_options.enforce_security is SecurityEnforcementPolicy.PERMISSIVE


def test_default_domain_id_is_size_max():
    options = get_zero_initialized_init_options()
    assert options.domain_id == 18446744073709551615


def test_zero_initialized_reports_itself():
    assert get_zero_initialized_init_options().is_zero_initialized() is True


def test_changed_fields_are_not_zero_initialized():
    assert InitOptions(instance_id=3).is_zero_initialized() is False
    assert InitOptions(implementation_identifier="impl").is_zero_initialized() is False
    assert InitOptions(domain_id=0).is_zero_initialized() is False
    assert InitOptions(enclave="/enclave").is_zero_initialized() is False
    assert InitOptions(impl=object()).is_zero_initialized() is False


def test_security_path_breaks_zero_state():
    options = get_zero_initialized_init_options()
    options.security_options.set_root_path("root_path")
    assert options.is_zero_initialized() is False


def test_instances_do_not_share_security_options():
    first = get_zero_initialized_init_options()
    second = get_zero_initialized_init_options()
    first.security_options.set_root_path("root_path")
    assert second.security_options.security_root_path is None