"""Options used when initializing the middleware."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rmwnames.security_options import (
    SecurityOptions,
    get_zero_initialized_security_options,
)

# The largest value of an unsigned machine word marks "use the default domain".
DEFAULT_DOMAIN_ID = 2**64 - 1


@dataclass
class InitOptions:
    """Settings for one init/shutdown cycle."""

    instance_id: int = 0
    implementation_identifier: str | None = None
    domain_id: int = DEFAULT_DOMAIN_ID
    security_options: SecurityOptions = field(
        default_factory=get_zero_initialized_security_options
    )
    enclave: str | None = None
    impl: Any = None

    def is_zero_initialized(self) -> bool:
        """Tell whether every field still holds its zero-initialized value."""
        return (
            self.instance_id == 0
            and self.implementation_identifier is None
            and self.domain_id == DEFAULT_DOMAIN_ID
            and self.security_options == get_zero_initialized_security_options()
            and self.enclave is None
            and self.impl is None
        )


def get_zero_initialized_init_options() -> InitOptions:
    """Return init options with every field at its zero value."""
    return InitOptions()