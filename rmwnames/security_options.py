"""Security options: enforcement policy and security root path."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from rmwnames.errors import InvalidArgumentError


class SecurityEnforcementPolicy(enum.IntEnum):
    """Whether security is merely permitted or strictly enforced."""

    PERMISSIVE = 0
    ENFORCE = 1


@dataclass
class SecurityOptions:
    """Security settings used when initializing middleware."""

    enforce_security: SecurityEnforcementPolicy = SecurityEnforcementPolicy.PERMISSIVE
    security_root_path: str | None = None

    def copy(self) -> SecurityOptions:
        """Return an independent copy of these options."""
        if not isinstance(self.enforce_security, SecurityEnforcementPolicy):
            raise InvalidArgumentError(
                f"invalid enforcement policy: {self.enforce_security!r}"
            )
        if self.security_root_path is not None and not isinstance(
            self.security_root_path, str
        ):
            raise InvalidArgumentError("security_root_path must be a string or None")
        return SecurityOptions(self.enforce_security, self.security_root_path)

    def set_root_path(self, security_root_path: str) -> None:
        """Set the security root path; the options are unchanged on error."""
        if security_root_path is None:
            raise InvalidArgumentError("security_root_path is None")
        if not isinstance(security_root_path, str):
            raise InvalidArgumentError("security_root_path must be a string")
        self.security_root_path = security_root_path

    def fini(self) -> None:
        """Release the root path and return to the zero-initialized state."""
        self.security_root_path = None
        self.enforce_security = SecurityEnforcementPolicy.PERMISSIVE


def get_zero_initialized_security_options() -> SecurityOptions:
    """Return security options with every field at its zero value."""
    return SecurityOptions(SecurityEnforcementPolicy.PERMISSIVE, None)


def get_default_security_options() -> SecurityOptions:
    """Return the default security options: permissive, with no root path."""
    return SecurityOptions(SecurityEnforcementPolicy.PERMISSIVE, None)