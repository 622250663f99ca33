"""Caller identity checks for owner- and admin-only operations"""

from typing import Optional
from remit_reporting.domain.exceptions import ConfigurationMissingError, UnauthorizedError


def require_caller(caller: str, required: str, action: str) -> None:
    """Raise unless the proven caller identity is the one the action needs"""
    if caller != required:
        raise UnauthorizedError(f"Only {required} can {action}")


def require_admin(caller: str, admin: Optional[str]) -> None:
    if admin is None:
        raise ConfigurationMissingError("Reporting admin not initialized")
    if caller != admin:
        raise UnauthorizedError("Only admin can configure addresses")
