"""
Validator Config Module

Read-only rule tables used by the wizard validator.
"""

from .validation_config import (
    AFTER_SIGNUP_SETTING,
    GUEST_GROUP_ID,
    REQUIRED_ATTRIBUTES,
    REQUIRES_USER,
    TEMPLATE_ATTRIBUTES,
    get_required_attributes,
    requires_user,
)

__all__ = [
    "AFTER_SIGNUP_SETTING",
    "GUEST_GROUP_ID",
    "REQUIRED_ATTRIBUTES",
    "REQUIRES_USER",
    "TEMPLATE_ATTRIBUTES",
    "get_required_attributes",
    "requires_user",
]
