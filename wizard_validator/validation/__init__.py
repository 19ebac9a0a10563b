"""
Validation engine for wizard definitions.

Checks required attributes, identifier conflicts, scheduling, subscription
gating, guest access and Liquid template syntax, reporting every problem in
one pass.

Usage:
    >>> from wizard_validator.validation import validate_wizard
    >>> from wizard_validator.loaders import load_wizard_from_yaml
    >>>
    >>> wizard = load_wizard_from_yaml("welcome.yaml")
    >>> result = validate_wizard(wizard, {"create": True})
    >>>
    >>> if not result:
    ...     print(result)
"""

from .errors import LookupFailedError, WizardValidationError
from .guests import GuestAccessPolicy
from .messages import DEFAULT_MESSAGES, MessageKey
from .result import ErrorEntry, ValidationResult
from .schedule import ScheduleValidator, parse_timestamp
from .structure import IdentifierConflictChecker, RequiredAttributeChecker, is_blank
from .subscription import SubscriptionGate, SubscriptionRule
from .templates import TemplateSyntaxChecker
from .validator import WizardValidator, validate_wizard

__all__ = [
    # Result
    "ValidationResult",
    "ErrorEntry",
    "MessageKey",
    "DEFAULT_MESSAGES",
    # Exceptions
    "WizardValidationError",
    "LookupFailedError",
    # Checks
    "RequiredAttributeChecker",
    "IdentifierConflictChecker",
    "ScheduleValidator",
    "GuestAccessPolicy",
    "SubscriptionGate",
    "SubscriptionRule",
    "TemplateSyntaxChecker",
    "is_blank",
    "parse_timestamp",
    # Orchestrator
    "WizardValidator",
    "validate_wizard",
]
