"""
wizard_validator: validation of wizard definitions before they are stored.

A wizard definition describes an interactive multi-step flow: wizard
metadata, ordered steps holding fields, and optional actions. The validator
checks a candidate definition in one pass and returns every problem found:

- Required attributes per object kind
- Identifier conflicts when creating a wizard
- "After signup" / "after time" scheduling rules
- Subscription gating of premium features (injected rules)
- Guest access to fields and actions that need a signed-in user
- Liquid template syntax of text attributes

Persistence, group lookups, the template engine, the clock and the caller's
subscription are injected as collaborators (see ``wizard_validator.providers``).

Example:
    >>> from wizard_validator import validate_wizard
    >>> result = validate_wizard({"id": "w1", "name": "W", "steps": [{"id": "s1"}]})
    >>> result.accepted
    True
"""

__version__ = "0.1.0"

from .loaders import load_wizard_from_dict, load_wizard_from_json, load_wizard_from_yaml
from .providers import Collaborators
from .schema import EntitlementContext, ValidationOptions, WizardSpec
from .validation import (
    LookupFailedError,
    SubscriptionRule,
    ValidationResult,
    WizardValidator,
    validate_wizard,
)

__all__ = [
    "__version__",
    "Collaborators",
    "EntitlementContext",
    "LookupFailedError",
    "SubscriptionRule",
    "ValidationOptions",
    "ValidationResult",
    "WizardSpec",
    "WizardValidator",
    "load_wizard_from_dict",
    "load_wizard_from_json",
    "load_wizard_from_yaml",
    "validate_wizard",
]
