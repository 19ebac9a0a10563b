"""
Wizard Schema Module

Pydantic models for wizard definition documents and the read-only context
objects passed to the validator.

Modules:
- enums.py: Closed vocabularies (object kinds, subscription tiers)
- wizard_spec.py: Wizard, step, field and action models plus validation options
- entitlement.py: Subscription entitlement context
"""

from .entitlement import EntitlementContext
from .enums import ObjectKind, SubscriptionTier
from .wizard_spec import (
    ActionSpec,
    FieldSpec,
    PermissionRule,
    StepSpec,
    ValidationOptions,
    WizardSpec,
)

__all__ = [
    # Enums
    "ObjectKind",
    "SubscriptionTier",
    # Document
    "WizardSpec",
    "StepSpec",
    "FieldSpec",
    "ActionSpec",
    "PermissionRule",
    # Context
    "ValidationOptions",
    "EntitlementContext",
]
