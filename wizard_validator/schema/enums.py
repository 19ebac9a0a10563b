"""
Enumerations for the wizard schema.

Only closed vocabularies that the validator branches on are enums here.
Field and action ``type`` values stay free-form strings: the validator only
requires them to be present and compares them against the guest-restricted
sets in ``wizard_validator.config.validation_config``.
"""

from enum import Enum


class ObjectKind(str, Enum):
    """
    Kinds of object found in a wizard definition document.

    Every per-kind rule table (required attributes, guest restrictions,
    subscription rules) is keyed on this enum.
    """

    WIZARD = "wizard"
    STEP = "step"
    FIELD = "field"
    ACTION = "action"


class SubscriptionTier(str, Enum):
    """Subscription level of the installation validating the wizard."""

    NONE = "none"
    STANDARD = "standard"
    BUSINESS = "business"
    COMMUNITY = "community"
