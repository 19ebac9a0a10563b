"""Message keys and the default English catalog for validation errors."""

from enum import Enum
from typing import Dict


class MessageKey(str, Enum):
    """Stable identifiers for validation errors.

    Keys never change wording; rendering to text (and localisation) happens
    outside the validator through a catalog.
    """

    REQUIRED_PROPERTY_MISSING = "required_property_missing"
    IDENTIFIER_CONFLICT = "identifier_conflict"
    AFTER_SIGNUP_CONFLICT = "after_signup_conflict"
    AFTER_SIGNUP_AFTER_TIME_CONTRADICTION = "after_signup_after_time_contradiction"
    INVALID_ACTIVATION_TIME = "invalid_activation_time"
    MISSING_GROUP = "missing_group"
    NOT_PERMITTED_FOR_GUESTS = "not_permitted_for_guests"
    LIQUID_SYNTAX_ERROR = "liquid_syntax_error"
    SUBSCRIPTION_REQUIRED = "subscription_required"


DEFAULT_MESSAGES: Dict[MessageKey, str] = {
    MessageKey.REQUIRED_PROPERTY_MISSING: (
        "{property} is required on {kind} '{object_id}'"
    ),
    MessageKey.IDENTIFIER_CONFLICT: "Wizard with id '{wizard_id}' already exists",
    MessageKey.AFTER_SIGNUP_CONFLICT: (
        "You can only have one 'after signup' wizard at a time. "
        "{wizard_id} has 'after signup' enabled."
    ),
    MessageKey.AFTER_SIGNUP_AFTER_TIME_CONTRADICTION: (
        "You can't use 'after time' and 'after signup' on the same wizard."
    ),
    MessageKey.INVALID_ACTIVATION_TIME: "'after time' setting is invalid.",
    MessageKey.MISSING_GROUP: "'after time' group does not exist: {group_name}",
    MessageKey.NOT_PERMITTED_FOR_GUESTS: (
        "{object_id} is not permitted when guests can access the wizard"
    ),
    MessageKey.LIQUID_SYNTAX_ERROR: "Liquid syntax error in {attribute}: {message}",
    MessageKey.SUBSCRIPTION_REQUIRED: (
        "{kind} {attribute} requires a {tiers} subscription"
    ),
}
