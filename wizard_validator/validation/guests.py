"""Guest access policy: guests cannot reach fields or actions that need a user."""

from typing import Any

from wizard_validator.config.validation_config import GUEST_GROUP_ID, requires_user
from wizard_validator.schema import WizardSpec

from .messages import MessageKey
from .result import ValidationResult


class GuestAccessPolicy:
    """
    Rejects user-only fields and actions on wizards guests may run.

    Whether guests are permitted is decided once per wizard, from its
    ``permitted`` rules, when the policy is built.
    """

    def __init__(self, guests_permitted: bool) -> None:
        self.guests_permitted = guests_permitted

    @classmethod
    def for_wizard(
        cls, wizard: WizardSpec, guest_group_id: Any = GUEST_GROUP_ID
    ) -> "GuestAccessPolicy":
        """Build the policy for ``wizard``."""
        return cls(wizard.guests_permitted(guest_group_id))

    def check(self, obj, result: ValidationResult) -> None:
        if not self.guests_permitted:
            return
        if requires_user(obj.kind, obj.get_attribute("type")):
            result.add_error(
                MessageKey.NOT_PERMITTED_FOR_GUESTS, object_id=obj.id or ""
            )
