"""Structural checks: required attributes and identifier conflicts."""

from typing import Any, Mapping, Optional, Tuple

from wizard_validator.config.validation_config import get_required_attributes
from wizard_validator.providers.wizard_store import WizardStore
from wizard_validator.schema import ObjectKind, ValidationOptions, WizardSpec

from .errors import guarded_lookup
from .messages import MessageKey
from .result import ValidationResult


def is_blank(value: Any) -> bool:
    """True for None, False, whitespace-only strings and empty collections."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class RequiredAttributeChecker:
    """Reports every blank required attribute of an object, one error each."""

    def __init__(
        self, required: Optional[Mapping[ObjectKind, Tuple[str, ...]]] = None
    ) -> None:
        # None means the built-in table
        self.required = required

    def _required_for(self, kind: ObjectKind) -> Tuple[str, ...]:
        if self.required is None:
            return get_required_attributes(kind)
        return tuple(self.required.get(kind, ()))

    def check(self, obj, result: ValidationResult) -> None:
        for prop in self._required_for(obj.kind):
            if is_blank(obj.get_attribute(prop)):
                result.add_error(
                    MessageKey.REQUIRED_PROPERTY_MISSING,
                    property=prop,
                    kind=obj.kind.value,
                    object_id=obj.id or "",
                )


class IdentifierConflictChecker:
    """Rejects a new wizard whose id is already stored."""

    def __init__(self, wizard_store: WizardStore) -> None:
        self.wizard_store = wizard_store

    def check(
        self,
        wizard: WizardSpec,
        options: ValidationOptions,
        result: ValidationResult,
    ) -> None:
        # A blank id is reported by the required-attribute check
        if not options.create or is_blank(wizard.id):
            return
        if guarded_lookup("wizard_exists", self.wizard_store.wizard_exists, wizard.id):
            result.add_error(MessageKey.IDENTIFIER_CONFLICT, wizard_id=wizard.id)
