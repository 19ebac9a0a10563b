"""Subscription gating of premium wizard features.

No gating rules ship with the validator.  Installations that sell tiers pass
their own :class:`SubscriptionRule` list to the validator, e.g.::

    rules = [
        SubscriptionRule(
            kind=ObjectKind.ACTION,
            attribute="type",
            value="send_to_api",
            tiers=frozenset({SubscriptionTier.BUSINESS}),
        ),
    ]
    WizardValidator(collaborators, subscription_rules=rules)
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence

from wizard_validator.schema import EntitlementContext, ObjectKind, SubscriptionTier

from .messages import MessageKey
from .result import ValidationResult
from .structure import is_blank


@dataclass(frozen=True)
class SubscriptionRule:
    """
    A feature reserved for some subscription tiers.

    Attributes:
        kind: Object kind the rule applies to.
        attribute: Attribute whose use is gated.
        value: When set, only this attribute value is gated (e.g. one
            action type); otherwise any non-blank value is.
        tiers: Tiers entitled to the feature.
        feature: Feature flag that also grants the feature, if any.
    """

    kind: ObjectKind
    attribute: str
    value: Optional[str] = None
    tiers: FrozenSet[SubscriptionTier] = frozenset()
    feature: Optional[str] = None

    def applies_to(self, obj) -> bool:
        """True when ``obj`` uses the gated feature."""
        if obj.kind != self.kind:
            return False
        current = obj.get_attribute(self.attribute)
        if is_blank(current):
            return False
        return self.value is None or str(current) == self.value

    def is_satisfied(self, entitlement: EntitlementContext) -> bool:
        """True when ``entitlement`` grants the feature."""
        if entitlement.tier in self.tiers:
            return True
        return self.feature is not None and entitlement.has_feature(self.feature)

    def describe_tiers(self) -> str:
        """Entitled tiers in tier order, e.g. ``"standard or business"``."""
        names = [tier.value for tier in SubscriptionTier if tier in self.tiers]
        return " or ".join(names) if names else "paid"


class SubscriptionGate:
    """Reports gated features used without the required subscription."""

    def __init__(
        self,
        entitlement: EntitlementContext,
        rules: Sequence[SubscriptionRule] = (),
    ) -> None:
        self.entitlement = entitlement
        self.rules = tuple(rules)

    def check(self, obj, result: ValidationResult) -> None:
        for rule in self.rules:
            if rule.applies_to(obj) and not rule.is_satisfied(self.entitlement):
                attribute = rule.attribute
                if rule.value is not None:
                    attribute = f"{rule.attribute} '{rule.value}'"
                result.add_error(
                    MessageKey.SUBSCRIPTION_REQUIRED,
                    kind=obj.kind.value,
                    object_id=obj.id or "",
                    attribute=attribute,
                    tiers=rule.describe_tiers(),
                )
