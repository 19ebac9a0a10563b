"""Read-only subscription entitlement of the caller."""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field

from .enums import SubscriptionTier


class EntitlementContext(BaseModel):
    """
    Subscription tier and feature flags the caller is entitled to.

    Fetching and caching this state is the caller's job; the validator only
    reads it.

    Examples:
        >>> context = EntitlementContext(tier="business", flags={"api_actions"})
        >>> context.has_feature("api_actions")
        True
    """

    model_config = ConfigDict(frozen=True)

    tier: SubscriptionTier = Field(
        SubscriptionTier.NONE, description="Current subscription tier"
    )

    flags: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Feature flags enabled by the subscription",
    )

    def has_feature(self, flag: str) -> bool:
        """Return True when ``flag`` is among the enabled feature flags."""
        return flag in self.flags
