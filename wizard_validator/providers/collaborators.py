"""Bundle of the external services a validation pass depends on."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from wizard_validator.providers.group_directory import (
    GroupDirectory,
    InMemoryGroupDirectory,
)
from wizard_validator.providers.in_memory_wizard_store import InMemoryWizardStore
from wizard_validator.providers.template_parser import (
    LiquidTemplateParser,
    TemplateParser,
)
from wizard_validator.providers.wizard_store import WizardStore
from wizard_validator.schema import EntitlementContext


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Collaborators:
    """
    External services injected into :class:`WizardValidator`.

    Attributes:
        wizard_store: Lookups against persisted wizards.
        group_directory: Group existence lookups.
        template_parser: Template syntax checker.
        entitlement: The caller's subscription entitlement.
        clock: Returns the current time (timezone-aware).

    Every attribute has a default suitable for tests and local use: empty
    in-memory store and directory, the Liquid parser, no subscription and
    the system clock.
    """

    wizard_store: WizardStore = field(default_factory=InMemoryWizardStore)
    group_directory: GroupDirectory = field(default_factory=InMemoryGroupDirectory)
    template_parser: TemplateParser = field(default_factory=LiquidTemplateParser)
    entitlement: EntitlementContext = field(default_factory=EntitlementContext)
    clock: Callable[[], datetime] = utc_now
