"""
Module: InMemoryWizardStore

In-memory implementation of `WizardStore`. Suitable for tests, the
command-line tool and local development; it holds wizard definitions in a
dictionary keyed by wizard id, in insertion order.

Example:
    store = InMemoryWizardStore([WizardSpec(id="welcome", after_signup=True)])
    store.wizard_exists("welcome")                       # True
    store.list_wizards_by_setting("after_signup")        # [WizardSpec(...)]
"""

from typing import Dict, Iterable, List, Optional

from wizard_validator.providers.wizard_store import WizardStore
from wizard_validator.schema import WizardSpec


class InMemoryWizardStore(WizardStore):
    """
    Stores wizard definitions in a dictionary.

    Wizards without an id cannot be looked up and are rejected by ``add``.
    """

    def __init__(self, wizards: Optional[Iterable[WizardSpec]] = None) -> None:
        self.wizards: Dict[str, WizardSpec] = {}
        for wizard in wizards or ():
            self.add(wizard)

    def add(self, wizard: WizardSpec) -> None:
        """
        Stores ``wizard``, replacing any stored wizard with the same id.

        :param wizard: The wizard to store.
        :type wizard: WizardSpec
        :raises ValueError: If the wizard has no id.
        """
        if not wizard.id:
            raise ValueError("Cannot store a wizard without an id")
        self.wizards[wizard.id] = wizard

    def wizard_exists(self, wizard_id: str) -> bool:
        return wizard_id in self.wizards

    def list_wizards_by_setting(self, setting: str) -> List[WizardSpec]:
        return [
            wizard
            for wizard in self.wizards.values()
            if bool(wizard.get_attribute(setting))
        ]

    def current_wizard(self, wizard_id: str) -> Optional[WizardSpec]:
        return self.wizards.get(wizard_id)
