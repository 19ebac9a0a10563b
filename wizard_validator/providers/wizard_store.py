"""
Module: WizardStore

This module defines the `WizardStore` interface, the read-only view of
persisted wizard definitions that the validator queries. Persistence itself
(saving, deleting, caching) belongs to the host application; the validator
only asks whether a wizard exists, which wizards have a setting enabled, and
what the stored copy of a wizard looks like.

Classes:
    - WizardStore: Interface for persisted wizard lookups.

Methods:
    - wizard_exists(wizard_id):
      Checks whether a wizard with the given id is stored.
    - list_wizards_by_setting(setting):
      Lists stored wizards that have a boolean setting enabled.
    - current_wizard(wizard_id):
      Returns the stored copy of a wizard, if any.

Example:
    class DatabaseWizardStore(WizardStore):
        def wizard_exists(self, wizard_id):
            return self.session.query(...).exists()
"""

from typing import List, Optional

from wizard_validator.schema import WizardSpec


class WizardStore:
    """
    Interface for looking up persisted wizard definitions.

    Implementations may raise on infrastructure failures (database down,
    timeouts); the validator converts such exceptions into a
    ``LookupFailedError`` instead of reporting a document error.
    """

    def wizard_exists(self, wizard_id: str) -> bool:
        """
        Checks whether a wizard with ``wizard_id`` is already stored.

        :param wizard_id: Identifier of the wizard.
        :type wizard_id: str
        :return: True if a stored wizard has this id.
        :rtype: bool
        :raises NotImplementedError: Must be implemented in a subclass.
        """
        raise NotImplementedError

    def list_wizards_by_setting(self, setting: str) -> List[WizardSpec]:
        """
        Lists stored wizards whose boolean ``setting`` is enabled.

        :param setting: Attribute name, e.g. ``"after_signup"``.
        :type setting: str
        :return: Stored wizards with the setting enabled, in storage order.
        :rtype: list of WizardSpec
        :raises NotImplementedError: Must be implemented in a subclass.
        """
        raise NotImplementedError

    def current_wizard(self, wizard_id: str) -> Optional[WizardSpec]:
        """
        Returns the stored copy of the wizard with ``wizard_id``.

        :param wizard_id: Identifier of the wizard.
        :type wizard_id: str
        :return: The stored wizard, or None when it is not stored.
        :rtype: WizardSpec or None
        :raises NotImplementedError: Must be implemented in a subclass.
        """
        raise NotImplementedError
