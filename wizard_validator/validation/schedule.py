"""Checks for the two wizard activation modes, "after signup" and "after time".

Only one wizard in the system may be shown after signup, and a wizard cannot
use both modes at once.  A time-activated wizard needs a parseable
activation time that is not in the past, and every group it targets must
exist.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from wizard_validator.config.validation_config import AFTER_SIGNUP_SETTING
from wizard_validator.providers.group_directory import GroupDirectory
from wizard_validator.providers.wizard_store import WizardStore
from wizard_validator.schema import ValidationOptions, WizardSpec
from wizard_validator.utils.logging_utils import get_logger

from .errors import guarded_lookup
from .messages import MessageKey
from .result import ValidationResult
from .structure import is_blank

LOGGER = get_logger(__name__)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp into an aware UTC datetime.

    A trailing ``Z`` is accepted and naive values are taken as UTC.
    Returns None when ``value`` cannot be parsed.
    """
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        # Offsets at the ends of the datetime range overflow on conversion
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


class ScheduleValidator:
    """Validates the "after signup" and "after time" settings of a wizard."""

    def __init__(
        self,
        wizard_store: WizardStore,
        group_directory: GroupDirectory,
        clock: Callable[[], datetime],
    ) -> None:
        self.wizard_store = wizard_store
        self.group_directory = group_directory
        self.clock = clock

    def check(
        self,
        wizard: WizardSpec,
        options: ValidationOptions,
        result: ValidationResult,
    ) -> None:
        self._check_after_signup(wizard, result)
        self._check_after_time(wizard, options, result)

    # ------------------------------------------------------------------
    # After signup
    # ------------------------------------------------------------------

    def _check_after_signup(self, wizard: WizardSpec, result: ValidationResult) -> None:
        if not wizard.after_signup:
            return

        others = [
            other
            for other in guarded_lookup(
                "list_wizards_by_setting",
                self.wizard_store.list_wizards_by_setting,
                AFTER_SIGNUP_SETTING,
            )
            if other.id != wizard.id
        ]
        if others:
            result.add_error(MessageKey.AFTER_SIGNUP_CONFLICT, wizard_id=others[0].id)

    # ------------------------------------------------------------------
    # After time
    # ------------------------------------------------------------------

    def _check_after_time(
        self,
        wizard: WizardSpec,
        options: ValidationOptions,
        result: ValidationResult,
    ) -> None:
        if not wizard.after_time:
            return

        if wizard.after_signup:
            result.add_error(MessageKey.AFTER_SIGNUP_AFTER_TIME_CONTRADICTION)
            return

        active_time = self._resolve_active_time(wizard, options)
        if active_time is None or active_time < self._now():
            result.add_error(MessageKey.INVALID_ACTIVATION_TIME)

        for group_name in wizard.after_time_groups or ():
            exists = guarded_lookup(
                "group_exists", self.group_directory.group_exists, group_name
            )
            if not exists:
                result.add_error(MessageKey.MISSING_GROUP, group_name=group_name)

    def _resolve_active_time(
        self, wizard: WizardSpec, options: ValidationOptions
    ) -> Optional[datetime]:
        """New scheduled time if set, else the stored one (never when creating)."""
        current_time = None
        if not options.create:
            current = guarded_lookup(
                "current_wizard", self.wizard_store.current_wizard, wizard.id
            )
            if current is not None:
                current_time = current.after_time_scheduled

        new_time = wizard.after_time_scheduled
        raw = new_time if not is_blank(new_time) else current_time
        if is_blank(raw):
            return None

        active_time = parse_timestamp(raw)
        if active_time is None:
            LOGGER.debug("Unparseable activation time %r for %s", raw, wizard.id)
        return active_time

    def _now(self) -> datetime:
        now = guarded_lookup("clock", self.clock)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now
