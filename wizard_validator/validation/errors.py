"""Exceptions raised by the wizard validator.

Document problems are never raised; they are recorded on a
:class:`~wizard_validator.validation.result.ValidationResult`.  Only failures
of the injected collaborators use the exception channel.
"""

from typing import Any, Callable, TypeVar

from wizard_validator.utils.logging_utils import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")


class WizardValidationError(Exception):
    """Base class for wizard validator exceptions."""


class LookupFailedError(WizardValidationError):
    """A collaborator lookup raised, so the validation pass was aborted.

    Attributes:
        lookup: Name of the failed lookup (e.g. ``"group_exists"``).
        subject: What was being looked up (a wizard id, a group name, ...).
    """

    def __init__(self, lookup: str, subject: object = None) -> None:
        self.lookup = lookup
        self.subject = subject
        detail = f" for {subject!r}" if subject is not None else ""
        super().__init__(f"Lookup '{lookup}' failed{detail}")


def guarded_lookup(lookup: str, func: Callable[..., T], *args: Any) -> T:
    """Call a collaborator, converting any exception into ``LookupFailedError``.

    The first positional argument, if any, is reported as the lookup subject.
    """
    try:
        return func(*args)
    except LookupFailedError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        subject = args[0] if args else None
        LOGGER.error("Lookup '%s' failed for %r: %s", lookup, subject, exc)
        raise LookupFailedError(lookup, subject) from exc
