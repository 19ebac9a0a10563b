"""Validation engine for wizard definition documents.

Runs every rule over a candidate ``WizardSpec`` in one pass and collects the
errors on a :class:`ValidationResult` instead of stopping at the first one.
Wizard-level errors end the pass early; below the wizard level every check
runs and all errors accumulate.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from wizard_validator.providers.collaborators import Collaborators
from wizard_validator.schema import ValidationOptions, WizardSpec
from wizard_validator.utils.logging_utils import get_logger

from .guests import GuestAccessPolicy
from .result import ValidationResult
from .schedule import ScheduleValidator
from .structure import IdentifierConflictChecker, RequiredAttributeChecker
from .subscription import SubscriptionGate, SubscriptionRule
from .templates import TemplateSyntaxChecker

LOGGER = get_logger(__name__)

WizardDocument = Union[WizardSpec, Mapping[str, Any]]


class WizardValidator:
    """
    Validator for wizard definitions.

    The validator holds no per-pass state: each call to :meth:`validate`
    gets its own :class:`ValidationResult`, and the same document, options
    and collaborator answers always give the same result.

    Usage:
        >>> validator = WizardValidator(Collaborators(wizard_store=store))
        >>> result = validator.validate(document, ValidationOptions(create=True))
        >>> if not result:
        ...     print(result)
    """

    def __init__(
        self,
        collaborators: Optional[Collaborators] = None,
        subscription_rules: Sequence[SubscriptionRule] = (),
    ) -> None:
        if collaborators is None:
            collaborators = Collaborators()
        self.collaborators = collaborators
        c = collaborators

        self.required = RequiredAttributeChecker()
        self.identifiers = IdentifierConflictChecker(c.wizard_store)
        self.schedule = ScheduleValidator(c.wizard_store, c.group_directory, c.clock)
        self.subscription = SubscriptionGate(c.entitlement, subscription_rules)
        self.templates = TemplateSyntaxChecker(c.template_parser)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(
        self,
        document: WizardDocument,
        options: Union[ValidationOptions, Mapping[str, Any], None] = None,
    ) -> ValidationResult:
        """Validate *document* and return a :class:`ValidationResult`.

        Raises:
            pydantic.ValidationError: If a dict document has ill-typed values.
            LookupFailedError: If a collaborator lookup fails.
        """
        wizard = _as_wizard(document)
        options = _as_options(options)
        result = ValidationResult()

        LOGGER.debug("Validating wizard %r (create=%s)", wizard.id, options.create)

        self._check_wizard(wizard, options, result)
        if not result.accepted:
            LOGGER.info(
                "Wizard %r rejected with %d wizard-level error(s)",
                wizard.id,
                len(result),
            )
            return result

        guests = GuestAccessPolicy.for_wizard(wizard)
        self._check_steps(wizard, guests, result)
        self._check_actions(wizard, guests, result)

        if result.accepted:
            LOGGER.debug("Wizard %r accepted", wizard.id)
        else:
            LOGGER.info("Wizard %r rejected with %d error(s)", wizard.id, len(result))
        for entry in result.errors:
            LOGGER.trace(
                "Wizard %r: %s %s", wizard.id, entry.key.value, dict(entry.params)
            )
        return result

    # ------------------------------------------------------------------
    # Document levels
    # ------------------------------------------------------------------

    def _check_wizard(
        self,
        wizard: WizardSpec,
        options: ValidationOptions,
        result: ValidationResult,
    ) -> None:
        self.identifiers.check(wizard, options, result)
        self.required.check(wizard, result)
        self.schedule.check(wizard, options, result)
        self.subscription.check(wizard, result)

    def _check_steps(
        self,
        wizard: WizardSpec,
        guests: GuestAccessPolicy,
        result: ValidationResult,
    ) -> None:
        for step in wizard.steps or ():
            self.required.check(step, result)
            self.subscription.check(step, result)
            self.templates.check(step, result)

            for field in step.fields:
                self.subscription.check(field, result)
                self.required.check(field, result)
                self.templates.check(field, result)
                guests.check(field, result)

    def _check_actions(
        self,
        wizard: WizardSpec,
        guests: GuestAccessPolicy,
        result: ValidationResult,
    ) -> None:
        for action in wizard.actions:
            self.subscription.check(action, result)
            self.required.check(action, result)
            self.templates.check(action, result)
            guests.check(action, result)


def _as_wizard(document: WizardDocument) -> WizardSpec:
    if isinstance(document, WizardSpec):
        return document
    return WizardSpec.model_validate(dict(document))


def _as_options(
    options: Union[ValidationOptions, Mapping[str, Any], None],
) -> ValidationOptions:
    if options is None:
        return ValidationOptions()
    if isinstance(options, ValidationOptions):
        return options
    return ValidationOptions.model_validate(dict(options))


def validate_wizard(
    document: WizardDocument,
    options: Union[ValidationOptions, Mapping[str, Any], None] = None,
    collaborators: Optional[Collaborators] = None,
    subscription_rules: Sequence[SubscriptionRule] = (),
) -> ValidationResult:
    """Convenience function: validate a wizard definition.

    Args:
        document: A ``WizardSpec`` or a dict matching its schema.
        options: Validation options (``{"create": True}`` for new wizards).
        collaborators: External services; in-memory defaults when omitted.
        subscription_rules: Gated features for this installation.

    Returns:
        A :class:`ValidationResult` with the ordered errors.
    """
    validator = WizardValidator(collaborators, subscription_rules)
    return validator.validate(document, options)
