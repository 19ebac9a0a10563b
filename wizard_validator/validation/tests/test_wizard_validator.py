"""Tests for the WizardValidator orchestrator."""

# pylint: disable=missing-function-docstring,redefined-outer-name

import pytest

from wizard_validator.schema import (
    ObjectKind,
    SubscriptionTier,
    ValidationOptions,
    WizardSpec,
)
from wizard_validator.validation import (
    LookupFailedError,
    MessageKey,
    SubscriptionRule,
    WizardValidator,
    validate_wizard,
)


@pytest.fixture
def validator(collaborators):
    return WizardValidator(collaborators)


def _subject(entry):
    """What an error is about: object kind, object id or template attribute."""
    params = entry.params
    return params.get("kind") or params.get("object_id") or params.get("attribute")


# =========================================================================
# ACCEPTANCE
# =========================================================================


def test_minimal_wizard_is_accepted(validator, make_wizard):
    """A wizard with all required attributes and no rules in play passes."""
    result = validator.validate(make_wizard())

    assert result.accepted is True
    assert result.errors == []


def test_scheduled_wizard_in_future_is_accepted(validator):
    """after_time with a future timestamp and no groups is accepted."""
    document = {
        "id": "w1",
        "name": "W",
        "steps": [{"id": "s1"}],
        "after_time": True,
        "after_time_scheduled": "2099-01-01T00:00:00Z",
    }

    result = validator.validate(document)

    assert result.accepted is True
    assert result.errors == []


def test_accepts_wizard_spec_instance(validator, make_wizard):
    result = validator.validate(WizardSpec.model_validate(make_wizard()))

    assert result.accepted is True


def test_options_accept_mapping(validator, store, make_wizard):
    store.add(WizardSpec(id="w1", name="Stored"))

    result = validator.validate(make_wizard(), {"create": True})

    assert result.has_error(MessageKey.IDENTIFIER_CONFLICT, wizard_id="w1")


def test_validate_wizard_convenience(collaborators, make_wizard):
    result = validate_wizard(make_wizard(), collaborators=collaborators)

    assert result.accepted is True


# =========================================================================
# WIZARD-LEVEL ERRORS
# =========================================================================


def test_missing_name_reports_exactly_one_error(validator, make_wizard):
    """A wizard without a name gets exactly one error for 'name'."""
    document = make_wizard()
    del document["name"]

    result = validator.validate(document)

    assert result.accepted is False
    name_errors = [
        e
        for e in result.errors
        if e.key == MessageKey.REQUIRED_PROPERTY_MISSING
        and e.params["property"] == "name"
    ]
    assert len(name_errors) == 1


def test_blank_wizard_reports_each_missing_attribute(validator):
    """Missing id, blank name and empty steps are each reported, in order."""
    result = validator.validate({"name": "  ", "steps": []})

    assert [e.params["property"] for e in result.errors] == ["id", "name", "steps"]


def test_wizard_level_errors_stop_descent(validator, parser):
    """Step/field problems are not reported when the wizard level failed."""
    document = {
        "id": "w1",
        "steps": [
            {
                "id": "s1",
                "fields": [{"id": "f1", "description": "{% broken %}"}],
            }
        ],
    }

    result = validator.validate(document)

    assert [e.params.get("property") for e in result.errors] == ["name"]
    assert parser.parsed == []


def test_identifier_conflict_on_create(validator, store, make_wizard):
    store.add(WizardSpec(id="w1", name="Stored"))

    result = validator.validate(make_wizard(), ValidationOptions(create=True))

    assert result.accepted is False
    assert result.has_error(MessageKey.IDENTIFIER_CONFLICT, wizard_id="w1")


def test_identifier_conflict_ignored_on_update(validator, store, make_wizard):
    store.add(WizardSpec(id="w1", name="Stored"))

    result = validator.validate(make_wizard(), ValidationOptions(create=False))

    assert result.accepted is True


def test_after_signup_conflict(validator, store):
    """Another stored after-signup wizard blocks this one."""
    store.add(WizardSpec(id="other", name="Other", after_signup=True))
    document = {
        "id": "w1",
        "name": "W",
        "steps": [{"id": "s1"}],
        "after_signup": True,
    }

    result = validator.validate(document)

    assert result.accepted is False
    assert result.has_error(MessageKey.AFTER_SIGNUP_CONFLICT, wizard_id="other")


def test_both_schedules_give_one_contradiction_only(validator, make_wizard):
    result = validator.validate(make_wizard(after_signup=True, after_time=True))

    assert [e.key for e in result.errors] == [
        MessageKey.AFTER_SIGNUP_AFTER_TIME_CONTRADICTION
    ]


def test_after_time_without_any_time_is_rejected(validator, make_wizard):
    result = validator.validate(make_wizard(after_time=True))

    assert result.accepted is False
    assert result.has_error(MessageKey.INVALID_ACTIVATION_TIME)


def test_after_time_in_past_is_rejected(validator, make_wizard):
    result = validator.validate(
        make_wizard(after_time=True, after_time_scheduled="2020-05-01T00:00:00Z")
    )

    assert result.accepted is False
    assert result.has_error(MessageKey.INVALID_ACTIVATION_TIME)


# =========================================================================
# TREE WALK
# =========================================================================


def test_field_missing_type(validator):
    """Example: a field without a type is rejected."""
    document = {
        "id": "w1",
        "name": "Wizard",
        "steps": [{"id": "s1", "fields": [{"id": "f1"}]}],
    }

    result = validator.validate(document)

    assert result.accepted is False
    assert result.has_error(
        MessageKey.REQUIRED_PROPERTY_MISSING,
        property="type",
        kind="field",
        object_id="f1",
    )


def test_missing_attribute_names_each_object(validator):
    """Sibling fields missing the same attribute are reported separately."""
    document = {
        "id": "w1",
        "name": "Wizard",
        "steps": [{"id": "s1", "fields": [{"id": "f1"}, {"id": "f2"}]}],
    }

    result = validator.validate(document)

    assert [e.params for e in result.errors] == [
        {"property": "type", "kind": "field", "object_id": "f1"},
        {"property": "type", "kind": "field", "object_id": "f2"},
    ]
    assert result.errors[0] != result.errors[1]


def test_errors_accumulate_across_steps_fields_and_actions(validator):
    """Problems in sibling objects are all reported in one pass, in walk order."""
    document = {
        "id": "w1",
        "name": "W",
        "permitted": [{"output": [-1]}],
        "steps": [
            {"id": "s1", "fields": [{"id": "f1"}, {"type": "text"}]},
            {"fields": [{"id": "f3", "type": "upload"}]},
        ],
        "actions": [
            {"id": "a1"},
            {"id": "a2", "type": "update_profile", "post_template": "{% broken %}"},
        ],
    }

    result = validator.validate(document)

    assert [(e.key, _subject(e)) for e in result.errors] == [
        (MessageKey.REQUIRED_PROPERTY_MISSING, "field"),
        (MessageKey.REQUIRED_PROPERTY_MISSING, "field"),
        (MessageKey.REQUIRED_PROPERTY_MISSING, "step"),
        (MessageKey.NOT_PERMITTED_FOR_GUESTS, "f3"),
        (MessageKey.REQUIRED_PROPERTY_MISSING, "action"),
        (MessageKey.LIQUID_SYNTAX_ERROR, "a2.post_template"),
        (MessageKey.NOT_PERMITTED_FOR_GUESTS, "a2"),
    ]


def test_step_templates_are_checked(validator, make_wizard):
    document = make_wizard(steps=[{"id": "s1", "raw_description": "{% broken %}"}])

    result = validator.validate(document)

    assert result.has_error(
        MessageKey.LIQUID_SYNTAX_ERROR, attribute="s1.raw_description"
    )


def test_guest_permitted_action_requiring_user(validator, make_wizard):
    document = make_wizard(
        permitted=[{"output": [-1]}],
        actions=[{"id": "a1", "type": "add_to_group"}],
    )

    result = validator.validate(document)

    assert result.accepted is False
    assert result.has_error(MessageKey.NOT_PERMITTED_FOR_GUESTS, object_id="a1")


def test_subscription_rules_are_applied(collaborators, make_wizard):
    rules = [
        SubscriptionRule(
            kind=ObjectKind.ACTION,
            attribute="type",
            value="send_to_api",
            tiers=frozenset({SubscriptionTier.BUSINESS}),
        )
    ]
    validator = WizardValidator(collaborators, subscription_rules=rules)
    document = make_wizard(actions=[{"id": "a1", "type": "send_to_api"}])

    result = validator.validate(document)

    assert result.has_error(MessageKey.SUBSCRIPTION_REQUIRED, object_id="a1")


def test_validation_is_idempotent(validator, store):
    store.add(WizardSpec(id="other", name="Other", after_signup=True))
    document = {
        "id": "w1",
        "name": "W",
        "after_signup": True,
        "steps": [{"id": "s1", "fields": [{"id": "f1"}]}],
    }

    first = validator.validate(document)
    second = validator.validate(document)

    assert first.accepted == second.accepted
    assert first.errors == second.errors


def test_validation_does_not_mutate_document(validator, make_wizard):
    document = make_wizard(after_time=True)
    snapshot = repr(document)

    validator.validate(document)

    assert repr(document) == snapshot


# =========================================================================
# COLLABORATOR FAILURES
# =========================================================================


class _BrokenGroups:
    def group_exists(self, name):
        raise ConnectionError("directory unreachable")


def test_group_lookup_failure_raises(collaborators, make_wizard):
    collaborators.group_directory = _BrokenGroups()
    validator = WizardValidator(collaborators)
    document = make_wizard(
        after_time=True,
        after_time_scheduled="2099-01-01T00:00:00Z",
        after_time_groups=["staff"],
    )

    with pytest.raises(LookupFailedError) as excinfo:
        validator.validate(document)

    assert excinfo.value.lookup == "group_exists"
    assert excinfo.value.subject == "staff"
    assert isinstance(excinfo.value.__cause__, ConnectionError)
