"""Tests for the validation rule tables.

Tests the read-only configuration helpers:
- get_required_attributes: Required attributes per object kind
- requires_user: Guest-restricted field and action types
"""

# pylint: disable=missing-function-docstring

import pytest

from wizard_validator.config.validation_config import (
    GUEST_GROUP_ID,
    REQUIRED_ATTRIBUTES,
    REQUIRES_USER,
    TEMPLATE_ATTRIBUTES,
    get_required_attributes,
    requires_user,
)
from wizard_validator.schema import ObjectKind


class TestRequiredAttributes:
    """Tests for REQUIRED_ATTRIBUTES and get_required_attributes."""

    def test_every_kind_has_required_attributes(self):
        for kind in ObjectKind:
            assert get_required_attributes(kind)

    def test_required_sets(self):
        assert get_required_attributes(ObjectKind.WIZARD) == ("id", "name", "steps")
        assert get_required_attributes(ObjectKind.STEP) == ("id",)
        assert get_required_attributes(ObjectKind.FIELD) == ("id", "type")
        assert get_required_attributes(ObjectKind.ACTION) == ("id", "type")

    def test_accepts_kind_value_strings(self):
        assert get_required_attributes("field") == ("id", "type")

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            REQUIRED_ATTRIBUTES[ObjectKind.STEP] = ("id", "title")


class TestRequiresUser:
    """Tests for REQUIRES_USER and requires_user."""

    def test_every_kind_has_an_entry(self):
        assert set(REQUIRES_USER) == set(ObjectKind)

    @pytest.mark.parametrize(
        "action_type",
        ["update_profile", "open_composer", "watch_categories", "add_to_group"],
    )
    def test_user_only_actions(self, action_type):
        assert requires_user(ObjectKind.ACTION, action_type) is True

    def test_guest_friendly_action(self):
        assert requires_user(ObjectKind.ACTION, "create_topic") is False

    def test_upload_field_needs_user(self):
        assert requires_user(ObjectKind.FIELD, "upload") is True
        assert requires_user(ObjectKind.FIELD, "text") is False

    def test_missing_type_never_needs_user(self):
        assert requires_user(ObjectKind.FIELD, None) is False
        assert requires_user(ObjectKind.ACTION, "") is False


def test_template_attributes():
    assert TEMPLATE_ATTRIBUTES == (
        "description",
        "raw_description",
        "placeholder",
        "preview_template",
        "post_template",
    )


def test_guest_group_id():
    assert GUEST_GROUP_ID == -1
