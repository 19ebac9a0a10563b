"""
Module: validation_config

Static rule tables used by the wizard validator. All tables are read-only:
mappings are wrapped in ``MappingProxyType`` and sets are ``frozenset`` so a
caller cannot change validation behaviour for everyone else at runtime.
Per-installation rules (subscription gating) are injected into the validator
instead of being configured here.

Tables:
    - REQUIRED_ATTRIBUTES: attributes every object of a kind must carry.
    - TEMPLATE_ATTRIBUTES: attributes holding Liquid templates.
    - REQUIRES_USER: field/action types that need a signed-in user.
    - GUEST_GROUP_ID: group id meaning "everyone, including guests".

Example:
    from wizard_validator.config.validation_config import get_required_attributes
    from wizard_validator.schema import ObjectKind

    get_required_attributes(ObjectKind.FIELD)  # ("id", "type")
"""

from types import MappingProxyType
from typing import Optional, Tuple

from wizard_validator.schema.enums import ObjectKind

REQUIRED_ATTRIBUTES = MappingProxyType(
    {
        ObjectKind.WIZARD: ("id", "name", "steps"),
        ObjectKind.STEP: ("id",),
        ObjectKind.FIELD: ("id", "type"),
        ObjectKind.ACTION: ("id", "type"),
    }
)

TEMPLATE_ATTRIBUTES: Tuple[str, ...] = (
    "description",
    "raw_description",
    "placeholder",
    "preview_template",
    "post_template",
)

GUEST_GROUP_ID = -1

REQUIRES_USER = MappingProxyType(
    {
        ObjectKind.WIZARD: frozenset(),
        ObjectKind.STEP: frozenset(),
        ObjectKind.FIELD: frozenset({"upload"}),
        ObjectKind.ACTION: frozenset(
            {
                "update_profile",
                "open_composer",
                "watch_categories",
                "watch_tags",
                "add_to_group",
            }
        ),
    }
)

# Setting name used to list the wizards shown after signup
AFTER_SIGNUP_SETTING = "after_signup"


def get_required_attributes(kind: ObjectKind) -> Tuple[str, ...]:
    """
    Return the attributes an object of ``kind`` must carry, in report order.

    :param kind: The object kind.
    :type kind: ObjectKind
    :return: Tuple of attribute names.
    :rtype: tuple
    """
    return REQUIRED_ATTRIBUTES[ObjectKind(kind)]


def requires_user(kind: ObjectKind, object_type: Optional[str]) -> bool:
    """
    Return True when objects of ``kind`` and ``object_type`` need a signed-in user.

    :param kind: The object kind.
    :type kind: ObjectKind
    :param object_type: The ``type`` attribute of the object, if any.
    :type object_type: str or None
    :return: Whether guests must be kept away from this object.
    :rtype: bool
    """
    if not object_type:
        return False
    return object_type in REQUIRES_USER[ObjectKind(kind)]
