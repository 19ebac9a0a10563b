"""
YAML, JSON and dict loaders for wizard definition documents.

Pydantic parses the nested ``steps``, ``fields`` and ``actions`` lists into
their models and coerces the boolean scheduling flags, so a loaded document
is ready for :func:`wizard_validator.validation.validate_wizard`.

Usage::

    from wizard_validator.loaders import load_wizard_from_yaml, load_wizard_from_dict

    # From YAML
    wizard = load_wizard_from_yaml("path/to/welcome.yaml")

    # From dict
    wizard = load_wizard_from_dict({
        "id": "welcome",
        "name": "Welcome",
        "steps": [{"id": "step_1"}],
    })
"""

import json
from pathlib import Path
from typing import Union

import yaml

from wizard_validator.schema import WizardSpec
from wizard_validator.utils.logging_utils import get_logger

LOGGER = get_logger(__name__)


def load_wizard_from_yaml(path: Union[str, Path]) -> WizardSpec:
    """Load a WizardSpec from a YAML file.

    Args:
        path: Path to the YAML wizard definition.

    Returns:
        A parsed ``WizardSpec`` (not yet validated by the rule engine).

    Raises:
        FileNotFoundError: If the YAML file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        ValueError: If the top level is not a mapping.
        pydantic.ValidationError: If values have the wrong types.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Wizard definition not found: {path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise yaml.YAMLError(f"Invalid YAML in {path}: {exc}") from exc

    return _load_mapping(data, path)


def load_wizard_from_json(path: Union[str, Path]) -> WizardSpec:
    """Load a WizardSpec from a JSON file.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top level is not an object.
        pydantic.ValidationError: If values have the wrong types.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Wizard definition not found: {path}")

    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    return _load_mapping(data, path)


def load_wizard_from_dict(data: dict) -> WizardSpec:
    """Load a WizardSpec from a Python dictionary.

    Args:
        data: Dictionary matching the WizardSpec schema.

    Returns:
        A parsed ``WizardSpec``.

    Raises:
        pydantic.ValidationError: If values have the wrong types.
    """
    return WizardSpec.model_validate(data)


def _load_mapping(data, path: Path) -> WizardSpec:
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a mapping at top level in {path}, " f"got {type(data).__name__}"
        )
    wizard = load_wizard_from_dict(data)
    LOGGER.debug("Loaded wizard %r from %s", wizard.id, path)
    return wizard
