#!/usr/bin/env python
"""CLI tool for validating wizard definition files.

Usage (from project root)::

    # Validate an edit to an existing wizard
    wizard-validate welcome.yaml

    # Validate a new wizard against the wizards already stored
    wizard-validate welcome.yaml --create --existing onboarding.yaml

    # Time-activated wizard targeting groups, JSON output
    wizard-validate announcement.yaml --group staff --group trust_level_1 --json

Exit status is 0 when the wizard is accepted, 1 when it is rejected and 2
when a file cannot be loaded.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from wizard_validator.loaders import load_wizard_from_json, load_wizard_from_yaml
from wizard_validator.providers import (
    Collaborators,
    InMemoryGroupDirectory,
    InMemoryWizardStore,
)
from wizard_validator.schema import (
    EntitlementContext,
    SubscriptionTier,
    ValidationOptions,
    WizardSpec,
)
from wizard_validator.utils.logging_utils import get_logger
from wizard_validator.validation import LookupFailedError, WizardValidator

LOGGER = get_logger(__name__)

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_LOAD_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wizard-validate",
        description="Validate a wizard definition before saving it.",
    )
    parser.add_argument(
        "document",
        help="Path to the wizard definition (YAML or JSON)",
    )
    parser.add_argument(
        "--create",
        action="store_true",
        help="Validate as a new wizard (checks for id conflicts)",
    )
    parser.add_argument(
        "--existing",
        action="append",
        default=[],
        metavar="FILE",
        help="Stored wizard definition to validate against (repeatable)",
    )
    parser.add_argument(
        "--group",
        action="append",
        default=[],
        metavar="NAME",
        help="Name of an existing group (repeatable)",
    )
    parser.add_argument(
        "--tier",
        choices=[tier.value for tier in SubscriptionTier],
        default=SubscriptionTier.NONE.value,
        help="Subscription tier of the installation (default: none)",
    )
    parser.add_argument(
        "--feature",
        action="append",
        default=[],
        metavar="FLAG",
        help="Enabled subscription feature flag (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the result as JSON",
    )
    return parser


def _load(path: str) -> WizardSpec:
    if Path(path).suffix.lower() == ".json":
        return load_wizard_from_json(path)
    return load_wizard_from_yaml(path)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the wizard validation CLI."""
    args = _build_parser().parse_args(argv)

    try:
        wizard = _load(args.document)
        existing = [_load(path) for path in args.existing]
        store = InMemoryWizardStore(existing)
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    collaborators = Collaborators(
        wizard_store=store,
        group_directory=InMemoryGroupDirectory(args.group),
        entitlement=EntitlementContext(
            tier=SubscriptionTier(args.tier), flags=frozenset(args.feature)
        ),
    )

    try:
        result = WizardValidator(collaborators).validate(
            wizard, ValidationOptions(create=args.create)
        )
    except LookupFailedError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result)

    return EXIT_ACCEPTED if result.accepted else EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
