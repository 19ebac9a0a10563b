"""Shared fixtures for the validation test suite.

Provides a fixed clock, a fake template parser, in-memory collaborators and a
factory for minimal valid wizard documents.  All collaborators are plain
in-memory objects so every test controls exactly what the validator sees.
"""

# pylint: disable=redefined-outer-name

import datetime
from typing import Optional

import pytest

from wizard_validator.providers import (
    Collaborators,
    InMemoryGroupDirectory,
    InMemoryWizardStore,
    TemplateParser,
)
from wizard_validator.schema import EntitlementContext

#: Stable UTC "now" used by the fixed clock.
NOW = datetime.datetime(2026, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)


class FakeTemplateParser(TemplateParser):
    """Treats any template containing ``{% broken`` as a syntax error."""

    def __init__(self) -> None:
        self.parsed = []

    def parse(self, text: str) -> Optional[str]:
        self.parsed.append(text)
        if "{% broken" in text:
            return "Unknown tag 'broken'"
        return None


@pytest.fixture
def store():
    """Empty in-memory wizard store."""
    return InMemoryWizardStore()


@pytest.fixture
def groups():
    """Group directory holding ``staff`` and ``trust_level_1``."""
    return InMemoryGroupDirectory({"staff", "trust_level_1"})


@pytest.fixture
def parser():
    """Fake template parser."""
    return FakeTemplateParser()


@pytest.fixture
def now():
    """The fixed current time."""
    return NOW


@pytest.fixture
def collaborators(store, groups, parser, now):
    """Collaborators wired to the in-memory fixtures and a fixed clock."""
    return Collaborators(
        wizard_store=store,
        group_directory=groups,
        template_parser=parser,
        entitlement=EntitlementContext(),
        clock=lambda: now,
    )


@pytest.fixture
def make_wizard():
    """Factory for a minimal valid wizard document (a dict).

    Keyword arguments override or add top-level attributes.
    """

    def _make(**kwargs) -> dict:
        document = {
            "id": "w1",
            "name": "Wizard",
            "steps": [
                {
                    "id": "s1",
                    "fields": [{"id": "f1", "type": "text"}],
                }
            ],
        }
        document.update(kwargs)
        return document

    return _make
