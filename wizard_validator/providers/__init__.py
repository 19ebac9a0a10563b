"""
Validator Providers Module

Interfaces and in-memory implementations of the external services the
validator queries: persisted wizards, groups, the template parser and the
clock, bundled together as :class:`Collaborators`.
"""

from .collaborators import Collaborators, utc_now
from .group_directory import GroupDirectory, InMemoryGroupDirectory
from .in_memory_wizard_store import InMemoryWizardStore
from .template_parser import LiquidTemplateParser, TemplateParser
from .wizard_store import WizardStore

__all__ = [
    "Collaborators",
    "utc_now",
    "WizardStore",
    "InMemoryWizardStore",
    "GroupDirectory",
    "InMemoryGroupDirectory",
    "TemplateParser",
    "LiquidTemplateParser",
]
