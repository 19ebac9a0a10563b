"""
Wizard Loaders Module

Loaders for wizard definition documents from YAML, JSON and Python dicts.
"""

from .document_loader import (
    load_wizard_from_dict,
    load_wizard_from_json,
    load_wizard_from_yaml,
)

__all__ = [
    "load_wizard_from_yaml",
    "load_wizard_from_json",
    "load_wizard_from_dict",
]
