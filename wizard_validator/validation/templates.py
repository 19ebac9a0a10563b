"""Syntax check of the Liquid templates embedded in wizard text attributes."""

from typing import Sequence

from wizard_validator.config.validation_config import TEMPLATE_ATTRIBUTES
from wizard_validator.providers.template_parser import TemplateParser

from .errors import guarded_lookup
from .messages import MessageKey
from .result import ValidationResult


class TemplateSyntaxChecker:
    """
    Parses every non-empty template attribute of an object.

    A parse failure records one error per attribute, carrying the parser's
    diagnostic verbatim.
    """

    def __init__(
        self,
        parser: TemplateParser,
        attributes: Sequence[str] = TEMPLATE_ATTRIBUTES,
    ) -> None:
        self.parser = parser
        self.attributes = tuple(attributes)

    def check(self, obj, result: ValidationResult) -> None:
        for name in self.attributes:
            template = obj.get_attribute(name)
            if not template:
                continue
            diagnostic = guarded_lookup("parse_template", self.parser.parse, template)
            if diagnostic is not None:
                result.add_error(
                    MessageKey.LIQUID_SYNTAX_ERROR,
                    attribute=f"{obj.id}.{name}",
                    message=diagnostic,
                )
