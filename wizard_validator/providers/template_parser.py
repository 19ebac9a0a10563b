"""
Module: TemplateParser

Syntax checking for the Liquid templates embedded in wizard text attributes.

The validator does not know which template engine renders wizards; it only
needs a parser that says whether a string is syntactically valid and, if not,
why. `LiquidTemplateParser` provides that on top of the ``python-liquid``
library.

Classes:
    - TemplateParser: Interface for template syntax checks.
    - LiquidTemplateParser: python-liquid backed implementation.

Example:
    parser = LiquidTemplateParser()
    parser.parse("Hello {{ user.name }}")      # None
    parser.parse("{% if user %}")              # diagnostic string
"""

from typing import Optional

from liquid import Environment
from liquid.exceptions import LiquidSyntaxError

from wizard_validator.utils.logging_utils import get_logger

LOGGER = get_logger(__name__)


class TemplateParser:
    """Interface for template syntax checks."""

    def parse(self, text: str) -> Optional[str]:
        """
        Parses ``text`` as a template without rendering it.

        :param text: Template source.
        :type text: str
        :return: None if the template is valid, otherwise the parser's
            diagnostic message.
        :rtype: str or None
        :raises NotImplementedError: Must be implemented in a subclass.
        """
        raise NotImplementedError


class LiquidTemplateParser(TemplateParser):
    """
    Parses templates with a python-liquid ``Environment``.

    Only syntax errors become diagnostics. Any other exception from the
    library propagates to the caller.
    """

    def __init__(self, environment: Optional[Environment] = None) -> None:
        self.environment = environment if environment is not None else Environment()

    def parse(self, text: str) -> Optional[str]:
        try:
            self.environment.from_string(text)
        except LiquidSyntaxError as exc:
            LOGGER.debug("Liquid syntax error: %s", exc)
            return str(exc)
        return None
