"""
Module: logging_utils

Logging helpers shared by the wizard validator. Adds a custom TRACE level
below DEBUG (used for per-error logging inside a validation pass), configures
the root logger once from the ``LOG_LEVEL`` environment variable, and exposes
``get_logger`` for module-level loggers.

Functions:
    - trace(self, message, *args, **kwargs):
      Logs a message with the custom TRACE level.
    - get_log_level(level_name):
      Maps a level name (including "TRACE") to its numeric value.
    - get_logger(name: str):
      Retrieves a logger instance configured with the specified name.

Example:
    from wizard_validator.utils.logging_utils import get_logger

    LOGGER = get_logger(__name__)
    LOGGER.trace("Recorded %s for wizard %s", key, wizard_id)
"""

import logging
import os

# Custom TRACE level, below DEBUG
TRACE = 5

logging.addLevelName(TRACE, "TRACE")


def trace(self, message, *args, **kwargs):
    """
    Logs a message with TRACE level if the TRACE level is enabled for this logger.

    :param self: The logger handling the record.
    :param message: The log message, optionally with %-style placeholders.
    :param args: Positional arguments used to format the message.
    :param kwargs: Keyword arguments forwarded to ``Logger._log``.
    :return: None
    """
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = trace


def get_log_level(level_name):
    """
    Returns the numeric logging level for ``level_name``.

    "TRACE" maps to the custom TRACE level; any other name is looked up on the
    ``logging`` module and unknown names fall back to ``logging.INFO``.

    :param level_name: Name of the logging level (e.g. "TRACE", "DEBUG").
    :type level_name: str
    :return: The numeric logging level.
    :rtype: int
    """
    if level_name == "TRACE":
        return TRACE
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


log_level = get_log_level(os.getenv("LOG_LEVEL", "INFO").upper())

# Configure the root logger once, unless the host application already did
if len(logging.getLogger().handlers) == 0:
    logging.basicConfig(level=log_level)
else:
    logging.getLogger().setLevel(log_level)


def get_logger(name: str):
    """
    Retrieve a logger instance configured with the specified name.

    :param name: Logger name, usually ``__name__``.
    :type name: str
    :return: The ``logging.Logger`` for ``name``.
    :rtype: logging.Logger
    """
    return logging.getLogger(name)
