from . import logging_utils

__all__ = ["logging_utils"]
