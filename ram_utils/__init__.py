"""RAM Utils - Simple file and directory renaming utilities."""

from .core import CaseConversionRequest, LetterCase, RamUtilsError

__version__ = "0.1.0"
__author__ = "Ralph Minderhoud"
__description__ = "Convert file and directory names to upper or lower case"
