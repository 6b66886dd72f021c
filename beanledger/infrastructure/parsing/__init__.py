"""Ledger text parsing."""

from .files import FileDirectiveParser
from .parser import LineDirectiveParser

__all__ = ["FileDirectiveParser", "LineDirectiveParser"]
