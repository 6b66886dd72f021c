"""Application ports package."""

from .directive_parser import DirectiveParserPort
from .ledger_repository import LedgerRepositoryPort

__all__ = ["DirectiveParserPort", "LedgerRepositoryPort"]
