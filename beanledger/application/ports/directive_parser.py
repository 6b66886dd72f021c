"""Port for turning ledger files into directives."""

from pathlib import Path
from typing import Protocol

from beanledger.domain.models.directives import SpannedDirective


class DirectiveParserPort(Protocol):
    """Port exposing parsing of an entry ledger file and its includes."""

    def parse_file(self, path: Path | str) -> list[SpannedDirective]:
        """Return the directives of ``path`` with includes resolved.

        Raises:
            LedgerIOError: If the file or an existing include is unreadable.
        """


__all__ = ["DirectiveParserPort"]
