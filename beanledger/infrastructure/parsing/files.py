"""File parser resolving ``include`` directives recursively."""

import glob
from pathlib import Path

from beanledger.domain.errors import LedgerIOError
from beanledger.domain.models.directives import (
    IncludeDirective,
    SpannedDirective,
)
from beanledger.infrastructure.logging.logger import get_app_logger
from beanledger.infrastructure.parsing.parser import LineDirectiveParser


_GLOB_CHARS = ("*", "?")


class FileDirectiveParser:
    """Parse an entry ledger file together with everything it includes.

    Include paths are resolved against the including file's directory.
    Glob patterns expand to every matching regular file in sorted order.
    Missing includes are skipped and a file already on the current include
    chain is not entered again.
    """

    def __init__(
        self,
        line_parser: LineDirectiveParser | None = None,
        logger=None,
    ) -> None:
        """Initialize the parser.

        Args:
            line_parser: Parser for the text of a single file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._line_parser = line_parser or LineDirectiveParser(
            logger=self._logger
        )

    def parse_file(self, path: Path | str) -> list[SpannedDirective]:
        """Parse ``path`` and its includes.

        Args:
            path: Entry ledger file.

        Returns:
            list[SpannedDirective]: Directives with includes replaced by the
            included files' directives.

        Raises:
            LedgerIOError: If the entry file or an existing include cannot
                be read.
        """
        entry = Path(path).expanduser().resolve()
        if not entry.is_file():
            raise LedgerIOError(entry, "file does not exist")
        directives = self._parse_recursive(entry, entry.parent, ())
        self._logger.info(f"Parsed {len(directives)} directives from {entry}")
        return directives

    def _parse_recursive(
        self,
        path: Path,
        root: Path,
        chain: tuple[Path, ...],
    ) -> list[SpannedDirective]:
        content = self._read(path)
        parsed = self._line_parser.parse(
            content,
            source=self._source_id(path, root),
        )
        chain = chain + (path,)
        directives: list[SpannedDirective] = []
        for spanned in parsed:
            if not isinstance(spanned.directive, IncludeDirective):
                directives.append(spanned)
                continue
            for included in self._resolve(spanned.directive.path, path.parent):
                if included in chain:
                    self._logger.warning(
                        f"Skipping cyclic include of {included} from {path}"
                    )
                    continue
                directives.extend(
                    self._parse_recursive(included, root, chain)
                )
        return directives

    def _resolve(self, raw_path: str, base_dir: Path) -> list[Path]:
        candidate = Path(raw_path).expanduser()
        if not candidate.is_absolute():
            candidate = base_dir / candidate
        if any(char in raw_path for char in _GLOB_CHARS):
            matches = sorted(glob.glob(str(candidate), recursive=True))
            return [
                Path(match).resolve()
                for match in matches
                if Path(match).is_file()
            ]
        if candidate.is_file():
            return [candidate.resolve()]
        self._logger.warning(
            f"Include '{raw_path}' not found relative to {base_dir}"
        )
        return []

    @staticmethod
    def _read(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise LedgerIOError(path, str(exc)) from exc

    @staticmethod
    def _source_id(path: Path, root: Path) -> str:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            return path.as_posix()


__all__ = ["FileDirectiveParser"]
