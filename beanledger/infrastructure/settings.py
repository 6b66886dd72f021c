"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from beanledger.domain.constants import (
    DEFAULT_OPERATING_CURRENCY,
    DEFAULT_RECORDS_PER_PAGE,
)
from beanledger.domain.models.time_context import TimeRange
from beanledger.infrastructure.logging.logger import get_app_logger
from beanledger.utils.utils import get_project_root


_LEDGER_SUFFIXES = ("*.bean", "*.beancount")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for locating and presenting the ledger.

    Attributes:
        ledger_file: Entry ledger file, None when none could be found.
        operating_currency: Reporting currency.
        default_range: Initial reporting range.
        records_per_page: Default page size.
        extract_times: Whether transaction times are read from metadata.
    """

    ledger_file: Optional[Path] = None
    operating_currency: str = DEFAULT_OPERATING_CURRENCY
    default_range: TimeRange = TimeRange.ALL
    records_per_page: int = DEFAULT_RECORDS_PER_PAGE
    extract_times: bool = True

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_file = os.getenv("LEDGER_FILE")
        if raw_file:
            ledger_file = cls._normalize_path(raw_file, logger=logger)
        else:
            data_dir = os.getenv("LEDGER_DATA_DIR")
            ledger_file = cls._default_ledger_file(
                Path(data_dir).expanduser() if data_dir else None,
                os.getenv("LEDGER_MAIN_FILE", "main.bean"),
                logger=logger,
            )
        currency = (
            os.getenv("LEDGER_OPERATING_CURRENCY", DEFAULT_OPERATING_CURRENCY)
            .strip()
            .upper()
        ) or DEFAULT_OPERATING_CURRENCY
        return cls(
            ledger_file=ledger_file,
            operating_currency=currency,
            default_range=cls._parse_range(
                os.getenv("LEDGER_TIME_RANGE", "all"),
                logger=logger,
            ),
            records_per_page=cls._parse_positive_int(
                os.getenv("LEDGER_RECORDS_PER_PAGE"),
                DEFAULT_RECORDS_PER_PAGE,
                logger=logger,
            ),
            extract_times=os.getenv("LEDGER_EXTRACT_TIMES", "1").strip()
            not in ("0", "false", "no"),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the ledger file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger file does not exist at {path}")
        return path

    @staticmethod
    def _default_ledger_file(
        data_dir: Path | None,
        main_file: str,
        logger,
    ) -> Path | None:
        """Return a default ledger path when available.

        Args:
            data_dir: Directory to search, defaults to ``<root>/data``.
            main_file: Preferred entry file name.
            logger: Logger used for warnings.

        Returns:
            Path | None: The main file if present, else the single ledger
            file found in the directory.
        """
        data_dir = data_dir or get_project_root() / "data"
        if not data_dir.exists():
            return None
        preferred = data_dir / main_file
        if preferred.is_file():
            return preferred.resolve()
        matches = sorted(
            {
                match
                for pattern in _LEDGER_SUFFIXES
                for match in data_dir.glob(pattern)
            }
        )
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                f"Multiple ledger files found in {data_dir}. "
                "Set LEDGER_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_range(raw: str, logger) -> TimeRange:
        try:
            return TimeRange.parse(raw)
        except ValueError:
            logger.warning(f"Unknown LEDGER_TIME_RANGE '{raw}', using all")
            return TimeRange.ALL

    @staticmethod
    def _parse_positive_int(raw: str | None, default: int, logger) -> int:
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid integer '{raw}', using {default}")
            return default
        if value <= 0:
            logger.warning(f"Expected a positive integer, got {value}")
            return default
        return value


__all__ = ["LedgerSettings"]
