"""Block-level parser turning ledger text into spanned directives."""

from dataclasses import replace

from beanledger.domain.models.directives import (
    CommodityDirective,
    SpannedDirective,
)
from beanledger.infrastructure.logging.logger import get_app_logger
from beanledger.infrastructure.parsing.lines import (
    DATE_LINE_RE,
    is_continuation,
    is_transaction_header,
    parse_block_metadata,
    parse_date,
    parse_dated_directive,
    parse_transaction,
    parse_undated_line,
)


def _line_end_offsets(lines: list[str], total_bytes: int) -> list[int]:
    """Return the UTF-8 byte offset just past each line."""
    offsets = []
    position = 0
    for line in lines:
        position += len(line.encode("utf-8")) + 1
        offsets.append(min(position, total_bytes))
    return offsets


class LineDirectiveParser:
    """Parse ledger text line by line with one block of lookahead.

    Dated lines open a directive; transactions and ``commodity`` blocks
    additionally own the indented lines that follow them. Comments, blank
    lines and org-mode headings are skipped.
    """

    def __init__(self, logger=None) -> None:
        """Initialize the parser.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def parse(
        self,
        content: str,
        source: str | None = None,
    ) -> list[SpannedDirective]:
        """Parse ledger text.

        Args:
            content: Full text of one ledger file.
            source: Identifier recorded on every directive.

        Returns:
            list[SpannedDirective]: Directives in source order. Include
            directives are returned unresolved.
        """
        lines = content.split("\n")
        ends = _line_end_offsets(lines, len(content.encode("utf-8")))
        directives: list[SpannedDirective] = []
        index = 0
        while index < len(lines):
            stripped = lines[index].strip()
            if not stripped or stripped[0] in (";", "#", "*"):
                index += 1
                continue

            match = DATE_LINE_RE.match(stripped)
            if match is None:
                directive = parse_undated_line(stripped)
                if directive is not None:
                    directives.append(
                        SpannedDirective(
                            directive, source, index + 1, ends[index]
                        )
                    )
                index += 1
                continue

            day = parse_date(match.group(1))
            rest = match.group(2).strip()
            last = index
            if is_transaction_header(rest) or rest.split()[0] == "commodity":
                while (last + 1 < len(lines)
                       and is_continuation(lines[last + 1])):
                    last += 1
            body = lines[index + 1:last + 1]
            if is_transaction_header(rest):
                directive = parse_transaction(day, rest, body)
            else:
                directive = parse_dated_directive(day, rest, stripped)
                if isinstance(directive, CommodityDirective) and body:
                    directive = replace(
                        directive,
                        metadata=parse_block_metadata(body),
                    )
            directives.append(
                SpannedDirective(directive, source, index + 1, ends[last])
            )
            index = last + 1

        self._logger.debug(
            f"Parsed {len(directives)} directives from {source or '<memory>'}"
        )
        return directives


__all__ = ["LineDirectiveParser"]
