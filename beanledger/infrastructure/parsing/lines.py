"""Line-level grammar of the ledger text format.

Everything here is tolerant: a line that does not fit the expected shape
degrades to a CommentDirective or to None instead of raising.
"""

from datetime import date
import re

from beanledger.domain.constants import EPOCH_DATE_ISO
from beanledger.domain.models.directives import (
    Amount,
    BalanceDirective,
    CloseDirective,
    CommentDirective,
    CommodityDirective,
    Cost,
    CustomDirective,
    Directive,
    DocumentDirective,
    EventDirective,
    IncludeDirective,
    NoteDirective,
    OpenDirective,
    OptionDirective,
    PadDirective,
    PostingLine,
    PriceAnnotation,
    PriceDirective,
    TransactionDirective,
)
from beanledger.domain.policies.account_filters import is_account_root
from beanledger.domain.services.normalization import strip_quotes
from beanledger.utils.decimal_utils import parse_decimal


_NUMBER = r"[-+]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)"
_CURRENCY = r"[A-Z][A-Z0-9'._-]*"

DATE_LINE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})\s+(.+)$")
TRANSACTION_HEADER_RE = re.compile(
    r'^([*!]|txn)\s*(?:"([^"]*)")?\s*(?:"([^"]*)")?\s*(.*)$'
)
POSTING_RE = re.compile(
    r"^(?P<flag>[!*])?\s*"
    r"(?P<account>(?:Assets|Liabilities|Equity|Income|Expenses):[^\s;{@]+)"
    rf"(?:\s+(?P<number>{_NUMBER})(?:\s*(?P<currency>{_CURRENCY}))?)?"
    r"(?:\s*\{(?P<cost>[^}]*)\})?"
    rf"(?:\s*(?P<marker>@@?)\s*(?P<price>{_NUMBER})\s*"
    rf"(?P<price_currency>{_CURRENCY}))?"
    r"\s*(?:;.*)?$"
)
_TOKEN_RE = re.compile(r'"([^"]*)"|(\S+)')
_CURRENCY_RE = re.compile(rf"^{_CURRENCY}$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_UNDATED_COMMENT_KEYWORDS = ("pushtag", "poptag", "plugin")


def parse_date(text: str) -> date:
    """Parse an ISO date, falling back to 1970-01-01 when invalid."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        return date.fromisoformat(EPOCH_DATE_ISO)


def tokenize(text: str) -> list[tuple[str, bool]]:
    """Split directive arguments into ``(value, quoted)`` pairs.

    Quoted strings stay whole; an unquoted token starting with ``;`` starts
    a trailing comment and ends the list.
    """
    tokens: list[tuple[str, bool]] = []
    for match in _TOKEN_RE.finditer(text):
        quoted, bare = match.group(1), match.group(2)
        if bare is not None and bare.startswith(";"):
            break
        if quoted is not None:
            tokens.append((quoted, True))
        else:
            tokens.append((bare, False))
    return tokens


def is_transaction_header(rest: str) -> bool:
    """True when the text after the date opens a transaction block."""
    if rest[:1] in ("*", "!"):
        return True
    return rest == "txn" or rest.startswith(("txn ", "txn\t"))


def is_continuation(raw_line: str) -> bool:
    """True for indented, non-blank lines belonging to the current block."""
    return bool(raw_line.strip()) and raw_line[:1] in (" ", "\t")


def split_metadata(line: str) -> tuple[str, str] | None:
    """Return ``(key, value)`` when the stripped line is a metadata entry.

    The key is the text before the first colon; it must contain no
    whitespace and must not be an account root, so posting lines such as
    ``Assets:Cash 10 CNY`` are never taken for metadata.
    """
    if ":" not in line:
        return None
    key, value = line.split(":", 1)
    if not key or any(char.isspace() for char in key):
        return None
    if is_account_root(key):
        return None
    return key, strip_quotes(value)


def parse_cost(text: str) -> Cost | None:
    """Parse the inside of ``{...}``: number, currency and optional date."""
    number = None
    currency = None
    lot_date = None
    for part in text.split(","):
        cleaned = part.strip()
        if not cleaned:
            continue
        if _ISO_DATE_RE.match(cleaned):
            lot_date = parse_date(cleaned)
            continue
        pieces = cleaned.split()
        parsed = parse_decimal(pieces[0])
        if parsed is not None:
            number = parsed
            if len(pieces) > 1:
                currency = pieces[1]
        elif _CURRENCY_RE.match(pieces[0]):
            currency = pieces[0]
    if number is None and currency is None and lot_date is None:
        return None
    return Cost(number=number, currency=currency, date=lot_date)


def parse_posting(line: str) -> PostingLine | None:
    """Parse one stripped posting line, or return None if it is not one."""
    match = POSTING_RE.match(line)
    if match is None:
        return None
    units = None
    number = parse_decimal(match.group("number"))
    if number is not None:
        units = Amount(number, match.group("currency") or "")
    cost = None
    if match.group("cost") is not None:
        cost = parse_cost(match.group("cost"))
    price = None
    price_number = parse_decimal(match.group("price"))
    if price_number is not None:
        price = PriceAnnotation(
            number=price_number,
            currency=match.group("price_currency"),
            is_total=match.group("marker") == "@@",
        )
    return PostingLine(
        account=match.group("account"),
        units=units,
        cost=cost,
        price=price,
        flag=match.group("flag"),
    )


def parse_transaction(
    day: date,
    header: str,
    body: list[str],
) -> TransactionDirective:
    """Build a transaction from its header text and continuation lines.

    Args:
        day: Transaction date.
        header: Text after the date (flag, payee, narration, tags).
        body: Raw continuation lines.

    Returns:
        TransactionDirective: Parsed transaction; unparseable body lines are
        dropped.
    """
    match = TRANSACTION_HEADER_RE.match(header)
    flag = match.group(1) if match else header[:1]
    payee = (match.group(2) if match else None) or ""
    narration = (match.group(3) if match else None) or ""
    remainder = match.group(4) if match else ""
    tags: list[str] = []
    links: list[str] = []
    for value, quoted in tokenize(remainder):
        if quoted or len(value) < 2:
            continue
        if value[0] == "#" and value[1:] not in tags:
            tags.append(value[1:])
        elif value[0] == "^" and value[1:] not in links:
            links.append(value[1:])

    metadata: dict[str, str] = {}
    postings: list[PostingLine] = []
    for raw in body:
        line = raw.strip()
        if not line or line.startswith(";"):
            continue
        entry = split_metadata(line)
        if entry is not None:
            metadata[entry[0]] = entry[1]
            continue
        posting = parse_posting(line)
        if posting is not None:
            postings.append(posting)
    return TransactionDirective(
        date=day,
        flag=flag,
        payee=payee,
        narration=narration,
        tags=tuple(tags),
        links=tuple(links),
        metadata=metadata,
        postings=tuple(postings),
    )


def parse_block_metadata(body: list[str]) -> dict[str, str]:
    """Collect ``key: value`` entries from indented continuation lines."""
    metadata: dict[str, str] = {}
    for raw in body:
        line = raw.strip()
        if not line or line.startswith(";"):
            continue
        entry = split_metadata(line)
        if entry is not None:
            metadata[entry[0]] = entry[1]
    return metadata


def _amount(number_text: str, currency: str) -> Amount | None:
    number = parse_decimal(number_text)
    if number is None:
        return None
    return Amount(number, currency)


def parse_dated_directive(day: date, rest: str, raw_line: str) -> Directive:
    """Parse a single-line dated directive.

    Args:
        day: Directive date.
        rest: Text after the date.
        raw_line: Whole stripped line, kept when the directive degrades.

    Returns:
        Directive: The typed directive, or a CommentDirective for unknown
        keywords and directives with too few arguments.
    """
    tokens = tokenize(rest)
    if not tokens:
        return CommentDirective(raw_line)
    keyword = tokens[0][0]
    args = [value for value, _quoted in tokens[1:]]
    comment = CommentDirective(raw_line)

    if keyword == "open" and args:
        currencies: list[str] = []
        booking = None
        for value, quoted in tokens[2:]:
            if quoted:
                booking = value
                continue
            currencies.extend(c for c in value.split(",") if c)
        return OpenDirective(day, args[0], tuple(currencies), booking)
    if keyword == "close" and args:
        return CloseDirective(day, args[0])
    if keyword == "balance" and len(args) >= 3:
        currency = args[2]
        if currency == "~" and len(args) >= 5:
            currency = args[4]
        amount = _amount(args[1], currency)
        if amount is None:
            return comment
        return BalanceDirective(day, args[0], amount)
    if keyword == "pad" and len(args) >= 2:
        return PadDirective(day, args[0], args[1])
    if keyword == "commodity" and args:
        return CommodityDirective(day, args[0])
    if keyword == "price" and len(args) >= 3:
        amount = _amount(args[1], args[2])
        if amount is None:
            return comment
        return PriceDirective(day, args[0], amount)
    if keyword == "document" and len(args) >= 2:
        return DocumentDirective(day, args[0], " ".join(args[1:]))
    if keyword == "note" and len(args) >= 2:
        return NoteDirective(day, args[0], " ".join(args[1:]))
    if keyword == "event" and len(args) >= 2:
        return EventDirective(day, args[0], " ".join(args[1:]))
    if keyword == "custom" and args:
        return CustomDirective(day, args[0], tuple(args[1:]))
    return comment


def parse_undated_line(line: str) -> Directive | None:
    """Parse an undated stripped line (option, include and tag stacks)."""
    tokens = tokenize(line)
    if not tokens:
        return None
    keyword = tokens[0][0]
    if keyword == "option" and len(tokens) >= 3:
        return OptionDirective(tokens[1][0], tokens[2][0])
    if keyword == "include" and len(tokens) >= 2:
        return IncludeDirective(tokens[1][0])
    if keyword in _UNDATED_COMMENT_KEYWORDS:
        return CommentDirective(line)
    return None


__all__ = [
    "DATE_LINE_RE",
    "TRANSACTION_HEADER_RE",
    "POSTING_RE",
    "parse_date",
    "tokenize",
    "is_transaction_header",
    "is_continuation",
    "split_metadata",
    "parse_cost",
    "parse_posting",
    "parse_transaction",
    "parse_block_metadata",
    "parse_dated_directive",
    "parse_undated_line",
]
