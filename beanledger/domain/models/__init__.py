"""Domain models package."""

from .accounts import (
    Account,
    AccountBalanceDTO,
    AccountDTO,
    AccountStatus,
    AccountTreeNode,
    AccountType,
    BalanceSnapshot,
)
from .directives import (
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
    SpannedDirective,
    TransactionDirective,
)
from .finance import (
    BalanceReport,
    BalanceReportEntry,
    CashflowItem,
    CashflowSummary,
    CashflowView,
    CategoryAmount,
    ExpenseCategoryReport,
    IncomeExpenseEntry,
    IncomeExpenseReport,
    NetWorthPoint,
    NetWorthReport,
    NetWorthSummary,
    TimePeriodSummary,
    TransactionPage,
    TransactionStats,
)
from .ledger import LedgerSnapshot
from .time_context import TimeContext, TimeRange
from .timeline import TimelineEvent, TimelineEventType, TimelinePage
from .transactions import BalanceEntry, PadEntry, Posting, Transaction

__all__ = [
    "Account",
    "AccountBalanceDTO",
    "AccountDTO",
    "AccountStatus",
    "AccountTreeNode",
    "AccountType",
    "BalanceSnapshot",
    "Amount",
    "BalanceDirective",
    "CloseDirective",
    "CommentDirective",
    "CommodityDirective",
    "Cost",
    "CustomDirective",
    "Directive",
    "DocumentDirective",
    "EventDirective",
    "IncludeDirective",
    "NoteDirective",
    "OpenDirective",
    "OptionDirective",
    "PadDirective",
    "PostingLine",
    "PriceAnnotation",
    "PriceDirective",
    "SpannedDirective",
    "TransactionDirective",
    "BalanceReport",
    "BalanceReportEntry",
    "CashflowItem",
    "CashflowSummary",
    "CashflowView",
    "CategoryAmount",
    "ExpenseCategoryReport",
    "IncomeExpenseEntry",
    "IncomeExpenseReport",
    "NetWorthPoint",
    "NetWorthReport",
    "NetWorthSummary",
    "LedgerSnapshot",
    "TimePeriodSummary",
    "TransactionPage",
    "TransactionStats",
    "TimeContext",
    "TimeRange",
    "TimelineEvent",
    "TimelineEventType",
    "TimelinePage",
    "BalanceEntry",
    "PadEntry",
    "Posting",
    "Transaction",
]
