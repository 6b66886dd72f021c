"""Application use cases package."""

from .get_account_balances import GetAccountBalancesUseCase, AccountBalanceDTO
from .get_account_journal import AccountJournal, GetAccountJournalUseCase
from .get_accounts import GetAccountsUseCase, AccountDTO
from .get_cashflow import GetCashflowUseCase, CashflowView
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .reconcile_ledger import ReconcileLedgerUseCase

__all__ = [
    "GetAccountBalancesUseCase",
    "AccountBalanceDTO",
    "AccountJournal",
    "GetAccountJournalUseCase",
    "GetAccountsUseCase",
    "AccountDTO",
    "GetCashflowUseCase",
    "CashflowView",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "ReconcileLedgerUseCase",
]
