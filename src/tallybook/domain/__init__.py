"""Domain layer for tallybook application.

Services are imported lazily: the database layer imports
tallybook.domain.entities, and the services import the database layer.
"""

from importlib import import_module

_SERVICES = {
    "TransactionService": "tallybook.domain.transaction",
    "AccountService": "tallybook.domain.account",
    "ReportService": "tallybook.domain.reports",
    "DataTransferService": "tallybook.domain.data_transfer",
    "BudgetService": "tallybook.domain.budget",
    "SavingsService": "tallybook.domain.savings",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
