"""Domain layer for bankapp application."""

# Services are imported lazily: the database layer imports domain entities,
# and the services import the database layer.
_SERVICES = {
    "BankService": "bankapp.domain.bank",
    "AccountLedger": "bankapp.domain.ledger",
    "TransactionLog": "bankapp.domain.transaction_log",
    "AccountDirectory": "bankapp.domain.account_directory",
    "AccountNumberSequence": "bankapp.domain.account_directory",
    "UserDirectory": "bankapp.domain.user_directory",
    "UserSession": "bankapp.domain.session",
    "select_account": "bankapp.domain.selector",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
