"""deposit-ledger: interactive in-memory deposit bookkeeping."""

__version__ = "0.1.0"
