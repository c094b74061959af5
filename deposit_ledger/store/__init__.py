"""In-memory stores for depositor accounts."""

from deposit_ledger.store.ledger import DepositorRow, Ledger

__all__ = ["DepositorRow", "Ledger"]
