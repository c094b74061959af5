"""Random generators for deposit-ledger."""

from deposit_ledger.generators.depositor_id import DepositorIdGenerator

__all__ = ["DepositorIdGenerator"]
