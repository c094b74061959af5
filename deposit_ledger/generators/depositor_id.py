"""Depositor ID generator."""

from __future__ import annotations

from deposit_ledger.generators.base import BaseGenerator


class DepositorIdGenerator(BaseGenerator):
    """Generate display IDs of the form ``PZ123456``.

    The number is drawn uniformly from ``[100000, 999999]``. Previously
    issued IDs are not tracked, so two depositors can receive the same ID.
    """

    MIN_NUMBER = 100000
    MAX_NUMBER = 999999

    def __init__(self, prefix: str = "PZ", seed: int | None = None) -> None:
        super().__init__(seed)
        self.prefix = prefix

    def generate(self) -> str:
        """Generate a single depositor ID."""
        number = self.fake.random_int(min=self.MIN_NUMBER, max=self.MAX_NUMBER)
        return f"{self.prefix}{number}"
