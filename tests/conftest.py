"""Pytest configuration and fixtures."""

import io

import pytest

from deposit_ledger.config import LedgerConfig
from deposit_ledger.console import Console
from deposit_ledger.generators import DepositorIdGenerator
from deposit_ledger.store import Ledger


class FixedIdGenerator(DepositorIdGenerator):
    """ID generator returning a fixed sequence of IDs, then repeating the last."""

    def __init__(self, *ids: str) -> None:
        super().__init__()
        self._ids = list(ids)

    def generate(self) -> str:
        if len(self._ids) > 1:
            return self._ids.pop(0)
        return self._ids[0]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account_id() -> str:
    """Sample depositor ID."""
    return "PZ123456"


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(stdout: io.StringIO, stderr: io.StringIO) -> Console:
    """Console with captured output and no input."""
    return Console(stdin=io.StringIO(""), stdout=stdout, stderr=stderr)


@pytest.fixture
def ledger(console: Console, sample_account_id: str) -> Ledger:
    """Empty ledger issuing ``sample_account_id`` as its first ID."""
    return Ledger(
        config=LedgerConfig(),
        console=console,
        id_generator=FixedIdGenerator(sample_account_id, "PZ654321"),
    )


@pytest.fixture
def fixed_ids() -> type[FixedIdGenerator]:
    """Factory for ID generators with predetermined IDs."""
    return FixedIdGenerator
