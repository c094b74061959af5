"""Configuration management for deposit-ledger."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from deposit_ledger.exceptions import ConfigurationError


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if not value.is_finite() or value < 0:
        raise ConfigurationError(f"{name} must be a finite non-negative number, got {raw!r}")
    return value


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class LedgerConfig:
    """Main configuration for deposit-ledger."""

    id_prefix: str = "PZ"
    bonus_amount: Decimal = Decimal("100")
    bonus_ceiling: Decimal = Decimal("1000000")
    seed: int | None = None
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        return cls(
            id_prefix=os.getenv("LEDGER_ID_PREFIX", "PZ"),
            bonus_amount=_env_decimal("LEDGER_BONUS_AMOUNT", "100"),
            bonus_ceiling=_env_decimal("LEDGER_BONUS_CEILING", "1000000"),
            seed=_env_int("LEDGER_SEED"),
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
