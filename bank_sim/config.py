"""Configuration management for bank-sim."""

import os
from dataclasses import dataclass

from bank_sim.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class BankSimConfig:
    """Main configuration for bank-sim.

    ``unique_owners`` rejects a second account for an owner that already has
    one. ``record_incoming_transfers`` adds a ledger entry on the receiving
    side of a transfer. Both are off by default, which keeps lookups resolving
    to the first matching owner and ledgers sender-only.
    """

    log_level: str = "WARNING"
    log_format: str = "standard"
    unique_owners: bool = False
    record_incoming_transfers: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_env(cls) -> "BankSimConfig":
        """Create config from environment variables."""
        seed_str = os.getenv("BANK_SIM_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError:
            raise ConfigurationError(f"BANK_SIM_SEED must be an integer, got {seed_str!r}") from None

        return cls(
            log_level=os.getenv("BANK_SIM_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("BANK_SIM_LOG_FORMAT", "standard"),
            unique_owners=_env_bool("BANK_SIM_UNIQUE_OWNERS", False),
            record_incoming_transfers=_env_bool("BANK_SIM_RECORD_INCOMING", False),
            seed=seed,
        )
