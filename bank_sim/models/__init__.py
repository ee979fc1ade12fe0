"""Account domain models."""

from bank_sim.models.account import FEE_RATES, Account
from bank_sim.models.enums import AccountKind, AccountState

__all__ = ["FEE_RATES", "Account", "AccountKind", "AccountState"]
