"""Enumeration types for the account domain."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "Savings"
    CHECKING = "Checking"
    BUSINESS = "Business"


class AccountState(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
