"""Custom exception hierarchy for bank-sim.

The message of every domain error is the text shown to the user after the
``Error: `` prefix, so ``str(err)`` is part of the output contract.
"""


class BankSimError(Exception):
    """Base exception for all bank-sim errors."""


class AccountNotFoundError(BankSimError):
    """Raised when a referenced owner has no account."""

    def __init__(self, owner: str) -> None:
        super().__init__(f"Account {owner} does not exist.")
        self.owner = owner


class DuplicateAccountError(BankSimError):
    """Raised when an owner already holds an account and uniqueness is enforced."""

    def __init__(self, owner: str) -> None:
        super().__init__(f"Account {owner} already exists.")
        self.owner = owner


class InsufficientFundsError(BankSimError):
    """Raised when a debit exceeds the account balance."""

    def __init__(self, owner: str) -> None:
        super().__init__(f"Insufficient funds for {owner}.")
        self.owner = owner


class InvalidAccountStateError(BankSimError):
    """Raised when an account is in an invalid state for the operation."""


class InactiveAccountError(InvalidAccountStateError):
    """Raised when a withdrawal or transfer hits a deactivated account."""

    def __init__(self, owner: str) -> None:
        super().__init__(f"Account {owner} is inactive.")
        self.owner = owner


class AlreadyInStateError(InvalidAccountStateError):
    """Raised when activation or deactivation would not change anything."""

    def __init__(self, owner: str, active: bool) -> None:
        state = "activated" if active else "deactivated"
        super().__init__(f"Account {owner} is already {state}.")
        self.owner = owner
        self.active = active


class CommandParseError(BankSimError):
    """Raised when an input line cannot be turned into a command."""


class ConfigurationError(BankSimError):
    """Raised when configuration is invalid or missing."""
