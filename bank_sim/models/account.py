"""Account model and its transaction rules."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Any

from bank_sim.exceptions import AlreadyInStateError, InactiveAccountError, InsufficientFundsError
from bank_sim.formatting import format_amount, format_percent, money_context, to_amount
from bank_sim.models.enums import AccountKind, AccountState

logger = logging.getLogger(__name__)

FEE_RATES: dict[AccountKind, Decimal] = {
    AccountKind.SAVINGS: Decimal("0.015"),
    AccountKind.CHECKING: Decimal("0.020"),
    AccountKind.BUSINESS: Decimal("0.025"),
}


@dataclass
class Account:
    """Bank account entity.

    Savings, Checking and Business accounts behave identically apart from
    the fee rate charged on withdrawals and transfers:

    - Savings: 1.5%
    - Checking: 2.0%
    - Business: 2.5%

    The fee is notional. A debit always removes the full requested amount
    from the balance; the fee only decides how much of it reaches the
    customer (withdrawal) or the recipient (transfer).

    ``owner`` and ``kind`` are fixed once the account exists. Operations
    return the confirmation line on success and raise a ``BankSimError``
    subclass on failure. Every line and ledger entry is rendered before
    the balance changes, so a failed operation leaves the account as it was.
    """

    _FROZEN = ("owner", "kind")

    owner: str
    kind: AccountKind
    balance: Decimal
    active: bool = True
    transactions: list[str] = field(default_factory=list)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._FROZEN and name in self.__dict__:
            raise AttributeError(f"Account {name} cannot be changed after creation")
        super().__setattr__(name, value)

    @classmethod
    def open(
        cls,
        owner: str,
        kind: AccountKind | str,
        initial_deposit: Decimal | int | float | str,
    ) -> "Account":
        """Create an active account holding ``initial_deposit``."""
        amount = to_amount(initial_deposit)
        entry = f"Initial Deposit ${format_amount(amount)}"
        return cls(owner=owner, kind=AccountKind(kind), balance=amount, transactions=[entry])

    @property
    def fee_rate(self) -> Decimal:
        return FEE_RATES[self.kind]

    @property
    def fee_percent(self) -> str:
        return format_percent(self.fee_rate)

    @property
    def state(self) -> AccountState:
        return AccountState.ACTIVE if self.active else AccountState.INACTIVE

    def deposit(self, amount: Decimal | int | float | str) -> str:
        """Credit ``amount``. Allowed in either state."""
        amount = to_amount(amount)
        with localcontext(money_context()):
            balance = self.balance + amount
        entry = f"Deposit ${format_amount(amount)}"
        line = (
            f"{self.owner} successfully deposited ${format_amount(amount)}. "
            f"New Balance: ${format_amount(balance)}."
        )

        self.balance = balance
        self.transactions.append(entry)
        logger.debug("Deposit of %s to %s", amount, self.owner)
        return line

    def withdraw(self, amount: Decimal | int | float | str) -> str:
        """Debit ``amount`` and pay out the post-fee share.

        Raises
        ------
        InactiveAccountError
            If the account is deactivated.
        InsufficientFundsError
            If the balance is below the requested amount.
        """
        amount = to_amount(amount)
        self._check_debit(amount)

        with localcontext(money_context()):
            balance = self.balance - amount
        entry = f"Withdrawal ${format_amount(amount)}"
        line = (
            f"{self.owner} successfully withdrew ${format_amount(self._net(amount))}. "
            f"New Balance: ${format_amount(balance)}. "
            f"{self._fee_note(amount)}"
        )

        self.balance = balance
        self.transactions.append(entry)
        logger.debug("Withdrawal of %s from %s", amount, self.owner)
        return line

    def transfer(
        self,
        amount: Decimal | int | float | str,
        recipient: "Account",
        record_incoming: bool = False,
    ) -> str:
        """Move ``amount`` to ``recipient`` at this account's fee rate.

        The sender is debited the full amount and the recipient is credited
        the post-fee share, whatever the recipient's own kind. Only the
        sender's ledger records the transfer unless ``record_incoming`` is set.

        Raises
        ------
        InactiveAccountError
            If the sender is deactivated.
        InsufficientFundsError
            If the sender's balance is below the requested amount.
        """
        amount = to_amount(amount)
        self._check_debit(amount)

        net = self._net(amount)
        with localcontext(money_context()):
            balance = self.balance - amount
            credited = (balance if recipient is self else recipient.balance) + net
        entry = f"Transfer ${format_amount(amount)}"
        incoming = f"Incoming Transfer ${format_amount(net)}"
        line = (
            f"{self.owner} successfully transferred ${format_amount(net)} to {recipient.owner}. "
            f"New Balance: ${format_amount(balance)}. "
            f"{self._fee_note(amount)}"
        )

        self.balance = balance
        recipient.balance = credited
        self.transactions.append(entry)
        if record_incoming:
            recipient.transactions.append(incoming)
        logger.debug("Transfer of %s from %s to %s", amount, self.owner, recipient.owner)
        return line

    def set_active(self, state: bool) -> str:
        """Switch the account on or off. No ledger entry is recorded.

        Raises
        ------
        AlreadyInStateError
            If the account is already in the requested state.
        """
        if self.active == state:
            raise AlreadyInStateError(self.owner, state)

        self.active = state
        logger.debug("Account %s active=%s", self.owner, state)
        if state:
            return f"{self.owner}'s account is now activated."
        return f"{self.owner}'s account is now deactivated."

    def activate(self) -> str:
        return self.set_active(True)

    def deactivate(self) -> str:
        return self.set_active(False)

    def view(self) -> str:
        """Render owner, kind, balance, state and the full ledger on one line."""
        return (
            f"{self.owner}'s Account: Type: {self.kind.value}, "
            f"Balance: ${format_amount(self.balance)}, "
            f"State: {self.state.value}, "
            f"Transactions: [{', '.join(self.transactions)}]."
        )

    def _check_debit(self, amount: Decimal) -> None:
        if not self.active:
            raise InactiveAccountError(self.owner)
        if self.balance < amount:
            raise InsufficientFundsError(self.owner)

    def _net(self, amount: Decimal) -> Decimal:
        with localcontext(money_context()):
            return amount * (1 - self.fee_rate)

    def _fee_note(self, amount: Decimal) -> str:
        with localcontext(money_context()):
            fee = amount * self.fee_rate
        return (
            f"Transaction Fee: ${format_amount(fee)} "
            f"({self.fee_percent}%) in the system."
        )
