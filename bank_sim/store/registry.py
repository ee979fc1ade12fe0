"""Account registry: ownership, lookup and command dispatch."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Iterator

from bank_sim.commands import Command, CommandName
from bank_sim.exceptions import AccountNotFoundError, BankSimError, DuplicateAccountError
from bank_sim.formatting import format_amount
from bank_sim.models import Account, AccountKind
from bank_sim.sinks import ConsoleSink

logger = logging.getLogger(__name__)


@dataclass
class AccountRegistry:
    """In-memory, insertion-ordered collection of accounts keyed by owner.

    The registry is the only owner of ``Account`` instances. Every command
    goes through ``dispatch``, which resolves the accounts involved, runs
    the operation, recovers any ``BankSimError`` and writes exactly one
    result line to the sink.

    Owners are not unique by default: a second ``create`` for the same name
    succeeds and ``lookup`` keeps resolving to the first one.
    """

    sink: ConsoleSink = field(default_factory=ConsoleSink)
    unique_owners: bool = False
    record_incoming_transfers: bool = False
    accounts: list[Account] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._handlers: dict[CommandName, Callable[[Command], str]] = {
            CommandName.CREATE: self._create,
            CommandName.TRANSFER: self._transfer,
            CommandName.DEPOSIT: self._deposit,
            CommandName.WITHDRAW: self._withdraw,
            CommandName.ACTIVATE: self._activate,
            CommandName.DEACTIVATE: self._deactivate,
            CommandName.VIEW: self._view,
        }

    def __len__(self) -> int:
        return len(self.accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def create(
        self,
        owner: str,
        kind: AccountKind | str,
        initial_deposit: Decimal | int | float | str,
    ) -> str:
        """Open a new active account and return the confirmation line.

        Raises
        ------
        DuplicateAccountError
            If ``unique_owners`` is set and ``owner`` already has an account.
        """
        if self.unique_owners and self.lookup(owner) is not None:
            raise DuplicateAccountError(owner)

        account = Account.open(owner, kind, initial_deposit)
        self.accounts.append(account)
        logger.info("Created %s account for %s", account.kind.value, owner)
        return (
            f"A new {account.kind.value} account created for {owner} "
            f"with an initial balance of ${format_amount(account.balance)}."
        )

    def lookup(self, owner: str) -> Account | None:
        """Return the first account held by ``owner``, or None."""
        for account in self.accounts:
            if account.owner == owner:
                return account
        return None

    def get(self, owner: str) -> Account:
        """Return the first account held by ``owner``.

        Raises
        ------
        AccountNotFoundError
            If no account matches.
        """
        account = self.lookup(owner)
        if account is None:
            raise AccountNotFoundError(owner)
        return account

    def dispatch(self, command: Command) -> str:
        """Run ``command``, write its result line to the sink and return it."""
        handler = self._handlers[command.name]
        try:
            line = handler(command)
        except BankSimError as e:
            logger.info(
                "%s for %s rejected: %s",
                command.name.value,
                command.owner,
                e,
                extra={
                    "extra": {
                        "command": command.name.value,
                        "owner": command.owner,
                        "error": type(e).__name__,
                    }
                },
            )
            line = f"Error: {e}"
        self.report(command.name.value, line)
        return line

    def report(self, category: str, line: str) -> None:
        """Write a result line to the sink."""
        self.sink.write(category, line)

    def summary(self) -> dict[str, int]:
        """Return account counts per kind and per state."""
        counts = {"accounts": len(self.accounts)}
        for kind in AccountKind:
            counts[kind.value.lower()] = sum(1 for a in self.accounts if a.kind == kind)
        counts["active"] = sum(1 for a in self.accounts if a.active)
        counts["inactive"] = counts["accounts"] - counts["active"]
        return counts

    def _create(self, command: Command) -> str:
        return self.create(command.owner, command.kind, command.amount)

    def _transfer(self, command: Command) -> str:
        sender = self.get(command.owner)
        recipient = self.get(command.recipient)
        return sender.transfer(
            command.amount, recipient, record_incoming=self.record_incoming_transfers
        )

    def _deposit(self, command: Command) -> str:
        return self.get(command.owner).deposit(command.amount)

    def _withdraw(self, command: Command) -> str:
        return self.get(command.owner).withdraw(command.amount)

    def _activate(self, command: Command) -> str:
        return self.get(command.owner).activate()

    def _deactivate(self, command: Command) -> str:
        return self.get(command.owner).deactivate()

    def _view(self, command: Command) -> str:
        return self.get(command.owner).view()
