"""Synthetic command script generator."""

import logging
from typing import Iterator

from faker.exceptions import UniquenessException

from bank_sim.commands import CommandName
from bank_sim.generators.base import BaseGenerator
from bank_sim.models.enums import AccountKind

logger = logging.getLogger(__name__)


class CommandScriptGenerator(BaseGenerator):
    """Generate command scripts that exercise every account operation.

    A script opens ``num_accounts`` accounts for distinct Faker first names,
    then issues a weighted mix of operations against them. A share of the
    operations names an owner with no account, so not-found handling shows
    up in the output too.
    """

    OPERATIONS = [
        CommandName.DEPOSIT,
        CommandName.WITHDRAW,
        CommandName.TRANSFER,
        CommandName.ACTIVATE,
        CommandName.DEACTIVATE,
        CommandName.VIEW,
    ]
    OPERATION_WEIGHTS = [0.25, 0.20, 0.25, 0.08, 0.07, 0.15]

    KINDS = list(AccountKind)
    KIND_WEIGHTS = [0.40, 0.40, 0.20]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        unknown_owner_rate: float = 0.05,
        max_amount: int = 2000,
    ) -> None:
        super().__init__(seed, locale)
        self.unknown_owner_rate = unknown_owner_rate
        self.max_amount = max_amount

    def generate(self, num_accounts: int = 5, num_operations: int = 20) -> list[str]:
        """Generate a complete script, operation count header first.

        Parameters
        ----------
        num_accounts : int
            Number of ``Create`` lines at the start of the script.
        num_operations : int
            Number of operations that follow the creations.

        Returns
        -------
        list[str]
            Script lines without trailing newlines.
        """
        if num_accounts < 1 and num_operations > 0:
            raise ValueError("Operations need at least one account")

        body = list(self.iter_commands(num_accounts, num_operations))
        logger.info("Generated script with %d commands", len(body))
        return [str(len(body)), *body]

    def iter_commands(self, num_accounts: int, num_operations: int) -> Iterator[str]:
        """Yield command lines: account creations, then operations."""
        owners = self._owners(num_accounts)
        for owner in owners:
            kind = self.rng.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]
            yield f"Create Account {kind.value} {owner} {self._amount()}"

        for _ in range(num_operations):
            yield self._operation(owners)

    def _owners(self, count: int) -> list[str]:
        try:
            return ["".join(self.fake.unique.first_name().split()) for _ in range(count)]
        except UniquenessException:
            raise ValueError(f"Locale has fewer than {count} distinct first names") from None

    def _stranger(self, owners: list[str]) -> str:
        while True:
            name = "".join(self.fake.last_name().split())
            if name not in owners:
                return name

    def _pick_owner(self, owners: list[str]) -> str:
        if self.rng.random() < self.unknown_owner_rate:
            return self._stranger(owners)
        return self.rng.choice(owners)

    def _amount(self) -> str:
        cents = self.rng.randint(0, self.max_amount * 100)
        return f"{cents // 100}.{cents % 100:02d}"

    def _operation(self, owners: list[str]) -> str:
        name = self.rng.choices(self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1)[0]
        owner = self._pick_owner(owners)

        if name == CommandName.TRANSFER:
            return f"Transfer {owner} {self._pick_owner(owners)} {self._amount()}"
        if name in (CommandName.DEPOSIT, CommandName.WITHDRAW):
            return f"{name.value} {owner} {self._amount()}"
        return f"{name.value} {owner}"
