"""End-to-end scenarios through the command front end."""

import io
from decimal import Decimal

from bank_sim.commands import run_script
from bank_sim.store import AccountRegistry


def run(registry: AccountRegistry, output: io.StringIO, *commands: str) -> list[str]:
    before = len(output.getvalue().splitlines())
    run_script([str(len(commands)), *commands], registry)
    return output.getvalue().splitlines()[before:]


class TestBankScenario:
    """Alice and Bob walk through every operation."""

    def test_full_walkthrough(self, registry: AccountRegistry, output: io.StringIO) -> None:
        result = run(
            registry,
            output,
            "Create Account Savings Alice 1000.00",
            "Deposit Alice 200",
            "Create Account Checking Bob 0",
            "Transfer Alice Bob 100",
            "Deactivate Bob",
            "Withdraw Bob 50",
            "View Bob",
            "View Zed",
            "View Alice",
        )

        assert result == [
            "A new Savings account created for Alice with an initial balance of $1000.000.",
            "Alice successfully deposited $200.000. New Balance: $1200.000.",
            "A new Checking account created for Bob with an initial balance of $0.000.",
            "Alice successfully transferred $98.500 to Bob. New Balance: $1100.000. "
            "Transaction Fee: $1.500 (1.5%) in the system.",
            "Bob's account is now deactivated.",
            "Error: Account Bob is inactive.",
            "Bob's Account: Type: Checking, Balance: $98.500, State: Inactive, "
            "Transactions: [Initial Deposit $0.000].",
            "Error: Account Zed does not exist.",
            "Alice's Account: Type: Savings, Balance: $1100.000, State: Active, "
            "Transactions: [Initial Deposit $1000.000, Deposit $200.000, Transfer $100.000].",
        ]

        alice = registry.get("Alice")
        bob = registry.get("Bob")
        assert alice.balance == Decimal("1100")
        assert len(alice.transactions) == 3
        assert bob.balance == Decimal("98.5")
        assert bob.transactions == ["Initial Deposit $0.000"]

    def test_reactivation(self, registry: AccountRegistry, output: io.StringIO) -> None:
        result = run(
            registry,
            output,
            "Create Account Business Carol 100",
            "Activate Carol",
            "Deactivate Carol",
            "Deposit Carol 10",
            "Activate Carol",
            "Withdraw Carol 110",
        )

        assert result[1] == "Error: Account Carol is already activated."
        assert result[3] == "Carol successfully deposited $10.000. New Balance: $110.000."
        assert result[4] == "Carol's account is now activated."
        assert result[5] == (
            "Carol successfully withdrew $107.250. New Balance: $0.000. "
            "Transaction Fee: $2.750 (2.5%) in the system."
        )

    def test_duplicate_owner_resolves_to_first(self, registry: AccountRegistry, output: io.StringIO) -> None:
        result = run(
            registry,
            output,
            "Create Account Savings Dana 10",
            "Create Account Business Dana 99",
            "View Dana",
        )

        assert result[1] == "A new Business account created for Dana with an initial balance of $99.000."
        assert result[2].startswith("Dana's Account: Type: Savings, Balance: $10.000")

    def test_not_found_mutates_nothing(self, registry: AccountRegistry, output: io.StringIO) -> None:
        run(registry, output, "Create Account Savings Alice 10")
        snapshot = registry.get("Alice").view()

        result = run(
            registry,
            output,
            "Deposit Zed 5",
            "Withdraw Zed 5",
            "Transfer Alice Zed 5",
            "Transfer Zed Alice 5",
            "Activate Zed",
            "Deactivate Zed",
        )

        assert result == ["Error: Account Zed does not exist."] * 6
        assert registry.get("Alice").view() == snapshot


class TestLargeAmounts:
    """Amounts beyond 28 significant digits render in full and never stop the run."""

    def test_huge_amounts_keep_processing(self, registry: AccountRegistry, output: io.StringIO) -> None:
        initial = 10**26
        deposit = 10**30
        result = run(
            registry,
            output,
            f"Create Account Savings Alice {initial}",
            "Deposit Alice 1e30",
            "View Alice",
        )

        assert result == [
            f"A new Savings account created for Alice with an initial balance of ${initial}.000.",
            f"Alice successfully deposited ${deposit}.000. New Balance: ${initial + deposit}.000.",
            f"Alice's Account: Type: Savings, Balance: ${initial + deposit}.000, State: Active, "
            f"Transactions: [Initial Deposit ${initial}.000, Deposit ${deposit}.000].",
        ]
        assert registry.get("Alice").balance == Decimal(initial + deposit)

    def test_huge_transfer_fee(self, registry: AccountRegistry, output: io.StringIO) -> None:
        amount = 10**40
        result = run(
            registry,
            output,
            f"Create Account Business Carol {amount}",
            "Create Account Checking Dan 0",
            f"Transfer Carol Dan {amount}",
            "View Dan",
        )

        net = amount * 975 // 1000
        fee = amount - net
        assert result[2] == (
            f"Carol successfully transferred ${net}.000 to Dan. New Balance: $0.000. "
            f"Transaction Fee: ${fee}.000 (2.5%) in the system."
        )
        assert result[3].startswith(f"Dan's Account: Type: Checking, Balance: ${net}.000,")

    def test_amount_too_large_is_reported(self, registry: AccountRegistry, output: io.StringIO) -> None:
        result = run(
            registry,
            output,
            "Create Account Savings Alice 5",
            "Deposit Alice 1e400",
            "View Alice",
        )

        assert result[1] == "Error: Amount too large: 1e400"
        assert result[2].startswith("Alice's Account: Type: Savings, Balance: $5.000,")
