"""Command parsing and script execution.

Input is line oriented. The first line holds the number of operations; each
following line is one whitespace-separated command::

    Create <ignored> <Kind> <Owner> <Amount>
    Transfer <From> <To> <Amount>
    Deposit <Owner> <Amount>
    Withdraw <Owner> <Amount>
    Activate <Owner>
    Deactivate <Owner>
    <anything else> <Owner>          # view
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from bank_sim.exceptions import CommandParseError
from bank_sim.formatting import to_amount
from bank_sim.models.enums import AccountKind

if TYPE_CHECKING:
    from bank_sim.store.registry import AccountRegistry

logger = logging.getLogger(__name__)


class CommandName(str, Enum):
    CREATE = "Create"
    TRANSFER = "Transfer"
    DEPOSIT = "Deposit"
    WITHDRAW = "Withdraw"
    ACTIVATE = "Activate"
    DEACTIVATE = "Deactivate"
    VIEW = "View"


# Expected token count per command, command word included
_ARITY = {
    CommandName.CREATE: 5,
    CommandName.TRANSFER: 4,
    CommandName.DEPOSIT: 3,
    CommandName.WITHDRAW: 3,
    CommandName.ACTIVATE: 2,
    CommandName.DEACTIVATE: 2,
    CommandName.VIEW: 2,
}


@dataclass
class Command:
    """A parsed, validated input line."""

    name: CommandName
    owner: str
    recipient: str | None = None
    kind: AccountKind | None = None
    amount: Decimal | None = None


def _parse_amount(token: str) -> Decimal:
    try:
        return to_amount(token)
    except ValueError as e:
        raise CommandParseError(str(e)) from None


def _parse_kind(token: str) -> AccountKind:
    try:
        return AccountKind(token)
    except ValueError:
        raise CommandParseError(f"Unknown account type: {token}") from None


def parse_command(line: str) -> Command:
    """Parse one input line into a ``Command``.

    Any unrecognised command word is treated as a view request.

    Raises
    ------
    CommandParseError
        On a wrong token count, a bad amount or an unknown account type.
    """
    tokens = line.split()
    if not tokens:
        raise CommandParseError("Empty command")

    try:
        name = CommandName(tokens[0])
    except ValueError:
        name = CommandName.VIEW

    if len(tokens) != _ARITY[name]:
        raise CommandParseError(
            f"{name.value} expects {_ARITY[name] - 1} arguments, got {len(tokens) - 1}"
        )

    if name == CommandName.CREATE:
        return Command(
            name=name,
            owner=tokens[3],
            kind=_parse_kind(tokens[2]),
            amount=_parse_amount(tokens[4]),
        )
    if name == CommandName.TRANSFER:
        return Command(
            name=name,
            owner=tokens[1],
            recipient=tokens[2],
            amount=_parse_amount(tokens[3]),
        )
    if name in (CommandName.DEPOSIT, CommandName.WITHDRAW):
        return Command(name=name, owner=tokens[1], amount=_parse_amount(tokens[2]))
    return Command(name=name, owner=tokens[1])


def parse_count(line: str) -> int:
    """Parse the operation count from the header line."""
    tokens = line.split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        raise CommandParseError(f"Invalid operation count: {line.strip()!r}") from None
    if count < 0:
        raise CommandParseError(f"Invalid operation count: {count}")
    return count


def run_script(lines: Iterable[str], registry: AccountRegistry) -> int:
    """Execute a command script against ``registry``.

    The header line decides how many commands are read; input after that is
    ignored. A malformed command line is reported on the registry's sink and
    processing moves on to the next one.

    Returns
    -------
    int
        Number of command lines processed.

    Raises
    ------
    CommandParseError
        If the header line is missing or is not a non-negative integer.
    """
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise CommandParseError("Missing operation count")
    expected = parse_count(header)

    processed = 0
    for line in it:
        if processed >= expected:
            break
        processed += 1
        try:
            command = parse_command(line)
        except CommandParseError as e:
            logger.warning("Line %d rejected: %s", processed + 1, e)
            registry.report("invalid", f"Error: {e}")
            continue
        registry.dispatch(command)

    if processed < expected:
        logger.warning("Input ended after %d of %d commands", processed, expected)
    return processed
