"""Pytest configuration and fixtures."""

import io
import logging
from decimal import Decimal

import pytest

from bank_sim.models import Account, AccountKind
from bank_sim.sinks import ConsoleSink
from bank_sim.store import AccountRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream collecting result lines."""
    return io.StringIO()


@pytest.fixture
def sink(output: io.StringIO) -> ConsoleSink:
    """Console sink writing to the in-memory stream."""
    return ConsoleSink(stream=output)


@pytest.fixture
def registry(sink: ConsoleSink) -> AccountRegistry:
    """Fresh registry for each test."""
    return AccountRegistry(sink=sink)


@pytest.fixture
def savings() -> Account:
    """Savings account holding 1000."""
    return Account.open("Alice", AccountKind.SAVINGS, Decimal("1000"))


@pytest.fixture
def checking() -> Account:
    """Empty checking account."""
    return Account.open("Bob", AccountKind.CHECKING, Decimal("0"))


@pytest.fixture
def business() -> Account:
    """Business account holding 500."""
    return Account.open("Carol", AccountKind.BUSINESS, Decimal("500"))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging changes so handlers never outlive captured streams."""
    root = logging.getLogger()
    package = logging.getLogger("bank_sim")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
