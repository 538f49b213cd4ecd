"""Shared pytest fixtures for accountkit tests."""

import logging
from decimal import Decimal

import pytest

from accountkit.domain.account import AccountService
from accountkit.domain.entities import Account, CheckingAccount, SavingsAccount
from accountkit.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_accountkit_logger():
    """Drop handlers installed by CLI runs so later tests log cleanly."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def account_service():
    """Create an empty AccountService."""
    return AccountService()


@pytest.fixture
def standard_account():
    """Standard account with a balance of 200."""
    return Account(2334, "Mert Eldemir", Decimal("200.0"))


@pytest.fixture
def savings_account():
    """Savings account at 1000 with 2.5% interest and a 400 floor."""
    return SavingsAccount(
        4432,
        "Emre Bilir",
        Decimal("1000.0"),
        interest_rate=Decimal("2.5"),
        minimum_balance=Decimal("400.0"),
    )


@pytest.fixture
def checking_account():
    """Checking account at 700 with a 550 overdraft limit."""
    return CheckingAccount(
        5872, "Batuhan Buyuknacar", Decimal("700.0"), overdraft_limit=Decimal("550")
    )


@pytest.fixture
def populated_service(account_service):
    """AccountService with one account of each kind."""
    account_service.open_account("standard", 2334, "Mert Eldemir", Decimal("200.0"))
    account_service.open_account(
        "savings",
        4432,
        "Emre Bilir",
        Decimal("1000.0"),
        interest_rate=Decimal("2.5"),
        minimum_balance=Decimal("400.0"),
    )
    account_service.open_account(
        "checking", 5872, "Batuhan Buyuknacar", Decimal("700.0"), overdraft_limit=Decimal("550")
    )
    return account_service


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def script_file(tmp_path):
    """Return a helper that writes a session script and returns its path."""

    def _write(text: str) -> str:
        path = tmp_path / "session.txt"
        path.write_text(text)
        return str(path)

    return _write
