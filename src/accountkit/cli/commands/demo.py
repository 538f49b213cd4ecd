"""Demonstration scenario command."""

import click

from accountkit.domain.account import AccountService
from accountkit.domain.entities import AccountKind, combined_balance, equals
from accountkit.domain.money import format_amount

# (kind, number, holder, balance, terms) for the polymorphism walk-through
POLYMORPHISM_ACCOUNTS = [
    (AccountKind.STANDARD, 2334, "Mert Eldemir", "200.0", {}),
    (
        AccountKind.SAVINGS,
        4432,
        "Emre Bilir",
        "1000.0",
        {"interest_rate": "2.5", "minimum_balance": "400.0"},
    ),
    (AccountKind.CHECKING, 5872, "Batuhan Buyuknacar", "700.0", {"overdraft_limit": "550"}),
]

SECTIONS = ("polymorphism", "inheritance", "all")


def _open(service: AccountService, kind, number, holder, balance, terms):
    account = service.open_account(kind, number, holder, balance, **terms)
    click.echo(f"{account.title} {account.account_number} opened for {account.holder}")
    return account


def _close_all(service: AccountService) -> None:
    for account in service.list_accounts():
        service.close_account(account.account_number)
        click.echo(f"{account.title} {account.account_number} closed")


def run_polymorphism(service: AccountService) -> None:
    """Withdraw 500 from one account of each kind through the same call."""
    click.echo("== Runtime polymorphism ==")
    accounts = [_open(service, *spec) for spec in POLYMORPHISM_ACCOUNTS]
    click.echo()

    for account in accounts:
        click.echo(account.display())
        click.echo(account.withdraw(500).message)
        click.echo(f"Balance after withdrawal: {format_amount(account.balance)}")
        click.echo()

    _close_all(service)
    click.echo()


def run_inheritance(service: AccountService) -> None:
    """Exercise each account kind through its own full interface."""
    click.echo("== Inheritance ==")
    standard = _open(service, AccountKind.STANDARD, 2334, "Mert Eldemir", "200.0", {})
    savings = _open(
        service,
        AccountKind.SAVINGS,
        4432,
        "Emre Bilir",
        "0.0",
        {"interest_rate": "2.5", "minimum_balance": "400.0"},
    )
    checking = _open(
        service,
        AccountKind.CHECKING,
        5872,
        "Batuhan Buyuknacar",
        "700.0",
        {"overdraft_limit": "550"},
    )
    click.echo()

    click.echo(standard.display())
    click.echo(standard.deposit(500).message)
    click.echo(standard.withdraw(280).message)
    click.echo(f"Balance: {format_amount(standard.balance)}")
    click.echo(standard.withdraw(400).message)
    click.echo(f"standard == savings: {equals(standard, savings)}")
    click.echo(
        f"Combined balance (standard + savings): "
        f"{format_amount(combined_balance(standard, savings))}"
    )
    click.echo()

    click.echo(savings.display())
    click.echo(savings.deposit(1000).message)
    click.echo(service.apply_interest(savings.account_number).message)
    click.echo(f"Balance: {format_amount(savings.balance)}")
    click.echo(savings.withdraw(1000).message)
    click.echo()

    click.echo(checking.display())
    click.echo(checking.withdraw(750).message)
    click.echo(checking.withdraw(650).message)
    click.echo()

    _close_all(service)


@click.command("demo")
@click.option(
    "--section",
    type=click.Choice(SECTIONS),
    default="all",
    show_default=True,
    help="Which part of the walk-through to run",
)
@click.pass_context
def demo(ctx, section: str):
    """Run the account walk-through.

    The polymorphism section withdraws 500 from a standard, a savings and a
    checking account through the same call and shows how each kind decides.
    The inheritance section exercises deposits, interest, equality and
    combined balances.

    Examples:
        accountkit demo
        accountkit demo --section polymorphism
    """
    service = ctx.obj["service"]

    if section in ("polymorphism", "all"):
        run_polymorphism(service)
    if section in ("inheritance", "all"):
        run_inheritance(service)


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(demo)
