"""Script execution command."""

import click

from accountkit.cli.error_handling import handle_domain_error
from accountkit.domain.account import AccountService
from accountkit.domain.entities import equals
from accountkit.domain.errors import DomainError
from accountkit.domain.money import format_amount
from accountkit.utils.account_resolver import parse_account_number, resolve_account
from accountkit.utils.amount_parser import parse_amount
from accountkit.utils.script_parser import ScriptCommand, parse_script


def execute_command(service: AccountService, command: ScriptCommand) -> None:
    """Execute one parsed script command, echoing its output.

    Raises:
        DomainError: If the command refers to an unknown account or has
            malformed arguments. Rejected deposits and withdrawals are
            echoed, not raised.
    """
    args = command.args

    if command.name == "open":
        terms = {key: parse_amount(value) for key, value in command.terms.items()}
        account = service.open_account(
            args["kind"],
            parse_account_number(args["number"]),
            args["holder"],
            parse_amount(args["balance"]),
            **terms,
        )
        click.echo(f"{account.title} {account.account_number} opened for {account.holder}")
        return

    if command.name == "list":
        accounts = service.list_accounts()
        if not accounts:
            click.echo("No accounts open.")
            return
        for acc in accounts:
            click.echo(
                f"#{acc.account_number:<6d} | {acc.kind.value:8s} | {acc.holder:24s} | "
                f"{format_amount(acc.balance):>14s}"
            )
        return

    if command.name == "total":
        click.echo(f"Total balance: {format_amount(service.total_balance())}")
        return

    account_number = resolve_account(service, args["account"])

    if command.name == "deposit":
        click.echo(service.deposit(account_number, parse_amount(args["amount"])).message)
    elif command.name == "withdraw":
        click.echo(service.withdraw(account_number, parse_amount(args["amount"])).message)
    elif command.name == "interest":
        click.echo(service.apply_interest(account_number).message)
    elif command.name == "display":
        click.echo(service.get_account(account_number).display())
    elif command.name == "balance":
        account = service.get_account(account_number)
        click.echo(f"Balance of {account_number}: {format_amount(account.balance)}")
    elif command.name == "compare":
        other_number = resolve_account(service, args["other"])
        first = service.get_account(account_number)
        second = service.get_account(other_number)
        click.echo(f"{account_number} == {other_number}: {equals(first, second)}")
        click.echo(f"Combined balance: {format_amount(first + second)}")
    elif command.name == "close":
        account = service.close_account(account_number)
        click.echo(f"{account.title} {account_number} closed")


@click.command("run")
@click.argument("script", type=click.File("r"))
@click.pass_context
def run_script(ctx, script):
    """Run an account session script.

    SCRIPT is a text file with one command per line, or '-' for stdin.
    Commands: open, deposit, withdraw, interest, display, balance, compare,
    close, list, total. Lines starting with '#' are comments.

    Rejected deposits and withdrawals are reported and the script continues.
    Malformed lines and unknown accounts stop the script with an error.

    Examples:
        accountkit run session.txt
        printf 'open checking 5872 "Batuhan" 700 overdraft_limit=550\\nwithdraw 5872 1200\\n' | accountkit run -
    """
    service = ctx.obj["service"]

    try:
        commands = parse_script(script)
    except DomainError as e:
        handle_domain_error(ctx, e)

    for command in commands:
        try:
            execute_command(service, command)
        except DomainError as e:
            handle_domain_error(ctx, e, context=f"line {command.line_number}")


def register_commands(cli):
    """Register run command with main CLI."""
    cli.add_command(run_script)
