"""Account commands."""

import click
from ledgerbook.domain.classifier import classify_account
from ledgerbook.domain.reports import ReportService
from ledgerbook.utils.currency import format_currency


@click.group()
def account_group():
    """Inspect accounts derived from transactions."""
    pass


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List every account referenced by a transaction with its type and balance."""
    accounts = ReportService(ctx.obj["store"]).get_accounts()

    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo(f"{'Account':<40} {'Type':<20} {'Balance':>16}")
    click.echo("-" * 78)
    for acc in accounts:
        click.echo(
            f"{acc.name:<40} {acc.type.value:<20} {format_currency(acc.balance):>16}"
        )


@account_group.command("classify")
@click.argument("name")
def classify(name: str):
    """Show which account type NAME is classified as."""
    click.echo(f"{name}: {classify_account(name).value}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
