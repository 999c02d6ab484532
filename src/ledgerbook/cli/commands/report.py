"""Financial report commands."""

from typing import Sequence

import click
from ledgerbook.domain.entities import Account
from ledgerbook.domain.reports import ReportService
from ledgerbook.utils.currency import format_currency

LABEL_WIDTH = 50
AMOUNT_WIDTH = 20
LINE_WIDTH = LABEL_WIDTH + AMOUNT_WIDTH + 1


def _echo_row(label: str, amount, indent: int = 0) -> None:
    indent_str = "    " * indent
    width = LABEL_WIDTH - len(indent_str)
    click.echo(f"{indent_str}{label:<{width}} {format_currency(amount):>{AMOUNT_WIDTH}}")


def _echo_accounts(title: str, accounts: Sequence[Account]) -> None:
    click.echo(f"  {title}")
    if not accounts:
        click.echo("    (none)")
    for acc in accounts:
        _echo_row(acc.name, acc.balance, indent=1)


def _echo_total(label: str, amount) -> None:
    click.echo("-" * LINE_WIDTH)
    _echo_row(label, amount)
    click.echo("=" * LINE_WIDTH)
    click.echo()


@click.group()
def report_group():
    """Show financial statements."""
    pass


@report_group.command("balance-sheet")
@click.pass_context
def balance_sheet(ctx):
    """Show the balance sheet."""
    sheet = ReportService(ctx.obj["store"]).get_balance_sheet()

    click.echo("\nBalance Sheet")
    click.echo("*" * LINE_WIDTH)

    click.echo("Assets")
    _echo_accounts("Current Assets", sheet.assets.current_assets)
    _echo_accounts("Fixed Assets", sheet.assets.fixed_assets)
    _echo_total("Total Assets", sheet.assets.total_assets)

    click.echo("Liabilities")
    _echo_accounts("Current Liabilities", sheet.liabilities.current_liabilities)
    _echo_accounts("Long-term Liabilities", sheet.liabilities.long_term_liabilities)
    _echo_total("Total Liabilities", sheet.liabilities.total_liabilities)

    click.echo("Equity")
    _echo_accounts("Equity Accounts", sheet.equity.equity_accounts)
    _echo_total("Total Equity", sheet.equity.total_equity)


@report_group.command("trading")
@click.pass_context
def trading_account(ctx):
    """Show the trading account."""
    trading = ReportService(ctx.obj["store"]).get_trading_account()

    click.echo("\nTrading Account")
    click.echo("*" * LINE_WIDTH)
    _echo_row("Sales", trading.sales)
    _echo_row("Less: Cost of Goods Sold", trading.cost_of_goods_sold)
    _echo_total("Gross Profit", trading.gross_profit)


@report_group.command("profit-loss")
@click.pass_context
def profit_loss(ctx):
    """Show the profit and loss statement."""
    statement = ReportService(ctx.obj["store"]).get_profit_loss()

    click.echo("\nProfit & Loss")
    click.echo("*" * LINE_WIDTH)
    _echo_row("Gross Profit", statement.gross_profit)
    click.echo()
    _echo_accounts("Operating Expenses", statement.operating_expenses)
    _echo_row("Total Expenses", statement.total_expenses)
    _echo_total("Net Profit", statement.net_profit)


@report_group.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show headline metrics."""
    metrics = ReportService(ctx.obj["store"]).get_dashboard_metrics()

    click.echo("\nDashboard")
    click.echo("*" * LINE_WIDTH)
    _echo_row("Total Assets", metrics.total_assets)
    _echo_row("Total Liabilities", metrics.total_liabilities)
    _echo_row("Total Equity", metrics.total_equity)
    _echo_row("Gross Profit", metrics.gross_profit)
    _echo_row("Net Profit", metrics.net_profit)
    click.echo(f"{'Transactions':<{LABEL_WIDTH}} {metrics.total_transactions:>{AMOUNT_WIDTH}}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
