"""Add transaction command."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import TransactionCategory
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.currency import format_currency
from ledgerbook.utils.date_parser import parse_date

CATEGORY_CHOICES = [c.value for c in TransactionCategory]


@click.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--debit", "debit_account", required=True, help="Account to debit (e.g., 'Cash')")
@click.option("--credit", "credit_account", required=True, help="Account to credit (e.g., 'Sales Revenue')")
@click.option("--amount", required=True, help="Transaction amount (e.g., 1000 or 1,234.56)")
@click.option(
    "--category",
    required=True,
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="Transaction category",
)
@click.option("--reference", help="Reference (e.g., invoice number)")
@click.option("--id", "transaction_id", help="Transaction ID (generated if not provided)")
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    description: str,
    debit_account: str,
    credit_account: str,
    amount: str,
    category: str,
    reference: str | None,
    transaction_id: str | None,
):
    """Record a transaction.

    Examples:
        ledgerbook add --date 2024-01-01 --description "Cash sale" --debit Cash --credit "Sales Revenue" --amount 1000 --category revenue
        ledgerbook add --description "January rent" --debit "Rent Expense" --credit Cash --amount 500 --category expense
    """
    service = TransactionService(ctx.obj["store"])

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = service.create_transaction(
            date=txn_date,
            description=description,
            debit_account=debit_account,
            credit_account=credit_account,
            amount=txn_amount,
            category=category,
            reference=reference,
            transaction_id=transaction_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Saved transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Debit: {txn.debit_account}")
    click.echo(f"  Credit: {txn.credit_account}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    click.echo(f"  Category: {txn.category.value}")
    if txn.reference:
        click.echo(f"  Reference: {txn.reference}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
