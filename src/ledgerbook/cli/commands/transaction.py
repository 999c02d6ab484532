"""Transaction management commands."""

import click
from ledgerbook.cli.commands.add import CATEGORY_CHOICES
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.currency import format_currency
from ledgerbook.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show category and reference columns")
@click.pass_context
def list_transactions(ctx, verbose: bool):
    """List stored transactions in the order they were recorded."""
    service = TransactionService(ctx.obj["store"])
    transactions = service.list_transactions()

    if not transactions:
        click.echo("No transactions found.")
        return

    header = f"{'ID':<34} {'Date':<10} {'Debit':<20} {'Credit':<20} {'Amount':>14}"
    if verbose:
        header += f"  {'Category':<18} {'Reference':<12}"
    header += "  Description"
    click.echo(header)
    click.echo("-" * len(header))

    for txn in transactions:
        line = (
            f"{txn.id:<34} {txn.date.isoformat():<10} {txn.debit_account[:20]:<20} "
            f"{txn.credit_account[:20]:<20} {format_currency(txn.amount):>14}"
        )
        if verbose:
            line += f"  {txn.category.value:<18} {(txn.reference or ''):<12}"
        line += f"  {txn.description}"
        click.echo(line)

    click.echo(f"\n{len(transactions)} transaction{'s' if len(transactions) != 1 else ''}")


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show a single transaction."""
    service = TransactionService(ctx.obj["store"])
    try:
        txn = service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Debit: {txn.debit_account}")
    click.echo(f"  Credit: {txn.credit_account}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    click.echo(f"  Category: {txn.category.value}")
    if txn.reference:
        click.echo(f"  Reference: {txn.reference}")


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--description", help="Transaction description")
@click.option("--debit", "debit_account", help="Account to debit")
@click.option("--credit", "credit_account", help="Account to credit")
@click.option("--amount", help="Transaction amount")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="Transaction category",
)
@click.option("--reference", help="Reference, or empty string to clear")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    date: str | None,
    description: str | None,
    debit_account: str | None,
    credit_account: str | None,
    amount: str | None,
    category: str | None,
    reference: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Use --reference "" to clear the reference.

    Examples:
        ledgerbook transaction update 3f2a... --amount 750
        ledgerbook transaction update 3f2a... --debit "Office Equipment" --category asset
    """
    service = TransactionService(ctx.obj["store"])

    # Parse date if provided
    txn_date = None
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    # Parse amount if provided
    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            date=txn_date,
            description=description,
            debit_account=debit_account,
            credit_account=credit_account,
            amount=txn_amount,
            category=category,
            reference=reference,
        )
        click.echo(f"Updated transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction. Unknown IDs are reported but not an error."""
    service = TransactionService(ctx.obj["store"])
    if service.delete_transaction(transaction_id):
        click.echo(f"Deleted transaction {transaction_id}")
    else:
        click.echo(f"No transaction with ID {transaction_id}; nothing deleted")


@transaction_group.command("clear")
@click.confirmation_option(prompt="Delete all stored transactions?")
@click.pass_context
def clear_transactions(ctx):
    """Delete all stored transactions."""
    ctx.obj["store"].clear()
    click.echo("Cleared all transactions")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
