"""Main CLI entry point."""

import logging

import click
from ledgerbook.storage.factories import create_sqlite_store
from ledgerbook.storage.transaction_store import TransactionStore

# Import and register all commands at module level
from ledgerbook.cli.commands import account, add, report, transaction


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERBOOK_DB_PATH environment variable)",
    envvar="LEDGERBOOK_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Ledgerbook - Double-entry bookkeeping.

    Record debit/credit transactions and derive a balance sheet, trading
    account, profit and loss statement and dashboard metrics from them.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        kv_store = create_sqlite_store(database_path=db_path)
        kv_store.connect()
        ctx.call_on_close(kv_store.disconnect)
        ctx.obj["store"] = TransactionStore(kv_store)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
account.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
