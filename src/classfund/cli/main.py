"""Main CLI entry point."""

import logging

import click
from classfund.database.factories import DB_PATH_ENV_VAR, create_sqlite_database

# Import and register all commands at module level
from classfund.cli.commands import (
    balance,
    entry,
    evidence,
    period,
    report,
    review,
    settings,
    submit,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; INFO and up when verbose, else WARNING."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format=LOG_FORMAT)
    logging.getLogger("classfund").setLevel(logging.INFO if verbose else logging.WARNING)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Show informational and audit log messages")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Classfund - classroom fee collection ledger.

    Members submit payment evidence, administrators review and split it
    across billing periods, and balances are computed from approved entries.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
submit.register_commands(cli)
review.register_commands(cli)
entry.register_commands(cli)
evidence.register_commands(cli)
period.register_commands(cli)
settings.register_commands(cli)
balance.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
