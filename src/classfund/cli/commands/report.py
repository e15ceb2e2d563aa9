"""Reporting commands."""

import click
from classfund.cli.commands.balance import MODE_CHOICES
from classfund.cli.display import format_amount
from classfund.domain.classroom import ClassroomService
from classfund.domain.reports import (
    classroom_statistics,
    member_balances,
    members_from_entries,
    period_matrix,
    top_contributors,
)


@click.group("report")
def report_group():
    """Classroom statistics and member reports."""
    pass


@report_group.command("stats")
@click.pass_context
def show_statistics(ctx):
    """Show income, expenses, balance and review progress."""
    entries = ctx.obj["db"].list_entries()
    stats = classroom_statistics(entries)

    click.echo(f"Total income:  {format_amount(stats.total_income):>12}")
    click.echo(f"Total expense: {format_amount(stats.total_expense):>12}")
    click.echo(f"Balance:       {format_amount(stats.balance):>12}")
    click.echo(f"Pending review: {stats.pending_count}")
    click.echo(f"Approval rate:  {stats.approval_rate}%")


@report_group.command("members")
@click.option(
    "--mode",
    type=click.Choice(list(MODE_CHOICES), case_sensitive=False),
    default="net",
    show_default=True,
)
@click.pass_context
def show_member_balances(ctx, mode: str):
    """Show the balance of every member."""
    entries = ctx.obj["db"].list_entries()
    members = members_from_entries(entries)
    if not members:
        click.echo("No members found.")
        return

    click.echo(f"{'Member':<24} {'Entries':>8} {'Balance':>12}")
    click.echo("-" * 46)
    for total in member_balances(entries, members, mode=MODE_CHOICES[mode.lower()]):
        click.echo(f"{total.member.label[:24]:<24} {total.count:>8} {format_amount(total.amount):>12}")


@report_group.command("top")
@click.option("--limit", type=int, default=10, show_default=True, help="Number of members to show")
@click.pass_context
def show_top_contributors(ctx, limit: int):
    """Rank members by approved deposits."""
    entries = ctx.obj["db"].list_entries()
    ranked = top_contributors(entries, members_from_entries(entries), limit=limit)
    if not ranked:
        click.echo("No contributions yet.")
        return

    for rank, total in enumerate(ranked, start=1):
        click.echo(
            f"{rank:>3}. {total.member.label[:24]:<24} {format_amount(total.amount):>12}  ({total.count} payments)"
        )


@report_group.command("matrix")
@click.option("--open-only", is_flag=True, help="Only include open periods")
@click.pass_context
def show_period_matrix(ctx, open_only: bool):
    """Show approved deposits per member and period."""
    db = ctx.obj["db"]
    catalog = ClassroomService(db).load_catalog()
    periods = catalog.open_period_names() if open_only else catalog.all_period_names()
    if not periods:
        click.echo("No periods found.")
        return

    entries = db.list_entries()
    matrix = period_matrix(entries, members_from_entries(entries), periods)

    header = f"{'Member':<20}" + "".join(f" {name[:10]:>10}" for name in matrix.periods) + f" {'Total':>12}"
    click.echo(header)
    click.echo("-" * len(header))
    for row in matrix.rows:
        cells = "".join(f" {format_amount(row.amounts[name]):>10}" for name in matrix.periods)
        click.echo(f"{row.member.label[:20]:<20}{cells} {format_amount(row.total):>12}")
    click.echo("-" * len(header))
    cells = "".join(f" {format_amount(matrix.period_totals[name]):>10}" for name in matrix.periods)
    click.echo(f"{'Total':<20}{cells} {format_amount(matrix.grand_total):>12}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group)
