"""CLI helpers for statement date range resolution."""

import click

from ledgerbook.domain.entities import StatementFilters
from ledgerbook.utils.date_parser import get_date_range, parse_date


def resolve_statement_filters(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
) -> StatementFilters:
    """Resolve CLI date options into statement filters.

    No option at all means the statement covers all time.
    """
    if period and (start_date or end_date):
        click.echo(
            "Error: --period cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period:
        try:
            start, end = get_date_range(period)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        return StatementFilters(start_date=start, end_date=end)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: Start date must not be after end date.", err=True)
        ctx.exit(1)

    return StatementFilters(start_date=start, end_date=end)
