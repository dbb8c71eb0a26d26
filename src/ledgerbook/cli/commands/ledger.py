"""Ledger statement commands."""

import functools
from pathlib import Path

import click
from ledgerbook.cli.date_filters import resolve_statement_filters
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import CompanyInfo
from ledgerbook.domain.entity import EntityService
from ledgerbook.domain.history import HistoryTab
from ledgerbook.domain.statement import StatementService
from ledgerbook.rendering.template import load_template
from ledgerbook.utils.date_parser import PERIODS

PAGE_BREAK = "<!-- PAGE BREAK -->"


def statement_options(command):
    """Options shared by every statement command."""
    options = [
        click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')"),
        click.option("--end-date", help="End date, inclusive (YYYY-MM-DD or relative like 'today')"),
        click.option("--period", type=click.Choice(PERIODS), help="Predefined period"),
        click.option(
            "--company-address",
            envvar="LEDGERBOOK_COMPANY_ADDRESS",
            help="Company address printed in the letterhead",
        ),
        click.option(
            "--company-email",
            envvar="LEDGERBOOK_COMPANY_EMAIL",
            help="Company email printed in the letterhead",
        ),
        click.option(
            "--company-phone",
            envvar="LEDGERBOOK_COMPANY_PHONE",
            help="Company phone printed in the letterhead",
        ),
        click.option(
            "--template",
            "template_path",
            type=click.Path(),
            envvar="LEDGERBOOK_TEMPLATE",
            help="Ledger template file (defaults to the built-in template)",
        ),
        click.option(
            "--output-dir",
            type=click.Path(file_okay=False),
            help="Write one HTML file per page into this directory instead of stdout",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _write_pages(pages: list[str], output_dir: str | None, stem: str) -> None:
    if output_dir is None:
        click.echo(f"\n{PAGE_BREAK}\n".join(pages))
        return

    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    for number, page in enumerate(pages, start=1):
        path = directory / f"{stem}-page-{number:02d}.html"
        path.write_text(page, encoding="utf-8")
        click.echo(f"Wrote {path}")
    click.echo(f"{len(pages)} page(s) written.")


def _statement_service(db, template_path: str | None) -> StatementService:
    return StatementService(db, template_loader=functools.partial(load_template, template_path))


@click.command("ledger")
@click.argument("entity", metavar="ENTITY")
@statement_options
@click.pass_context
def entity_ledger(
    ctx,
    entity: str,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    company_address: str | None,
    company_email: str | None,
    company_phone: str | None,
    template_path: str | None,
    output_dir: str | None,
):
    """Print the ledger statement of one entity.

    ENTITY can be an entity ID or name.

    Examples:
        ledgerbook ledger c-001 --period this-month
        ledgerbook ledger "Jane Doe" --start-date 2025-01-01 --output-dir out/
    """
    db = ctx.obj["db"]
    filters = resolve_statement_filters(
        ctx, start_date=start_date, end_date=end_date, period=period
    )
    company = CompanyInfo(address=company_address, email=company_email, phone=company_phone)

    try:
        profile = EntityService(db).resolve_entity(entity)
        pages = _statement_service(db, template_path).entity_statement(
            profile.id, filters, company
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _write_pages(pages, output_dir, profile.id)


@click.command("history")
@click.argument("tab", metavar="TAB")
@statement_options
@click.pass_context
def history_ledger(
    ctx,
    tab: str,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    company_address: str | None,
    company_email: str | None,
    company_phone: str | None,
    template_path: str | None,
    output_dir: str | None,
):
    """Print the ledger statement of a history tab.

    TAB is one of: Purchases, Sales, Middlemen, Cash, Bank, Credit Card, Expenses.

    Examples:
        ledgerbook history Cash --period last-month
    """
    db = ctx.obj["db"]
    filters = resolve_statement_filters(
        ctx, start_date=start_date, end_date=end_date, period=period
    )
    company = CompanyInfo(address=company_address, email=company_email, phone=company_phone)

    try:
        history_tab = HistoryTab.from_name(tab)
        pages = _statement_service(db, template_path).history_statement(
            history_tab, filters, company
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _write_pages(pages, output_dir, history_tab.name.lower())


def register_commands(cli):
    """Register statement commands with main CLI."""
    cli.add_command(entity_ledger)
    cli.add_command(history_ledger)
