"""Entity profile commands."""

import click
from ledgerbook.cli.date_filters import resolve_statement_filters
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import EntityType
from ledgerbook.domain.entity import EntityService
from ledgerbook.domain.statement import StatementService
from ledgerbook.rendering.formatting import format_currency
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import PERIODS

ENTITY_TYPE_CHOICES = click.Choice([t.value for t in EntityType], case_sensitive=False)


def _entity_type(value: str | None) -> EntityType | None:
    if value is None:
        return None
    for entity_type in EntityType:
        if entity_type.value.lower() == value.lower():
            return entity_type
    return None


@click.group()
def entity_group():
    """Manage customer, supplier and middleman profiles."""
    pass


@entity_group.command("create")
@click.argument("entity_id", metavar="ENTITY_ID")
@click.argument("name", metavar="NAME")
@click.option("--type", "entity_type", type=ENTITY_TYPE_CHOICES, default="Customer", help="Entity type")
@click.option("--phone", default="", help="Phone number")
@click.option("--email", default="", help="Email address")
@click.option("--balance", default="0", help="Current balance (e.g. '1,250.00' or '(300)')")
@click.option("--address", default="", help="Postal address")
@click.option("--notes", default="", help="Free-form notes")
@click.pass_context
def create_entity(
    ctx,
    entity_id: str,
    name: str,
    entity_type: str,
    phone: str,
    email: str,
    balance: str,
    address: str,
    notes: str,
):
    """Create a new entity profile.

    Examples:
        ledgerbook entity create c-001 "Jane Doe" --phone "555-0100"
        ledgerbook entity create s-001 "Phone Wholesale" --type Supplier
    """
    db = ctx.obj["db"]
    service = EntityService(db)

    try:
        created_id = service.create_entity(
            entity_id=entity_id,
            name=name,
            entity_type=_entity_type(entity_type),
            phone=phone,
            email=email,
            balance=parse_amount(balance),
            address=address,
            notes=notes,
        )
        click.echo(f"Created {entity_type.lower()} '{name}' (ID: {created_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@entity_group.command("list")
@click.option("--type", "entity_type", type=ENTITY_TYPE_CHOICES, help="Only list this entity type")
@click.pass_context
def list_entities(ctx, entity_type: str | None):
    """List entity profiles."""
    db = ctx.obj["db"]
    service = EntityService(db)

    entities = service.list_entities(_entity_type(entity_type))
    if not entities:
        click.echo("No entities found.")
        return

    click.echo("\nEntities:")
    click.echo("-" * 80)
    for profile in entities:
        click.echo(
            f"{profile.id:<12} | {profile.name:<25} | {profile.entity_type.value:<10} | "
            f"Balance: {format_currency(profile.balance)}"
        )


@entity_group.command("show")
@click.argument("entity", metavar="ENTITY")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--period", type=click.Choice(PERIODS), help="Predefined period")
@click.pass_context
def show_entity(ctx, entity: str, start_date: str | None, end_date: str | None, period: str | None):
    """Show an entity profile with its ledger totals.

    ENTITY can be an entity ID or name.
    """
    db = ctx.obj["db"]
    service = EntityService(db)
    statements = StatementService(db)

    filters = resolve_statement_filters(
        ctx, start_date=start_date, end_date=end_date, period=period
    )
    try:
        profile = service.resolve_entity(entity)
        summary = statements.entity_summary(profile.id, filters)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\n{profile.name} ({profile.entity_type.value}, ID: {profile.id})")
    if profile.phone:
        click.echo(f"  Phone: {profile.phone}")
    if profile.email:
        click.echo(f"  Email: {profile.email}")
    if profile.address:
        click.echo(f"  Address: {profile.address}")
    click.echo(f"  Balance: {format_currency(profile.balance)}")
    click.echo("-" * 40)
    click.echo(f"  Total inflow:  {format_currency(summary.inflow):>16}")
    click.echo(f"  Total outflow: {format_currency(summary.outflow):>16}")
    click.echo(f"  Net:           {format_currency(summary.net):>16}")
    click.echo(f"  Balance due:   {format_currency(summary.credit_balance):>16}")


def register_commands(cli):
    """Register entity commands with main CLI."""
    cli.add_command(entity_group, name="entity")
