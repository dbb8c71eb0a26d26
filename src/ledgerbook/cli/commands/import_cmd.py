"""Document import command."""

import click
from ledgerbook.domain.documents import DocumentImportService


@click.command("import")
@click.argument("export_file", type=click.Path(exists=True))
@click.pass_context
def import_documents(ctx, export_file: str):
    """Import entities and transactions from a JSON export."""
    db = ctx.obj["db"]
    service = DocumentImportService(db)

    try:
        result = service.import_file(file_path=export_file)
        click.echo(f"\nImport complete:")
        click.echo(f"  Entities: {result['entities']} created")
        click.echo(f"  Imported: {result['imported']} transactions")
        click.echo(f"  Skipped: {result['skipped']} duplicates")
        if result["errors"]:
            click.echo(f"  Errors: {len(result['errors'])}")
            for error in result["errors"]:
                click.echo(f"    {error}", err=True)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_documents)
