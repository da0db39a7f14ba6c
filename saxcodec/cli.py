"""Command-line interface for saxcodec."""

import logging
import sys
from pathlib import Path

import click

from .codec.exporter import export_document
from .codec.importer import import_document
from .config import CodecSettings, load_settings
from .log import setup_logging
from .output.formatter import format_project_tree, format_validation_result
from .schema.catalog import KitCatalog
from .schema.errors import CatalogLoadError, CatalogValidationError, CodecError
from .schema.loader import load_catalog
from .validators.runner import run_validators


def _load_context(
    catalog_file: str | None, config_file: str | None
) -> tuple[KitCatalog, CodecSettings]:
    """Load the catalog and settings, exiting with code 2 on failure."""
    try:
        catalog = load_catalog(catalog_file) if catalog_file else KitCatalog()
        settings = load_settings(config_file)
    except CatalogLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except CatalogValidationError as e:
        click.echo(f"Catalog validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    return catalog, settings


def _import_file(sax_file: str, catalog: KitCatalog, settings: CodecSettings):
    """Import a SAX file, exiting with code 2 on failure."""
    try:
        return import_document(
            Path(sax_file).read_bytes(), catalog=catalog, settings=settings
        )
    except CodecError as e:
        click.echo(f"Import failed: {e}", err=True)
        sys.exit(2)


catalog_option = click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(exists=True, dir_okay=False),
    envvar="SAXCODEC_CATALOG",
    help="YAML kit catalog with slot definitions (defaults to SAXCODEC_CATALOG env var)",
)
config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    envvar="SAXCODEC_CONFIG",
    help="YAML codec settings (defaults to SAXCODEC_CONFIG env var)",
)


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """saxcodec: import, export and check SAX application documents."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("sax_file", type=click.Path(exists=True, dir_okay=False))
@catalog_option
@config_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with code 1 when any warning is reported",
)
def validate(
    sax_file: str,
    catalog_file: str | None,
    config_file: str | None,
    output_format: str,
    strict: bool,
):
    """Validate the links and structure of a SAX file.

    SAX_FILE is the path to a SAX XML document.

    Exit codes:
      0 - Checked (warnings do not fail without --strict)
      1 - Warnings found and --strict given
      2 - File, catalog or import error
    """
    catalog, settings = _load_context(catalog_file, config_file)
    project = _import_file(sax_file, catalog, settings)
    result = run_validators(project)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if strict and result.has_warnings:
        sys.exit(1)
    sys.exit(0)


@main.command()
@click.argument("sax_file", type=click.Path(exists=True, dir_okay=False))
@catalog_option
@config_option
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the document here instead of stdout",
)
def normalize(
    sax_file: str,
    catalog_file: str | None,
    config_file: str | None,
    output_file: str | None,
):
    """Import a SAX file and export it again in canonical form.

    Siblings are ordered by id, properties re-encoded, links whose
    endpoints do not resolve are dropped, and every component is annotated
    with its path.

    Exit codes:
      0 - Success
      2 - File, catalog or import error
    """
    catalog, settings = _load_context(catalog_file, config_file)
    project = _import_file(sax_file, catalog, settings)
    document = export_document(project, catalog=catalog, settings=settings)

    if output_file:
        Path(output_file).write_bytes(document)
        click.echo(f"Wrote: {output_file}")
    else:
        click.echo(document.decode("utf-8"), nl=False)
    sys.exit(0)


@main.command()
@click.argument("sax_file", type=click.Path(exists=True, dir_okay=False))
@catalog_option
@config_option
def inspect(sax_file: str, catalog_file: str | None, config_file: str | None):
    """Print the component tree and links of a SAX file."""
    catalog, settings = _load_context(catalog_file, config_file)
    project = _import_file(sax_file, catalog, settings)
    click.echo(format_project_tree(project))
    sys.exit(0)


if __name__ == "__main__":
    main()
