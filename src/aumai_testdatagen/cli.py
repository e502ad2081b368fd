"""CLI entry point for aumai-testdatagen."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from aumai_testdatagen import __version__
from aumai_testdatagen.core import DataGenerator
from aumai_testdatagen.exceptions import DataGenError
from aumai_testdatagen.fixtures import DEFAULT_FIXTURES_DIR, export_to_file
from aumai_testdatagen.models import GenerationOptions


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, default=False, help="Enable INFO-level logging.")
def main(verbose: bool) -> None:
    """AumAI TestDataGen — seeded JSON test fixtures from declarative templates."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# generate command
# ---------------------------------------------------------------------------


@main.command("generate")
@click.argument("template")
@click.option(
    "--count",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of records to generate.",
)
@click.option(
    "--output",
    default=None,
    help="Output file name inside the fixtures directory. [default: <template>s.json]",
)
@click.option("--unique", is_flag=True, default=False, help="Reject duplicate records.")
@click.option(
    "--variations",
    is_flag=True,
    default=False,
    help="Append random numbers or suffixes to pooled values.",
)
@click.option(
    "--seed",
    default=None,
    type=int,
    help="Random seed for reproducible output.",
)
@click.option(
    "--fixtures-dir",
    default=DEFAULT_FIXTURES_DIR,
    show_default=True,
    envvar="AUMAI_TESTDATAGEN_FIXTURES_DIR",
    type=click.Path(file_okay=False),
    help="Directory the output file is written to (created if missing).",
)
@click.option(
    "--templates-dir",
    default=None,
    envvar="AUMAI_TESTDATAGEN_TEMPLATES_DIR",
    type=click.Path(exists=True, file_okay=False),
    help="Directory of <name>.json templates, searched before the built-ins.",
)
def generate_cmd(
    template: str,
    count: int,
    output: str | None,
    unique: bool,
    variations: bool,
    seed: int | None,
    fixtures_dir: str,
    templates_dir: str | None,
) -> None:
    """Generate TEMPLATE records and write them to a JSON fixture file."""
    generator = DataGenerator(seed=seed, templates_dir=templates_dir)
    options = GenerationOptions(
        count=count,
        seed=generator.seed,
        variations=variations,
        unique=unique,
    )

    try:
        batch = generator.generate_dataset(template, options)
        directory = Path(fixtures_dir)
        directory.mkdir(parents=True, exist_ok=True)
        output_path = export_to_file(batch.records, output or f"{template}s.json", directory)
    except DataGenError as exc:
        names = ", ".join(generator.template_names())
        raise click.ClickException(f"{exc} (available templates: {names})") from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot create fixtures directory {fixtures_dir}: {exc}") from exc

    click.echo(f"Generated {len(batch.records)} {template} records")
    click.echo(f"Saved to: {output_path}")
    click.echo(f"Seed: {generator.seed}")
    if unique and batch.metadata["duplicate_count"] == 0:
        click.echo("All records are unique")
    if variations:
        click.echo("Variations enabled")


# ---------------------------------------------------------------------------
# templates command
# ---------------------------------------------------------------------------


@main.command("templates")
@click.option(
    "--list",
    "list_all",
    is_flag=True,
    default=False,
    help="List all available templates.",
)
@click.option(
    "--templates-dir",
    default=None,
    envvar="AUMAI_TESTDATAGEN_TEMPLATES_DIR",
    type=click.Path(exists=True, file_okay=False),
    help="Directory of <name>.json templates, searched before the built-ins.",
)
def templates_cmd(list_all: bool, templates_dir: str | None) -> None:
    """List available record templates."""
    if not list_all:
        raise click.UsageError("Specify --list.")

    generator = DataGenerator(templates_dir=templates_dir)
    click.echo("\n--- Templates ---")
    for name in generator.template_names():
        try:
            template = generator.get_template(name)
        except DataGenError as exc:
            click.echo(f"  {name}  (invalid: {exc})")
            continue
        click.echo(f"  {name}  ({len(template.root.children)} fields)")
    click.echo("")


if __name__ == "__main__":
    main()
