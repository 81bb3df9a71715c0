"""CLI entry point for oatts."""

import logging
from pathlib import Path

import click

from oatts.errors import OptionsError, SpecError
from oatts.generator.options import GenerateOptions, load_custom_values
from oatts.pipeline import generate as run_generate


def _split_list(ctx, param, value: str | None) -> tuple[str, ...] | None:
    """Parse a comma separated option value."""
    if value is None:
        return None
    return tuple(item.strip() for item in value.split(",") if item.strip())


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """oatts — generate API test scaffolding from OpenAPI/Swagger documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("-s", "--spec", "spec_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Path to the OpenAPI/Swagger document.")
@click.option("--host", default=None, help="Target hostname to use in the generated requests.")
@click.option("-p", "--paths", default=None, callback=_split_list, help="Comma separated list of paths to generate tests for.")
@click.option("--status-codes", default=None, callback=_split_list, help="Comma separated list of status codes to generate tests for.")
@click.option("-e", "--samples", is_flag=True, help="Generate sample response bodies rather than schemas.")
@click.option("-w", "--write-to", default=None, type=click.Path(file_okay=False, path_type=Path), help="Directory to write the generated tests to.")
@click.option("-c", "--consumes", default=None, help="Content-Type to use in requests when the operation supports it.")
@click.option("-o", "--produces", default=None, help="Accept type to use in requests when the operation supports it.")
@click.option("-u", "--custom-values", default=None, help="Custom request values as JSON; takes precedence over --custom-values-file.")
@click.option("--custom-values-file", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON/YAML file with custom request values.")
@click.option("-m", "--scheme", default=None, help="Scheme to use if several are declared.")
@click.option("-t", "--templates", default=None, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Directory of custom templates.")
@click.option("--seed", default=None, type=int, help="Seed for reproducible sample values.")
@click.option("--json", "as_json", is_flag=True, help="Print the compiled test plan as JSON instead of rendered code.")
def generate(
    spec_path: Path,
    host: str | None,
    paths: tuple[str, ...] | None,
    status_codes: tuple[str, ...] | None,
    samples: bool,
    write_to: Path | None,
    consumes: str | None,
    produces: str | None,
    custom_values: str | None,
    custom_values_file: Path | None,
    scheme: str | None,
    templates: Path | None,
    seed: int | None,
    as_json: bool,
):
    """Generate test scaffolding for an OpenAPI/Swagger document."""
    try:
        options = GenerateOptions(
            host=host,
            scheme=scheme,
            paths=paths,
            status_codes=status_codes,
            samples=samples,
            consumes=consumes,
            produces=produces,
            custom_values=load_custom_values(custom_values, custom_values_file),
            templates=templates,
            write_to=write_to,
            seed=seed,
        )
        if not as_json:
            click.echo(f"Parsing {spec_path}...", err=True)
        result = run_generate(spec_path, options)
    except (SpecError, OptionsError) as e:
        raise click.ClickException(str(e)) from e

    if result.empty:
        click.echo("No paths to process: nothing to generate.", err=True)
        raise click.exceptions.Exit(1)

    if as_json:
        click.echo(result.plan.model_dump_json(by_alias=True, indent=2))
    elif write_to is None:
        for filename, content in result.files.items():
            click.echo(f"# --- {filename} ---")
            click.echo(content)
    else:
        for filename in result.files:
            click.echo(f"  Created {write_to / filename}", err=True)
        click.echo(f"Generated {len(result.files)} files in {write_to}", err=True)
