"""``scalr-gen``: generate a Python client package from an OpenAPI document.

Usage:
    scalr-gen --spec openapi.yml --package scalr

The package is written to ``./<package>`` in the current directory.
"""

import logging
from pathlib import Path

import typer

from scalr_client.generator.exceptions import GeneratorError
from scalr_client.generator.generator import Generator
from scalr_client.generator.naming import sanitize_package_name
from scalr_client.log import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="scalr-gen",
    help="Generate a Python client package from a Scalr OpenAPI document.",
    add_completion=False,
)


@app.command()
def main(
    spec: Path = typer.Option(..., "--spec", help="Path to the OpenAPI spec file (JSON or YAML)."),
    package: str = typer.Option("scalr", "--package", help="Name of the generated package."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Generate the client package."""
    configure_logging(logging.DEBUG if verbose else logging.INFO)

    try:
        package_name = sanitize_package_name(package)
    except ValueError as e:
        typer.echo(f"Error: invalid package name: {e}", err=True)
        raise typer.Exit(code=1) from e
    if package_name != package:
        logger.info(f"Package name {package!r} sanitized to {package_name!r}")

    output_dir = Path.cwd() / package_name
    logger.info(f"Generating package {package_name!r} into {output_dir}")
    try:
        Generator(output_dir, package_name).generate(spec)
    except GeneratorError as e:
        typer.echo(f"Error: generation failed: {e}", err=True)
        raise typer.Exit(code=1) from e

    logger.info("Done.")


if __name__ == "__main__":
    app()
