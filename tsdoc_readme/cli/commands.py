"""CLI commands for the TSDoc README generator.

Provides the Click-based command group 'tsdoc' with subcommands for
generating README API tables and dumping the extracted documentation.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from tsdoc_readme import __version__
from tsdoc_readme.generators.api_docs import ApiDocsGenerator
from tsdoc_readme.parsers.extractor import DocumentationExtractor
from tsdoc_readme.utils.config import load_config
from tsdoc_readme.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="tsdoc-readme")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a YAML config file.",
)
@click.pass_context
def tsdoc(ctx: click.Context, config_path: Optional[str]) -> None:
    """TSDoc README Generator: API tables from TypeScript sources."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@tsdoc.command()
@click.argument(
    "root", type=click.Path(exists=True, file_okay=False), default="."
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show which READMEs would be generated without writing them.",
)
@click.pass_obj
def generate(config, root: str, dry_run: bool) -> None:
    """Generate API tables into package READMEs.

    Extracts documentation from the sources under ROOT and rewrites
    the generated section of each allowed package README.
    """
    generator = ApiDocsGenerator(root=root, config=config)
    generated = generator.run(dry_run=dry_run)
    if generated is None:
        raise click.ClickException("Documentation extraction failed")

    verb = "Would generate" if dry_run else "Generated"
    for path in generated:
        click.echo(f"  {verb}: {path}")
    click.echo(f"{verb} {len(generated)} README(s)")


@tsdoc.command()
@click.argument(
    "root", type=click.Path(exists=True, file_okay=False), default="."
)
@click.option(
    "--output", "-o", type=click.Path(), default=None, help="Output JSON file."
)
@click.pass_obj
def extract(config, root: str, output: Optional[str]) -> None:
    """Dump the extracted documentation as JSON.

    Writes to stdout unless --output is given.
    """
    extractor = DocumentationExtractor(root=root, config=config.extraction)
    try:
        docs = extractor.extract()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Documentation extraction failed: %s", e)
        raise click.ClickException("Documentation extraction failed") from e

    data = json.dumps({name: entry.to_dict() for name, entry in docs.items()}, indent=2)
    if output:
        Path(output).write_text(data + "\n", encoding="utf-8")
        click.echo(f"Documentation for {len(docs)} modules written to {output}")
    else:
        click.echo(data)
