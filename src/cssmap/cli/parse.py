"""CLI command: cssmap parse -- print the merged selector map."""

from __future__ import annotations

import json
from pathlib import Path

import click

from cssmap.cli.common import config_options, load_stylesheet
from cssmap.config import ParserConfig


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "text"]),
    default="json",
    show_default=True,
    help="Output format.",
)
@config_options
def parse(cssfile: str, fmt: str, keep_comments: bool, encoding: str) -> None:
    """Parse a stylesheet and print every rule with its declarations.

    Repeated selectors are merged into one entry.
    """
    config = ParserConfig(strip_comments=not keep_comments, encoding=encoding)
    stylesheet = load_stylesheet(Path(cssfile), config)

    if fmt == "json":
        click.echo(json.dumps({str(rule): styles for rule, styles in stylesheet.items()}, indent=2))
        return

    for rule, styles in stylesheet.items():
        click.echo(f"{rule} ({rule.type.value})")
        for prop, value in styles.items():
            click.echo(f"  {prop}: {value}")
