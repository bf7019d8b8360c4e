"""CLI command: cssmap validate -- parse and lint a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssmap.cli.common import config_options, load_stylesheet
from cssmap.config import ParserConfig
from cssmap.model.diagnostic import Severity
from cssmap.validation import validate as run_validate


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@config_options
def validate(cssfile: str, keep_comments: bool, encoding: str) -> None:
    """Parse and validate a stylesheet.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    css_path = Path(cssfile)
    config = ParserConfig(strip_comments=not keep_comments, encoding=encoding)
    stylesheet = load_stylesheet(css_path, config)

    diagnostics = run_validate(stylesheet)

    if not diagnostics:
        click.echo(f"OK: {css_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
