"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import click

from cssmap.config import ParserConfig
from cssmap.model.rule import Stylesheet
from cssmap.parser import ParseError, unmarshal


def config_options(fn: Callable) -> Callable:
    """Attach the ParserConfig options to a command."""
    fn = click.option(
        "--encoding", default="utf-8", show_default=True, help="Source file encoding."
    )(fn)
    fn = click.option(
        "--keep-comments",
        is_flag=True,
        help="Tokenize comment text instead of stripping it first.",
    )(fn)
    return fn


def load_stylesheet(path: Path, config: ParserConfig) -> Stylesheet:
    """Parse *path*, or report the syntax error and exit with status 1."""
    try:
        return unmarshal(path.read_bytes(), config)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
