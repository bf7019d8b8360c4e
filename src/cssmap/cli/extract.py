"""CLI commands: cssmap comments / cssmap tokens -- raw extraction output."""

from __future__ import annotations

from pathlib import Path

import click

from cssmap.extract import comments as find_comments
from cssmap.extract import licenses as find_licenses
from cssmap.lexer import tokenize


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--licenses", "only_licenses", is_flag=True, help="Only /*! ... */ banners.")
@click.option("--encoding", default="utf-8", show_default=True, help="Source file encoding.")
def comments(cssfile: str, only_licenses: bool, encoding: str) -> None:
    """Print every comment (or license banner) in a stylesheet."""
    data = Path(cssfile).read_bytes()
    found = find_licenses(data, encoding) if only_licenses else find_comments(data, encoding)
    for comment in found:
        click.echo(comment)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8", show_default=True, help="Source file encoding.")
def tokens(cssfile: str, encoding: str) -> None:
    """Dump the token stream of a stylesheet (comments are not stripped)."""
    for token in tokenize(Path(cssfile).read_bytes(), encoding=encoding):
        click.echo(f"{token.line:>5}  {token.category.value:<16} {token.text}")
