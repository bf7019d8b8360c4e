"""CLI command: cssmap inspect -- summarize a stylesheet's structure."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

import click

from cssmap.cli.common import config_options, load_stylesheet
from cssmap.config import ParserConfig
from cssmap.extract import block_count, comments, licenses, names, rules, strip_comments
from cssmap.lexer import tokenize


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@config_options
def inspect(cssfile: str, keep_comments: bool, encoding: str) -> None:
    """Display blocks, selectors and identifiers of a stylesheet.

    Selectors declared in more than one block are flagged as repeated.
    """
    css_path = Path(cssfile)
    config = ParserConfig(strip_comments=not keep_comments, encoding=encoding)
    stylesheet = load_stylesheet(css_path, config)

    source = css_path.read_bytes().decode(encoding)
    text = strip_comments(source) if config.strip_comments else source
    tokens = tokenize(text)
    all_rules = rules(tokens)
    repeated = {rule for rule, count in Counter(all_rules).items() if count > 1}

    click.echo(f"File:     {css_path.name}")
    click.echo(f"Blocks:   {block_count(tokens)}")
    click.echo(f"Rules:    {len(stylesheet)}")
    click.echo(f"Comments: {len(comments(source))}")
    click.echo(f"Licenses: {len(licenses(source))}")
    click.echo()

    click.echo("Rules:")
    for rule, styles in stylesheet.items():
        parts = [f"  {rule}", f"type={rule.type.value}", f"declarations={len(styles)}"]
        if rule in repeated:
            parts.append("repeated")
        click.echo("  ".join(parts))
    click.echo()

    click.echo("Identifiers:")
    for name, count in Counter(names(tokens)).items():
        suffix = f" (x{count})" if count > 1 else ""
        click.echo(f"  {name}{suffix}")
