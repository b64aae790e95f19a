"""CLI command: classlint inspect -- show how a class list is analysed."""

from __future__ import annotations

import sys

import click

from classlint.classes import (
    find_unknowns,
    group_classes,
    parse_prefix,
    render,
    signature,
    sort_classes,
    tokenize,
)
from classlint.config import build_settings
from classlint.model.settings import SettingsError
from classlint.resolvers import ManifestError, resolve_declarations, resolve_ranks


@click.command()
@click.argument("classes")
@click.option("--manifest", required=True, type=click.Path(exists=True, dir_okay=False), help="Utility manifest JSON file.")
@click.option("--print-width", type=int, default=None, help="Maximum rendered line width.")
@click.option("--extra-indentation", type=int, default=None, help="Extra indentation of wrapped class lines.")
def inspect(
    classes: str,
    manifest: str,
    print_width: int | None,
    extra_indentation: int | None,
) -> None:
    """Show prefix, signature and rank of each class in CLASSES.

    Ends with the canonical rendering of the list.
    """
    try:
        settings = build_settings(None, manifest, print_width, extra_indentation)
    except (SettingsError, ManifestError) as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(2)

    tokens = tokenize(classes)
    declarations = resolve_declarations(tokens, settings.candidates_to_css)
    ranks = resolve_ranks(tokens, settings.get_class_order)
    unknown = set(find_unknowns(tokens, settings.candidates_to_css))

    click.echo(f"Classes: {len(tokens)}")
    click.echo()
    for token, declaration, rank in zip(tokens, declarations, ranks):
        parts = [f"  {token}"]
        prefix = parse_prefix(token)
        if prefix:
            parts.append(f"prefix={prefix}")
        if declaration is not None:
            parts.append(f'signature="{signature(token, declaration)}"')
        parts.append(f"rank={'-' if rank is None else rank}")
        if token in unknown:
            parts.append("unknown")
        click.echo("  ".join(parts))
    click.echo()

    ordered = sort_classes(tokens, settings.get_class_order)
    rendered = render(
        group_classes(ordered),
        width=max(settings.print_width - settings.extra_indentation, 1),
        extra_indentation=settings.extra_indentation,
    )
    click.echo("Canonical:")
    click.echo(rendered)
