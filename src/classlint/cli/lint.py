"""CLI command: classlint lint -- lint class lists in JSX/TSX files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from classlint.config import build_settings, load_config
from classlint.model.diagnostic import Severity
from classlint.model.settings import SettingsError
from classlint.resolvers import ManifestError, ResolverContractError
from classlint.rules import lint as run_lint
from classlint.source import apply_fixes

log = logging.getLogger("classlint")


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--manifest", type=click.Path(exists=True, dir_okay=False), help="Utility manifest JSON file.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON config file.")
@click.option("--print-width", type=int, default=None, help="Maximum rendered line width.")
@click.option("--extra-indentation", type=int, default=None, help="Extra indentation of wrapped class lines.")
@click.option("--fix", is_flag=True, help="Rewrite files with fixes applied.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def lint(
    files: tuple[str, ...],
    manifest: str | None,
    config_path: str | None,
    print_width: int | None,
    extra_indentation: int | None,
    fix: bool,
    verbose: bool,
) -> None:
    """Lint class lists in FILES.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, 1 if there are errors, or 2 on a configuration
    problem.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(config_path) if config_path else None
        settings = build_settings(config, manifest, print_width, extra_indentation)
    except (SettingsError, ManifestError) as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(2)

    errors = warnings = infos = fixed = 0
    for filename in files:
        path = Path(filename)
        source = path.read_text(encoding="utf-8")
        try:
            diagnostics = run_lint(source, settings)
            if fix and any(d.fix for d in diagnostics):
                source = apply_fixes(source, diagnostics)
                path.write_text(source, encoding="utf-8")
                fixed += 1
                log.info("Wrote fixes to %s", path)
                diagnostics = run_lint(source, settings)
        except ResolverContractError as exc:
            click.echo(f"Resolver error: {exc}", err=True)
            sys.exit(2)

        for diag in diagnostics:
            click.echo(f"{path}:{diag}")
        errors += sum(1 for d in diagnostics if d.severity is Severity.ERROR)
        warnings += sum(1 for d in diagnostics if d.severity is Severity.WARNING)
        infos += sum(1 for d in diagnostics if d.severity is Severity.INFO)

    click.echo()
    summary = f"Summary: {len(files)} file(s), {errors} error(s), {warnings} warning(s), {infos} info"
    if fix:
        summary += f", {fixed} file(s) fixed"
    click.echo(summary)

    if errors:
        sys.exit(1)
    sys.exit(0)
