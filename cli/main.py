"""orgfix CLI: entry-point for post-processing a published org export.

Usage:
    python cli/main.py --help

Commands:
    page      → fix one exported HTML page
    site      → fix every page under the export root
    identify  → show which month/year a page path stands for
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from orgfix.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from orgfix.config import settings
from orgfix.log import setup_logger
from orgfix.pages.identity import resolve_page_identity
from orgfix.publish.runner import fix_file, fix_site, url_path_for

from cli.rendering import render_file_result, render_site_report

app = typer.Typer(
    name="orgfix",
    help="Post-process org-publish journal pages.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every page decision."),
) -> None:
    """Configure logging for every sub-command."""
    level = logging.DEBUG if verbose else settings.log_level
    setup_logger(level=level, log_file=settings.log_file)


# ---------------------------------------------------------------------------
# Single page
# ---------------------------------------------------------------------------
@app.command("page")
def page(
    file: Path = typer.Argument(..., help="Exported HTML file."),
    site_root: Optional[Path] = typer.Option(
        None, "--site-root", help="Export root the page's URL is relative to."
    ),
    url_path: Optional[str] = typer.Option(
        None, "--url-path", help="URL path of the page (overrides --site-root)."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report without writing."),
    no_links: bool = typer.Option(False, "--no-links", help="Only normalize tables."),
) -> None:
    """Normalize the tables of one page and link its day cells."""
    if not file.is_file():
        typer.echo(f"[page] No such file: {file}")
        raise typer.Exit(code=1)

    if url_path is None:
        root = site_root if site_root is not None else settings.site_dir
        try:
            url_path = url_path_for(file, root)
        except ValueError:
            typer.echo(f"[page] {file} is not inside {root}; pass --url-path.")
            raise typer.Exit(code=1)

    try:
        result = fix_file(
            file,
            url_path=url_path,
            dry_run=dry_run,
            link_days=False if no_links else None,
        )
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"[page] Error: {exc}")
        raise typer.Exit(code=1)

    typer.echo(render_file_result(result, dry_run=dry_run))


# ---------------------------------------------------------------------------
# Whole site
# ---------------------------------------------------------------------------
@app.command("site")
def site(
    root: Optional[Path] = typer.Argument(None, help="Export root (default: ORGFIX_SITE_DIR)."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report without writing."),
    no_links: bool = typer.Option(False, "--no-links", help="Only normalize tables."),
) -> None:
    """Post-process every HTML page under the export root."""
    root = root if root is not None else settings.site_dir
    if not root.is_dir():
        typer.echo(f"[site] No such directory: {root}")
        raise typer.Exit(code=1)

    report = fix_site(root, dry_run=dry_run, link_days=False if no_links else None)
    typer.echo(render_site_report(report, dry_run=dry_run))
    if report.errors:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------
@app.command("identify")
def identify(
    path: str = typer.Argument(..., help="Page URL or path, e.g. '/Journal/May2025.html'."),
) -> None:
    """Show the month and year a page path resolves to."""
    identity = resolve_page_identity(path)
    if identity is None:
        typer.echo(f"{path}: not a monthly page")
        return
    typer.echo(f"{path}: {identity.month_name} {identity.year}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
