"""Utilities for rendering run reports in the CLI."""

from __future__ import annotations

from orgfix.publish.models import FileResult, SiteReport


def render_file_result(result: FileResult, dry_run: bool = False) -> str:
    """Render the outcome of one page as a short status block.

    Args:
        result: The file outcome returned by ``fix_file``.
        dry_run: Whether the run skipped writing.

    Returns:
        Multi-line string for ``typer.echo``.
    """
    report = result.report
    if result.changed:
        status = "would change" if dry_run else "rewritten"
    else:
        status = "unchanged"

    month = "-"
    if report.identity is not None:
        month = f"{report.identity.month_name} {report.identity.year}"

    lines = [
        f"{result.url_path}  [{status}]",
        f"  Month  : {month}",
        f"  Tables : {report.tables_normalized}",
        f"  Links  : {report.links_added}",
    ]
    return "\n".join(lines)


def render_site_report(report: SiteReport, dry_run: bool = False) -> str:
    """Render a whole-site run: one line per changed page, then totals."""
    lines = []
    verb = "would change" if dry_run else "rewritten"

    for f in report.files:
        if f.changed:
            lines.append(
                f"  {f.url_path}  ({f.report.tables_normalized} table(s), "
                f"{f.report.links_added} link(s))"
            )
    for err in report.errors:
        lines.append(f"  ! {err.path}: {err.message}")

    lines.append(
        f"[site] {len(report.files)} page(s) under {report.root}: "
        f"{report.files_changed} {verb}, {report.monthly_pages} monthly, "
        f"{report.tables_normalized} table(s), {report.links_added} link(s), "
        f"{len(report.errors)} error(s)"
    )
    return "\n".join(lines)
