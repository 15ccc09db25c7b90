"""Run the page pass over files written by the org-publish export.

A page's URL path is its location relative to the site root, so
``<root>/Journal/2024/July 2024.html`` is processed as
``/Journal/2024/July 2024.html``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from orgfix.config import settings
from orgfix.pages.pipeline import fix_html
from orgfix.publish.models import FileError, FileResult, SiteReport

logger = logging.getLogger(__name__)


def url_path_for(file_path: Union[str, Path], site_root: Union[str, Path]) -> str:
    """Return the site-absolute URL path of *file_path* under *site_root*.

    Raises:
        ValueError: If *file_path* is not inside *site_root*.
    """
    relative = Path(file_path).resolve().relative_to(Path(site_root).resolve())
    return "/" + relative.as_posix()


def fix_file(
    file_path: Union[str, Path],
    site_root: Optional[Union[str, Path]] = None,
    *,
    url_path: Optional[str] = None,
    dry_run: bool = False,
    link_days: Optional[bool] = None,
) -> FileResult:
    """Post-process one HTML file in place.

    The URL path is *url_path* when given, otherwise derived from
    *site_root* (default ``settings.site_dir``).  The file is only rewritten
    when the pass changed the page and *dry_run* is off; other pages keep
    their exact bytes.

    Raises:
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If the file is not valid in ``settings.encoding``.
    """
    path = Path(file_path)
    if url_path is None:
        url_path = url_path_for(path, site_root if site_root is not None else settings.site_dir)

    original = path.read_text(encoding=settings.encoding)
    html, report = fix_html(original, url_path, link_days=link_days)
    # bs4 output never matches the export byte for byte
    changed = report.changed

    if changed and not dry_run:
        path.write_text(html, encoding=settings.encoding)
        logger.info(
            "Rewrote %s (%d table(s), %d link(s))",
            url_path, report.tables_normalized, report.links_added,
        )

    return FileResult(path=path, url_path=url_path, report=report, changed=changed)


def iter_html_files(site_root: Union[str, Path]) -> Iterator[Path]:
    """Yield every ``*.html`` file under *site_root*, sorted."""
    yield from sorted(p for p in Path(site_root).rglob("*.html") if p.is_file())


def fix_site(
    site_root: Optional[Union[str, Path]] = None,
    *,
    dry_run: bool = False,
    link_days: Optional[bool] = None,
) -> SiteReport:
    """Post-process every page under *site_root* (default ``settings.site_dir``).

    A file that fails to read, decode or write is logged and recorded in
    :attr:`SiteReport.errors`; the remaining files are still processed.
    """
    root = Path(site_root) if site_root is not None else settings.site_dir
    report = SiteReport(root=root)

    for path in iter_html_files(root):
        try:
            result = fix_file(path, root, dry_run=dry_run, link_days=link_days)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to process %s: %s", path, exc)
            report.errors.append(FileError(path=path, message=str(exc)))
            continue
        report.files.append(result)

    logger.info(
        "Processed %d page(s) under %s: %d changed, %d failed",
        len(report.files), root, report.files_changed, len(report.errors),
    )
    return report
