"""One pass over one published page.

``fix_page`` is the single entry point per page: resolve the page identity
from its path, normalize every table, then (monthly pages only) link the
day cells.  Linking runs after normalization because it walks the
``<tbody>`` rows the normalizer produces.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from bs4 import BeautifulSoup

from orgfix.config import settings
from orgfix.pages.identity import resolve_page_identity
from orgfix.pages.links import annotate_monthly_links
from orgfix.pages.models import PageReport
from orgfix.pages.tables import normalize_tables

logger = logging.getLogger(__name__)

MONTHLY_PAGE_CLASS = "monthly-page"


def mark_monthly_page(soup: BeautifulSoup) -> bool:
    """Add the ``monthly-page`` class to ``<body>`` (or the root element).

    Returns ``True`` only when the class was not there yet.
    """
    root = soup.body or soup.find(True)
    if root is None:
        return False
    classes = root.get("class") or []
    if MONTHLY_PAGE_CLASS in classes:
        return False
    root["class"] = [*classes, MONTHLY_PAGE_CLASS]
    return True


def fix_page(
    soup: BeautifulSoup,
    path: str,
    *,
    link_days: Optional[bool] = None,
) -> PageReport:
    """Post-process the page at URL *path* in place and report what changed.

    *link_days* overrides ``settings.link_days``; with it off only tables
    are normalized.
    """
    if link_days is None:
        link_days = settings.link_days

    report = PageReport(path=path, identity=resolve_page_identity(path))
    if report.identity is not None:
        report.marked = mark_monthly_page(soup)

    report.tables_normalized = normalize_tables(soup)

    if report.identity is not None and link_days:
        report.links_added = annotate_monthly_links(soup, report.identity)

    logger.debug(
        "%s: %d table(s) normalized, %d day link(s)",
        path, report.tables_normalized, report.links_added,
    )
    return report


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, settings.html_parser)


def fix_html(
    html: str,
    path: str,
    *,
    link_days: Optional[bool] = None,
) -> Tuple[str, PageReport]:
    """Parse *html*, run :func:`fix_page` and return the serialised result."""
    soup = parse_html(html)
    report = fix_page(soup, path, link_days=link_days)
    return str(soup), report
