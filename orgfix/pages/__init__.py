"""Page transforms: table normalization & monthly day links."""

from orgfix.pages.identity import resolve_page_identity
from orgfix.pages.links import annotate_monthly_links
from orgfix.pages.models import DayLink, PageIdentity, PageReport
from orgfix.pages.pipeline import fix_html, fix_page
from orgfix.pages.tables import normalize_tables

__all__ = [
    "fix_page",
    "fix_html",
    "normalize_tables",
    "annotate_monthly_links",
    "resolve_page_identity",
    "PageIdentity",
    "DayLink",
    "PageReport",
]
