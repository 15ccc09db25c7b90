"""Page identity: which calendar month, if any, a page path stands for.

Two URL shapes are produced by the export for monthly pages::

    /Notes/january_2026-173.html          (lowercase month, numeric suffix)
    /Journal/May2025.html
    /Journal/2024/July 2024.html          (optional year directory, spaces)

Each shape has its own matcher returning a :class:`PageIdentity` or
``None``; :func:`resolve_page_identity` tries them in that order.
"""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import unquote, urlsplit

from orgfix.pages.models import MONTH_NAMES, PageIdentity

logger = logging.getLogger(__name__)

_NOTES_PATTERN = re.compile(r"/Notes/([a-z]+)_([0-9]{4})-[0-9]+\.html$")
_JOURNAL_PATTERN = re.compile(r"/Journal/(?:[0-9]{4}/)?([A-Za-z]+)\s*([0-9]{4})\.html$")


def month_index(name: str) -> Optional[int]:
    """Return the zero-based index of an English month *name*, or ``None``.

    Matching is exact against the lowercase names; callers decide whether
    to fold case first.
    """
    try:
        return MONTH_NAMES.index(name)
    except ValueError:
        return None


def _identity(name: str, year: str) -> Optional[PageIdentity]:
    index = month_index(name)
    if index is None:
        return None
    return PageIdentity(month_index=index, year=int(year))


def match_notes_path(path: str) -> Optional[PageIdentity]:
    """Match ``/Notes/<month>_<yyyy>-<digits>.html``.

    The month name must already be lowercase: ``/Notes/January_2026-1.html``
    is not a monthly page.
    """
    match = _NOTES_PATTERN.search(path)
    if not match:
        return None
    return _identity(match.group(1), match.group(2))


def match_journal_path(path: str) -> Optional[PageIdentity]:
    """Match ``/Journal/[yyyy/]<Month><spaces?><yyyy>.html`` (any case)."""
    match = _JOURNAL_PATTERN.search(path)
    if not match:
        return None
    return _identity(match.group(1).lower(), match.group(2))


def decode_path(url_or_path: str) -> str:
    """Return the percent-decoded path component of *url_or_path*."""
    path = url_or_path
    if "://" in url_or_path:
        path = urlsplit(url_or_path).path
    return unquote(path)


def resolve_page_identity(url_or_path: str) -> Optional[PageIdentity]:
    """Return the month/year a page stands for, or ``None`` for any other page.

    Unrecognised paths and unknown month names are not errors; they simply
    mean the page is not a monthly page.
    """
    path = decode_path(url_or_path)
    identity = match_notes_path(path) or match_journal_path(path)
    if identity is None:
        logger.debug("Not a monthly page: %s", path)
    else:
        logger.debug(
            "Monthly page %s -> %s %d", path, identity.month_name, identity.year
        )
    return identity
