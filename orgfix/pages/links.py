"""Monthly link annotator: link day cells to their daily journal entries.

On a monthly page every body row starts with the day of the month.  That
first cell is replaced by an anchor to the daily entry page the export
writes for the same date::

    /Journal/2025/05-May/07-May-2025-Wednesday.html
"""

from __future__ import annotations

import datetime
import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from orgfix.pages.models import DayLink, PageIdentity, WEEKDAY_NAMES

logger = logging.getLogger(__name__)

_LEADING_DAY = re.compile(r"^([0-9]+)")


def daily_entry_href(date: datetime.date) -> str:
    """URL of the daily entry page for *date*."""
    month = PageIdentity(month_index=date.month - 1, year=date.year)
    weekday = WEEKDAY_NAMES[date.weekday()]
    return (
        f"/Journal/{date.year}/{month.month_number}-{month.month_name}/"
        f"{date.day:02d}-{month.month_name}-{date.year}-{weekday}.html"
    )


def build_day_link(cell_text: str, identity: PageIdentity) -> Optional[DayLink]:
    """Resolve the day number at the start of *cell_text* within *identity*.

    Returns ``None`` when the text does not start with a digit or the day
    does not exist in that month (``31`` in April, ``29`` in a common-year
    February, or a number too large for a date).  The text is not stripped
    first.
    """
    match = _LEADING_DAY.match(cell_text)
    if not match:
        return None
    try:
        day = int(match.group(1))
        date = datetime.date(identity.year, identity.month_index + 1, day)
    except (ValueError, OverflowError):
        return None
    return DayLink(day=day, date=date, href=daily_entry_href(date))


def _is_linked(cell: Tag, link: DayLink, text: str) -> bool:
    anchor = cell.find("a", recursive=False)
    return (
        anchor is not None
        and len(cell.contents) == 1
        and anchor.get("href") == link.href
        and anchor.get_text() == text
    )


def annotate_monthly_links(soup: BeautifulSoup, identity: PageIdentity) -> int:
    """Wrap the first cell of every body row in a link to its daily entry.

    The anchor text is the cell's original text.  Rows that do not resolve
    to a day of the page's month stay plain, and cells already holding the
    right link are left alone.  Returns the number of cells changed.
    """
    linked = 0
    for row in soup.select("tbody tr"):
        cell = row.select_one(":scope > td:first-child")
        if cell is None:
            continue
        text = cell.get_text()
        link = build_day_link(text, identity)
        if link is None:
            logger.debug("No day link for cell %r", text)
            continue
        if _is_linked(cell, link, text):
            continue

        anchor = soup.new_tag("a", href=link.href)
        anchor.string = text
        cell.clear()
        cell.append(anchor)
        linked += 1
    return linked
