"""Data models for a single page pass."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# Fixed English names; ``calendar.day_name`` and ``%A`` follow the locale.
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


@dataclass(frozen=True)
class PageIdentity:
    """The calendar month a monthly page summarises.

    ``month_index`` is zero-based (January is 0).
    """

    month_index: int
    year: int

    @property
    def month_name(self) -> str:
        """Capitalised English month name, e.g. ``"May"``."""
        return MONTH_NAMES[self.month_index].capitalize()

    @property
    def month_number(self) -> str:
        """Two-digit month number, e.g. ``"05"``."""
        return f"{self.month_index + 1:02d}"


@dataclass(frozen=True)
class DayLink:
    """A day cell resolved to the daily entry page it points at."""

    day: int
    date: datetime.date
    href: str

    @property
    def weekday(self) -> str:
        return WEEKDAY_NAMES[self.date.weekday()]


@dataclass
class PageReport:
    """What :func:`~orgfix.pages.pipeline.fix_page` did to one page."""

    path: str
    identity: Optional[PageIdentity] = None
    tables_normalized: int = 0
    links_added: int = 0
    marked: bool = False

    @property
    def is_monthly(self) -> bool:
        return self.identity is not None

    @property
    def changed(self) -> bool:
        """True when the pass modified the tree."""
        return self.marked or self.tables_normalized > 0 or self.links_added > 0
