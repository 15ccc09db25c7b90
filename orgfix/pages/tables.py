"""Table normalizer: turn org "fake header" tables into ``<thead>``/``<tbody>``.

An org table written as::

    | Day | Entry   |
    | --- | ---     |
    | 1   | started |

is exported with the ``| --- |`` line as an ordinary row of ``<td>`` cells
holding dashes.  That row marks where the header ends.  Each table that
contains such a row is rebuilt as a header section (cells promoted to
``<th>``) followed by a body section; the separator row itself is dropped.
Tables without one are left exactly as they are.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# org exports empty cells as non-breaking spaces
_SEPARATOR_TEXT = re.compile(r"[-\u00a0\s]+")


def table_rows(table: Tag) -> List[Tag]:
    """Rows of *table* in document order, excluding rows of nested tables."""
    return [row for row in table.find_all("tr") if row.find_parent("table") is table]


def is_separator_row(row: Tag) -> bool:
    """True when every ``<td>`` of *row* holds only dashes and blanks.

    At least one dash is required, so a row of empty cells is not a
    separator.  A row without ``<td>`` cells never is.
    """
    cells = row.find_all("td", recursive=False)
    if not cells:
        return False
    for cell in cells:
        text = cell.get_text()
        if not _SEPARATOR_TEXT.fullmatch(text) or "-" not in text:
            return False
    return True


def find_separator_index(rows: Sequence[Tag]) -> Optional[int]:
    """Index of the first separator row in *rows*, or ``None``."""
    for index, row in enumerate(rows):
        if is_separator_row(row):
            return index
    return None


def _header_row(soup: BeautifulSoup, row: Tag) -> Tag:
    new_row = soup.new_tag("tr")
    for cell in row.find_all(["td", "th"], recursive=False):
        th = soup.new_tag("th")
        if cell.get("class"):
            th["class"] = cell["class"]
        for child in list(cell.contents):
            th.append(child.extract())
        new_row.append(th)
    return new_row


def normalize_table(soup: BeautifulSoup, table: Tag) -> bool:
    """Rebuild *table* around its first separator row.

    Returns ``True`` when the table was restructured.  A table that already
    has its own ``<thead>`` is considered normalized and is not touched.
    """
    # Also skips an export table that has a real <thead> and a dash row in
    # its body; the browser script would rebuild it.  Without the guard a
    # second pass would split again at a dash row left in the body.
    if table.find("thead", recursive=False) is not None:
        return False

    rows = table_rows(table)
    separator = find_separator_index(rows)
    if separator is None:
        return False

    thead = soup.new_tag("thead")
    tbody = soup.new_tag("tbody")

    for row in rows[:separator]:
        thead.append(_header_row(soup, row))

    for row in rows[separator + 1:]:
        tbody.append(row.extract())

    table.clear()
    table.append(thead)
    table.append(tbody)

    logger.debug(
        "Split table at row %d: %d header row(s), %d body row(s)",
        separator, separator, len(rows) - separator - 1,
    )
    return True


def normalize_tables(soup: BeautifulSoup) -> int:
    """Normalize every table in *soup*; return how many were restructured."""
    count = 0
    for table in soup.find_all("table"):
        if normalize_table(soup, table):
            count += 1
    return count
