"""Tests for the per-page pipeline (identity → tables → day links)."""

from __future__ import annotations

from bs4 import BeautifulSoup

from orgfix.pages.models import PageIdentity
from orgfix.pages.pipeline import MONTHLY_PAGE_CLASS, fix_html, fix_page, mark_monthly_page


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_MONTHLY_HTML = """\
<!DOCTYPE html>
<html>
<head><title>May 2025</title></head>
<body class="org">
<table>
<tr><td class="org-right">Day</td><td class="org-left">Entry</td></tr>
<tr><td class="org-right">---</td><td class="org-left">---</td></tr>
<tr><td class="org-right">1</td><td class="org-left">started</td></tr>
<tr><td class="org-right">7 — wrote journal</td><td class="org-left">more</td></tr>
<tr><td class="org-right">32</td><td class="org-left">typo</td></tr>
</table>
</body>
</html>
"""

_ABOUT_HTML = """\
<html><body>
<table>
<tr><td>Name</td></tr>
<tr><td>-</td></tr>
<tr><td>7 things</td></tr>
</table>
</body></html>
"""


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


# ---------------------------------------------------------------------------
# mark_monthly_page
# ---------------------------------------------------------------------------

class TestMarkMonthlyPage:
    def test_adds_class_to_body(self) -> None:
        soup = _soup('<html><body class="org"></body></html>')
        assert mark_monthly_page(soup) is True
        assert soup.body["class"] == ["org", MONTHLY_PAGE_CLASS]

    def test_not_duplicated(self) -> None:
        soup = _soup("<html><body></body></html>")
        mark_monthly_page(soup)
        assert mark_monthly_page(soup) is False
        assert soup.body["class"] == [MONTHLY_PAGE_CLASS]

    def test_fragment_without_body_uses_root(self) -> None:
        soup = _soup("<div><table></table></div>")
        mark_monthly_page(soup)
        assert soup.div["class"] == [MONTHLY_PAGE_CLASS]

    def test_empty_document(self) -> None:
        soup = _soup("")
        mark_monthly_page(soup)
        assert str(soup) == ""


# ---------------------------------------------------------------------------
# fix_page
# ---------------------------------------------------------------------------

class TestFixPage:
    def test_monthly_page(self) -> None:
        soup = _soup(_MONTHLY_HTML)
        report = fix_page(soup, "/Journal/May2025.html", link_days=True)

        assert report.identity == PageIdentity(4, 2025)
        assert report.is_monthly is True
        assert report.tables_normalized == 1
        assert report.links_added == 2

        assert MONTHLY_PAGE_CLASS in soup.body["class"]
        assert [th.get_text() for th in soup.thead.find_all("th")] == ["Day", "Entry"]

        links = [a["href"] for a in soup.tbody.find_all("a")]
        assert links == [
            "/Journal/2025/05-May/01-May-2025-Thursday.html",
            "/Journal/2025/05-May/07-May-2025-Wednesday.html",
        ]
        # day 32 stays plain
        assert soup.tbody.find_all("tr")[2].td.find("a") is None

    def test_non_monthly_page_only_normalizes(self) -> None:
        soup = _soup(_ABOUT_HTML)
        report = fix_page(soup, "/About.html", link_days=True)

        assert report.identity is None
        assert report.is_monthly is False
        assert report.tables_normalized == 1
        assert report.links_added == 0
        assert soup.find("a") is None
        assert not soup.body.get("class")

    def test_link_days_off(self) -> None:
        soup = _soup(_MONTHLY_HTML)
        report = fix_page(soup, "/Journal/May2025.html", link_days=False)

        assert report.tables_normalized == 1
        assert report.links_added == 0
        assert soup.find("a") is None
        assert MONTHLY_PAGE_CLASS in soup.body["class"]

    def test_link_days_defaults_to_settings(self, monkeypatch) -> None:
        monkeypatch.setattr("orgfix.config.settings.link_days", False)
        soup = _soup(_MONTHLY_HTML)
        report = fix_page(soup, "/Journal/May2025.html")
        assert report.links_added == 0

    def test_monthly_page_without_separator_gets_no_links(self) -> None:
        soup = _soup("<html><body><table><tr><td>1</td></tr></table></body></html>")
        report = fix_page(soup, "/Journal/May2025.html", link_days=True)
        assert report.tables_normalized == 0
        assert report.links_added == 0


# ---------------------------------------------------------------------------
# fix_html
# ---------------------------------------------------------------------------

class TestFixHtml:
    def test_returns_serialised_document(self) -> None:
        html, report = fix_html(_MONTHLY_HTML, "/Notes/may_2025-99.html", link_days=True)
        assert report.identity == PageIdentity(4, 2025)
        assert "<thead>" in html
        assert 'href="/Journal/2025/05-May/07-May-2025-Wednesday.html"' in html
        assert "---" not in html

    def test_untouched_page_round_trips(self) -> None:
        html = "<html><body><p>Hello</p></body></html>"
        out, report = fix_html(html, "/About.html", link_days=True)
        assert out == html
        assert report.tables_normalized == 0

    def test_second_run_is_stable(self) -> None:
        once, _ = fix_html(_MONTHLY_HTML, "/Journal/May2025.html", link_days=True)
        twice, report = fix_html(once, "/Journal/May2025.html", link_days=True)

        assert report.changed is False
        assert report.tables_normalized == 0
        assert report.links_added == 0
        soup = _soup(twice)
        assert len(soup.find_all("thead")) == 1
        assert all(len(td.find_all("a")) <= 1 for td in soup.find_all("td"))
        assert soup.body["class"].count(MONTHLY_PAGE_CLASS) == 1


# ---------------------------------------------------------------------------
# Pages as org-publish writes them
# ---------------------------------------------------------------------------

_EXPORT_MONTHLY_HTML = """\
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml" lang="en" xml:lang="en">
<head>
<meta http-equiv="Content-Type" content="text/html;charset=utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>May 2025</title>
<link rel="stylesheet" type="text/css" href="/assets/style.css">
<script src="/assets/fix-tables.js"></script>
</head>
<body>
<div id="content" class="content">
<h1 class="title">May 2025</h1>
<table border="2" cellspacing="0" cellpadding="6" rules="groups" frame="hsides">


<colgroup>
<col  class="org-right">

<col  class="org-left">
</colgroup>
<tbody>
<tr>
<td class="org-right">Day</td>
<td class="org-left">Entry</td>
</tr>

<tr>
<td class="org-right">---</td>
<td class="org-left">---</td>
</tr>

<tr>
<td class="org-right">1</td>
<td class="org-left">Garden&nbsp;work<br>planted beans</td>
</tr>

<tr>
<td class="org-right">7 &#8212; wrote journal</td>
<td class="org-left">&amp; slept</td>
</tr>

<tr>
<td class="org-right">Total</td>
<td class="org-left">&nbsp;</td>
</tr>
</tbody>
</table>
</div>
<div id="postamble" class="status">
<p class="date">Created: 2025-06-01 Sun 09:12</p>
</div>
</body>
</html>
"""

_EXPORT_ABOUT_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>About</title>
</head>
<body>
<div id="content" class="content">
<p>Notes&nbsp;&amp;&nbsp;journal<br>since 2019</p>
<table border="2" cellspacing="0" cellpadding="6" rules="groups" frame="hsides">
<colgroup>
<col  class="org-left">
</colgroup>
<tbody>
<tr>
<td class="org-left">Tool</td>
</tr>
<tr>
<td class="org-left">&nbsp;</td>
</tr>
<tr>
<td class="org-left">Emacs</td>
</tr>
</tbody>
</table>
</div>
</body>
</html>
"""


class TestOrgExportPages:
    def test_monthly_export_page(self) -> None:
        soup = _soup(_EXPORT_MONTHLY_HTML)
        report = fix_page(soup, "/Journal/2025/May 2025.html", link_days=True)

        assert report.changed is True
        assert report.marked is True
        assert report.tables_normalized == 1
        assert report.links_added == 2

        table = soup.table
        assert [c.name for c in table.find_all(True, recursive=False)] == ["thead", "tbody"]
        header = table.thead.find_all("th")
        assert [th.get_text() for th in header] == ["Day", "Entry"]
        assert [th["class"] for th in header] == [["org-right"], ["org-left"]]

        rows = table.tbody.find_all("tr", recursive=False)
        assert len(rows) == 3
        assert rows[0].td.a["href"] == "/Journal/2025/05-May/01-May-2025-Thursday.html"
        assert rows[1].td.a.get_text() == "7 — wrote journal"
        assert rows[2].td.find("a") is None
        # second cells keep entities and markup
        assert rows[0].find_all("td")[1].find("br") is not None
        assert "Garden\u00a0work" in rows[0].get_text()
        assert rows[1].find_all("td")[1].get_text() == "& slept"

    def test_non_monthly_export_page_reports_no_change(self) -> None:
        soup = _soup(_EXPORT_ABOUT_HTML)
        report = fix_page(soup, "/About.html", link_days=True)

        assert report.changed is False
        assert report.marked is False
        assert report.tables_normalized == 0
        assert soup.find("thead") is None

    def test_second_pass_over_export_reports_no_change(self) -> None:
        once, first = fix_html(_EXPORT_MONTHLY_HTML, "/Journal/May2025.html", link_days=True)
        twice, second = fix_html(once, "/Journal/May2025.html", link_days=True)

        assert first.changed is True
        assert second.changed is False
        assert second.links_added == 0
        soup = _soup(twice)
        assert len(soup.find_all("thead")) == 1
        assert len(soup.tbody.find_all("a")) == 2
