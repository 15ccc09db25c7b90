"""Data models for file and site runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from orgfix.pages.models import PageReport


@dataclass
class FileResult:
    """Outcome of post-processing one HTML file."""

    path: Path
    url_path: str
    report: PageReport
    changed: bool


@dataclass
class FileError:
    """A file that could not be read, decoded or written."""

    path: Path
    message: str


@dataclass
class SiteReport:
    """Outcome of post-processing every page under a site root."""

    root: Path
    files: List[FileResult] = field(default_factory=list)
    errors: List[FileError] = field(default_factory=list)

    @property
    def tables_normalized(self) -> int:
        return sum(f.report.tables_normalized for f in self.files)

    @property
    def links_added(self) -> int:
        return sum(f.report.links_added for f in self.files)

    @property
    def monthly_pages(self) -> int:
        return sum(1 for f in self.files if f.report.is_monthly)

    @property
    def files_changed(self) -> int:
        return sum(1 for f in self.files if f.changed)
