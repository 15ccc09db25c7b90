"""Publish package: run the page pass over an exported site on disk."""

from orgfix.publish.models import FileError, FileResult, SiteReport
from orgfix.publish.runner import fix_file, fix_site, url_path_for

__all__ = ["fix_file", "fix_site", "url_path_for", "FileResult", "FileError", "SiteReport"]
