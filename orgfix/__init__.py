"""orgfix: post-processing for org-publish journal exports."""

__version__ = "0.1.0"
