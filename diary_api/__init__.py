"""Read-only API for diary posts, personal activity logs and daily progress."""

__version__ = "1.0.0"
