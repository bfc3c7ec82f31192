"""Filename construction for report sources and rendered artifacts."""

from .filename import NamingError, build_name, dated_filename, source_filename

__all__ = [
    "NamingError",
    "build_name",
    "dated_filename",
    "source_filename",
]
