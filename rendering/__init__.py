"""Rendering of source documents into finished reports."""

from .base import RenderError, Renderer, UnsupportedFormatError, parse_output_format
from .markdown_renderer import MarkdownRenderer

__all__ = [
    "MarkdownRenderer",
    "RenderError",
    "Renderer",
    "UnsupportedFormatError",
    "parse_output_format",
]
