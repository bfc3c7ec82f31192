"""Default renderer: Jinja2-templated Markdown to HTML or PDF.

Source documents are Markdown files that may use Jinja2 expressions
(``{{ project }}``, ``{{ date }}`` ...). They are expanded, converted to HTML
with markdown2 and wrapped in a page template. PDF output is printed from
that HTML with WeasyPrint, which is imported only when a PDF is requested
because it needs Cairo/Pango on the system.
"""

from pathlib import Path
from typing import Any, Optional

import markdown2
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from job.schema import OutputFormat
from utils import get_logger

from .base import RenderError, parse_output_format

logger = get_logger(__name__)

MARKDOWN_EXTRAS = [
    "fenced-code-blocks",
    "tables",
    "strike",
    "header-ids",
    "cuddled-lists",
]

DEFAULT_PAGE_TEMPLATE = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title|e }}</title>
<style>
  body { font-family: "Helvetica Neue", Arial, sans-serif; color: #111827; max-width: 960px; margin: 2rem auto; padding: 0 1rem; line-height: 1.5; }
  h1, h2, h3 { color: #1F3A63; }
  table { border-collapse: collapse; margin: 1rem 0; }
  th, td { border: 1px solid #d1d5db; padding: 0.3rem 0.6rem; }
  pre { background: #f3f4f6; padding: 0.75rem; overflow-x: auto; }
  footer { margin-top: 2rem; font-size: 0.85em; color: #6b7280; }
</style>
</head>
<body>
{{ body }}
<footer>{{ footer|e }}</footer>
</body>
</html>
"""


def _require_weasy():
    try:
        from weasyprint import HTML
    except (ImportError, OSError) as e:
        raise RenderError(
            "WeasyPrint is required to render PDFs. Install it with `pip install weasyprint`; "
            f"it also needs Cairo/Pango on the system. Import error: {e}"
        ) from e
    return HTML


class MarkdownRenderer:
    """Renders Markdown source documents into HTML pages or PDFs."""

    def __init__(self, page_template: Optional[str] = None, extras: Optional[list[str]] = None):
        self.page_template = Template(page_template or DEFAULT_PAGE_TEMPLATE)
        self.extras = extras if extras is not None else list(MARKDOWN_EXTRAS)

    def render(
        self,
        source_path: Path,
        output_dir: Path,
        output_filename: str,
        output_format: OutputFormat | str,
        context: Optional[dict[str, Any]] = None,
    ) -> Path:
        """Render ``source_path`` into ``output_dir / output_filename``.

        Args:
            source_path: Markdown source document
            output_dir: Folder receiving the artifact
            output_filename: Artifact filename, extension included
            output_format: html or pdf
            context: Variables available to Jinja2 expressions in the source

        Returns:
            Path of the rendered artifact

        Raises:
            UnsupportedFormatError: If the format is not html or pdf
            RenderError: If the source cannot be read, expanded or written
        """
        output_format = parse_output_format(output_format)
        source_path = Path(source_path)
        target = Path(output_dir) / output_filename
        context = dict(context or {})

        if not source_path.is_file():
            raise RenderError(f"Source document does not exist: {source_path}")

        try:
            text = source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RenderError(f"Failed to read source document {source_path}: {e}") from e

        page = self.render_page(text, context, source_path.parent)

        if output_format is OutputFormat.HTML:
            try:
                target.write_text(page, encoding="utf-8")
            except OSError as e:
                raise RenderError(f"Failed to write {target}: {e}") from e
        else:
            HTML = _require_weasy()
            try:
                HTML(string=page, base_url=str(source_path.parent)).write_pdf(str(target))
            except Exception as e:
                raise RenderError(f"Failed to print PDF {target}: {type(e).__name__}: {e}") from e

        logger.debug(f"Rendered {source_path.name} -> {target}")
        return target

    def render_page(self, text: str, context: dict[str, Any], search_dir: Path) -> str:
        """Expand Jinja2 expressions, convert Markdown and wrap in the page template."""
        env = Environment(
            loader=FileSystemLoader(str(search_dir)),
            undefined=StrictUndefined,
            autoescape=False,
        )
        try:
            markdown_text = env.from_string(text).render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed to expand source document: {e}") from e

        body = markdown2.markdown(markdown_text, extras=self.extras)
        title = context.get("title") or context.get("project") or "Report"
        footer = f"Generated {context['date']}" if context.get("date") else ""
        return self.page_template.render(title=title, body=body, footer=footer)
