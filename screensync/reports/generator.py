"""
screensync.reports.generator - Jinja2-based report generator.

Produces self-contained HTML reports with embedded CSS.
"""

from __future__ import annotations

import webbrowser
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from screensync.io import write_text


class ReportGenerator:
    """Jinja2-based HTML report generator."""

    def __init__(self, template_dir: Path | None = None):
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render(
        self,
        template_name: str,
        data: dict[str, Any],
        output_path: Path,
    ) -> Path:
        """Render a report template to an HTML file.

        Args:
            template_name: Name of the template file
            data: Data dictionary to inject into template
            output_path: Path to write the HTML file

        Returns:
            Path to the generated file
        """
        template = self.env.get_template(template_name)
        html = template.render(data=data, **data)
        write_text(output_path, html)
        return output_path

    def open_in_browser(self, path: Path) -> None:
        """Open a file in the default browser.

        Args:
            path: Path to HTML file
        """
        webbrowser.open(f"file://{path.resolve()}")
