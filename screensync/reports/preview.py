"""
screensync.reports.preview - Screenplay preview report.

Renders a classified screenplay the way the editor shows it: one styled
line per element between the FADE IN: and FADE OUT. sentinels.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from screensync.editor import format_element_text
from screensync.elements import ElementCategory, Screenplay
from screensync.export.fdx import CLOSING, OPENING
from screensync.reports.generator import ReportGenerator
from screensync.utils import compute_stats


def generate_preview(
    screenplay: Screenplay,
    output_path: Path,
    words_per_page: int = 250,
    open_browser: bool = False,
) -> Path:
    """Generate the HTML preview of a screenplay.

    Args:
        screenplay: Classified screenplay
        output_path: Where to write the HTML file
        words_per_page: Words per page for the page estimate
        open_browser: Whether to open in browser

    Returns:
        Path to generated report
    """
    lines = [
        {
            "css_class": line.element.editor_key,
            "element": line.element.display_name,
            "text": format_element_text(line.text, line.element),
        }
        for line in (OPENING, *screenplay.lines, CLOSING)
    ]

    stats = compute_stats("\n".join(line.text for line in screenplay.lines), words_per_page)

    data = {
        "title": screenplay.title,
        "generated_date": datetime.now().strftime("%Y-%m-%d %H:%M"),
        "lines": lines,
        "word_count": stats.words,
        "char_count": stats.characters,
        "page_count": stats.pages,
        "scene_count": screenplay.count(ElementCategory.SCENE_HEADING),
        "characters": screenplay.characters,
    }

    generator = ReportGenerator()
    result_path = generator.render("preview.html", data, output_path)

    if open_browser:
        generator.open_in_browser(result_path)

    return result_path
