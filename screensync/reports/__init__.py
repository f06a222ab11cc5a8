"""
screensync.reports - HTML report generation.

Generates self-contained HTML reports:
- Screenplay preview
"""

from __future__ import annotations

from screensync.reports.generator import ReportGenerator
from screensync.reports.preview import generate_preview

__all__ = ["ReportGenerator", "generate_preview"]
