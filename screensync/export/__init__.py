"""
screensync.export - Screenplay export.

Generates Final Draft (.fdx) XML from classified screenplay lines.
"""

from __future__ import annotations
