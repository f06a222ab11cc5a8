"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def sample_script() -> str:
    """Return a short screenplay as editor text."""
    return "\n".join(
        [
            "INT. HOUSE - DAY",
            "",
            "John paces by the window.",
            "JOHN",
            "(quietly)",
            "Hello there.",
            " ",
            "CUT TO:",
            "EXT. GARDEN - NIGHT",
        ]
    )


@pytest.fixture
def script_file(tmp_path: Path, sample_script: str) -> Path:
    """Write the sample screenplay to a text file."""
    path = tmp_path / "script.txt"
    path.write_text(sample_script, encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a directory holding a screensync.yaml."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    config = {"downloads_dir": "exports", "file_extension": ".fdx", "words_per_page": 100}
    with open(project_dir / "screensync.yaml", "w") as f:
        yaml.dump(config, f)
    return project_dir
