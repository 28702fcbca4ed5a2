"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest
import structlog

from clique_stream.detection import DetectorConfig, OnlineDetector


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test (e.g. the CLI) installs."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def detector() -> OnlineDetector:
    """Return a detector with default settings (min cluster size 3)."""
    return OnlineDetector(DetectorConfig())


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Write a small interaction log with one four-member cluster and a triangle."""
    lines = [
        "Thu Dec 11 17:53:01 PST 2008\ta@example.com\tb@example.com",
        "Thu Dec 11 17:53:02 PST 2008\tb@example.com\ta@example.com",
        "Thu Dec 11 17:53:03 PST 2008\ta@example.com\tc@example.com",
        "Thu Dec 11 17:53:04 PST 2008\tc@example.com\ta@example.com",
        "Thu Dec 11 17:53:05 PST 2008\tb@example.com\tc@example.com",
        "Thu Dec 11 17:53:06 PST 2008\tc@example.com\tb@example.com",
        "Thu Dec 11 17:53:07 PST 2008\td@example.com\ta@example.com",
        "Thu Dec 11 17:53:08 PST 2008\ta@example.com\td@example.com",
        "Thu Dec 11 17:53:09 PST 2008\td@example.com\tb@example.com",
        "Thu Dec 11 17:53:10 PST 2008\tb@example.com\td@example.com",
        "Thu Dec 11 17:53:11 PST 2008\td@example.com\tc@example.com",
        "Thu Dec 11 17:53:12 PST 2008\tc@example.com\td@example.com",
        "",
        "Thu Dec 11 17:54:01 PST 2008\tx@example.com\ty@example.com",
        "Thu Dec 11 17:54:02 PST 2008\ty@example.com\tx@example.com",
        "Thu Dec 11 17:54:03 PST 2008\tx@example.com\tz@example.com",
        "Thu Dec 11 17:54:04 PST 2008\tz@example.com\tx@example.com",
        "Thu Dec 11 17:54:05 PST 2008\ty@example.com\tz@example.com",
        "Thu Dec 11 17:54:06 PST 2008\tz@example.com\ty@example.com",
        # one-sided: never verified
        "Thu Dec 11 17:55:00 PST 2008\ta@example.com\tx@example.com",
    ]
    path = tmp_path / "interactions.tsv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
