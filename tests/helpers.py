from __future__ import annotations

import logging
from pathlib import Path

from reactpush.locator import BUNDLE_DIRECTORY_NAME, MARKER_FILE_NAME


def write_marker(root: Path, content: str | bytes) -> Path:
    """Write the marker file the way the bundle fetcher would."""

    marker = root / MARKER_FILE_NAME
    root.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        marker.write_bytes(content)
    else:
        marker.write_text(content, encoding="utf-8")
    return marker


def seed_bundle(root: Path, name: str = "v3.bundle", *, payload: str = "") -> Path:
    """Create a bundle file under the bundle directory and return its path."""

    bundle = root / BUNDLE_DIRECTORY_NAME / name
    bundle.parent.mkdir(parents=True, exist_ok=True)
    bundle.write_text(payload, encoding="utf-8")
    return bundle


def seed_active_bundle(root: Path, name: str = "v3.bundle", *, padding: str = "\n") -> Path:
    """Create a bundle and point the marker at it."""

    bundle = seed_bundle(root, name)
    write_marker(root, f"{bundle}{padding}")
    return bundle


def reset_project_logger() -> None:
    """Drop handlers installed by configure_logging so each test starts clean."""

    logger = logging.getLogger("reactpush")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
