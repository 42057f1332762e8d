"""Storage root selection for configured entry points."""

from __future__ import annotations

from pathlib import Path

from reactpush.config import ReactPushConfig


def configured_storage_root(config: ReactPushConfig, override: str | Path | None = None) -> Path:
    """Return ``override`` if given, else the configured root, with ``~`` expanded.

    The result is resolved against the filesystem so log lines and ``paths``
    output show where the marker actually lives.
    """
    root = override if override is not None else config.locator.storage_root
    return Path(root).expanduser().resolve()


__all__ = ["configured_storage_root"]
