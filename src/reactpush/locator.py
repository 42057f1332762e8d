"""Resolve the active downloaded bundle from the ReactPush marker file.

The bundle fetcher (outside this package) downloads bundles into
``<storage_root>/ReactPushBundles`` and records the active one in
``<storage_root>/ReactPushBundlePath.txt``. Everything here only reads that
layout; nothing creates, repairs or deletes files.

Callers must tolerate a read-then-check race: the marker file or the bundle it
points at can be replaced or deleted between the existence check performed here
and the moment the host actually loads the bundle. No lock or lease is taken on
either file.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

MARKER_FILE_NAME = "ReactPushBundlePath.txt"
BUNDLE_DIRECTORY_NAME = "ReactPushBundles"

StorageRoot = Union[str, "os.PathLike[str]"]

LOGGER = logging.getLogger(__name__)


class ResolutionStatus(str, enum.Enum):
    """Outcome categories of a marker file inspection."""

    ABSENT = "absent"
    UNREADABLE = "unreadable"
    EMPTY = "empty"
    STALE = "stale"
    PRESENT = "present"


@dataclass(frozen=True)
class BundleResolution:
    """Tagged result of :func:`inspect_bundle`.

    ``path`` is only set for ``PRESENT``. ``candidate`` carries the trimmed
    marker content for ``STALE`` and ``PRESENT`` so callers can report which
    bundle went missing.
    """

    status: ResolutionStatus
    path: Optional[str] = None
    candidate: Optional[str] = None
    detail: Optional[str] = None

    @property
    def present(self) -> bool:
        return self.status is ResolutionStatus.PRESENT

    def to_dict(self) -> dict[str, object]:
        return {
            "status": self.status.value,
            "path": self.path,
            "candidate": self.candidate,
            "detail": self.detail,
        }


def marker_file_path(storage_root: StorageRoot) -> str:
    """Return the absolute marker file path. Performs no filesystem access."""
    return os.path.join(_absolute_root(storage_root), MARKER_FILE_NAME)


def bundle_directory_path(storage_root: StorageRoot) -> str:
    """Return the absolute bundle directory path. Performs no filesystem access."""
    return os.path.join(_absolute_root(storage_root), BUNDLE_DIRECTORY_NAME)


def inspect_bundle(storage_root: StorageRoot) -> BundleResolution:
    """Inspect the marker file and report what it points at.

    Never raises for filesystem conditions: missing, unreadable, empty and
    stale markers are all reported through :class:`ResolutionStatus`.
    """

    try:
        marker = marker_file_path(storage_root)
    except OSError as exc:
        LOGGER.error("Cannot locate bundle marker under %r: %s", os.fspath(storage_root), exc)
        return BundleResolution(ResolutionStatus.UNREADABLE, detail=str(exc))

    if not os.path.exists(marker):
        LOGGER.debug("No bundle marker at %s", marker)
        return BundleResolution(ResolutionStatus.ABSENT)

    try:
        with open(marker, "rb") as handle:
            text = handle.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Error reading bundle path file %s: %s", marker, exc)
        return BundleResolution(ResolutionStatus.UNREADABLE, detail=str(exc))

    candidate = text.strip()
    if not candidate:
        LOGGER.debug("Bundle marker %s is empty", marker)
        return BundleResolution(ResolutionStatus.EMPTY)

    if not os.path.exists(candidate):
        LOGGER.warning("Bundle file not found at path: %s", candidate)
        return BundleResolution(ResolutionStatus.STALE, candidate=candidate)

    return BundleResolution(ResolutionStatus.PRESENT, path=candidate, candidate=candidate)


def resolve_or_absent(storage_root: StorageRoot) -> Optional[str]:
    """Return the downloaded bundle path, or ``None`` when there is no usable one."""
    return inspect_bundle(storage_root).path


def resolve(storage_root: StorageRoot, default_bundle: str) -> str:
    """Return the downloaded bundle path, falling back to ``default_bundle``."""

    if not default_bundle:
        raise ValueError("default_bundle must be a non-empty string")
    path = resolve_or_absent(storage_root)
    return path if path is not None else default_bundle


def has_downloaded_bundle(storage_root: StorageRoot) -> bool:
    return resolve_or_absent(storage_root) is not None


class BundleLocator:
    """Storage-root bound view over the module-level functions.

    Holds no state besides the root, so instances can be shared freely between
    threads or rebuilt per call.
    """

    __slots__ = ("_storage_root",)

    def __init__(self, storage_root: StorageRoot) -> None:
        self._storage_root = os.fspath(storage_root)

    def __repr__(self) -> str:
        return f"BundleLocator({self._storage_root!r})"

    @property
    def storage_root(self) -> str:
        return _absolute_root(self._storage_root)

    @property
    def marker_file(self) -> str:
        return marker_file_path(self._storage_root)

    @property
    def bundle_directory(self) -> str:
        return bundle_directory_path(self._storage_root)

    def inspect(self) -> BundleResolution:
        return inspect_bundle(self._storage_root)

    def resolve(self, default_bundle: str) -> str:
        return resolve(self._storage_root, default_bundle)

    def resolve_or_absent(self) -> Optional[str]:
        return resolve_or_absent(self._storage_root)

    def has_downloaded_bundle(self) -> bool:
        return has_downloaded_bundle(self._storage_root)


def _absolute_root(storage_root: StorageRoot) -> str:
    # ".." segments are kept for the OS to resolve through symlinks.
    root = os.fspath(storage_root)
    return root if os.path.isabs(root) else os.path.join(os.getcwd(), root)


__all__ = [
    "BUNDLE_DIRECTORY_NAME",
    "MARKER_FILE_NAME",
    "BundleLocator",
    "BundleResolution",
    "ResolutionStatus",
    "bundle_directory_path",
    "has_downloaded_bundle",
    "inspect_bundle",
    "marker_file_path",
    "resolve",
    "resolve_or_absent",
]
