"""Bundle selection for host applications.

Release builds load the downloaded bundle when one is recorded and still on
disk, otherwise the bundle shipped with the app. Developer builds always defer
to the development server's bundle.
"""

from __future__ import annotations

import logging
from typing import Optional

from reactpush.config import ReactPushConfig
from reactpush.locator import StorageRoot, resolve
from reactpush.util.paths import configured_storage_root

LOGGER = logging.getLogger(__name__)


def select_bundle_file(
    storage_root: StorageRoot,
    default_bundle: str,
    *,
    developer_mode: bool = False,
    dev_bundle: Optional[str] = None,
) -> Optional[str]:
    """Return the bundle file the host should load.

    ``dev_bundle`` is what the host framework would pick on its own; it is
    returned unchanged in developer mode (possibly ``None``) and otherwise
    takes precedence over ``default_bundle`` as the fallback.
    """

    if developer_mode:
        return dev_bundle

    fallback = dev_bundle or default_bundle
    bundle = resolve(storage_root, fallback)
    if bundle != fallback:
        LOGGER.info("Loading downloaded bundle from: %s", bundle)
    return bundle


def select_bundle_from_config(config: ReactPushConfig) -> Optional[str]:
    """Apply :func:`select_bundle_file` using a loaded configuration."""

    return select_bundle_file(
        configured_storage_root(config),
        config.locator.default_bundle,
        developer_mode=config.host.developer_mode,
        dev_bundle=config.host.dev_bundle,
    )


__all__ = ["select_bundle_file", "select_bundle_from_config"]
