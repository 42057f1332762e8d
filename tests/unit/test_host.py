from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from reactpush.config import STORAGE_ROOT_ENV, load_config
from reactpush.host import select_bundle_file, select_bundle_from_config
from tests.helpers import seed_active_bundle


class SelectBundleTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_release_without_download_uses_default(self) -> None:
        self.assertEqual(select_bundle_file(self.root, "index.android.bundle"), "index.android.bundle")

    def test_release_prefers_framework_bundle_as_fallback(self) -> None:
        chosen = select_bundle_file(self.root, "index.android.bundle", dev_bundle="assets://index.android.bundle")
        self.assertEqual(chosen, "assets://index.android.bundle")

    def test_release_loads_downloaded_bundle(self) -> None:
        bundle = seed_active_bundle(self.root)

        with self.assertLogs("reactpush.host", level="INFO") as captured:
            chosen = select_bundle_file(self.root, "index.android.bundle")

        self.assertEqual(chosen, str(bundle))
        self.assertIn("Loading downloaded bundle from", captured.output[0])

    def test_developer_mode_ignores_downloaded_bundle(self) -> None:
        seed_active_bundle(self.root)

        self.assertIsNone(select_bundle_file(self.root, "index.android.bundle", developer_mode=True))
        self.assertEqual(
            select_bundle_file(self.root, "index.android.bundle", developer_mode=True, dev_bundle="dev.bundle"),
            "dev.bundle",
        )

    def test_select_from_config(self) -> None:
        bundle = seed_active_bundle(self.root)
        with patch.dict(os.environ, {STORAGE_ROOT_ENV: ""}, clear=False):
            config = load_config(overrides={"locator.storage_root": str(self.root)})
            dev_config = load_config(
                overrides={"locator.storage_root": str(self.root), "host.developer_mode": True}
            )

        self.assertEqual(select_bundle_from_config(config), str(bundle))
        self.assertIsNone(select_bundle_from_config(dev_config))


if __name__ == "__main__":
    unittest.main()
