from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from tidy.log import configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        package_logger = logging.getLogger("tidy")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

    def test_records_go_to_file_and_handlers_do_not_accumulate(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "tidy.log"

            configure_logging("INFO", log_path)
            handler = configure_logging("INFO", log_path)
            logging.getLogger("tidy.app").info("browsing %s", "/x")
            handler.flush()

            self.assertEqual(len(logging.getLogger("tidy").handlers), 1)
            self.assertIn("INFO tidy.app: browsing /x", log_path.read_text(encoding="utf-8"))
            self.tearDown()

    def test_unwritable_log_path_disables_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")

            self.assertIsNone(configure_logging("DEBUG", blocker / "tidy.log"))
            self.assertIsInstance(logging.getLogger("tidy").handlers[0], logging.NullHandler)


if __name__ == "__main__":
    unittest.main()
