import logging
import unittest

from exercise_tracker_api.app.core.config import DEFAULT_VIEWS_DIR, Settings
from exercise_tracker_api.app.core.logging_config import setup_logging


class SettingsTestCase(unittest.TestCase):
    def test_cors_origin_list(self) -> None:
        self.assertEqual(Settings(cors_origins="*").cors_origin_list, ["*"])
        self.assertEqual(
            Settings(cors_origins="http://a.test, http://b.test,,").cors_origin_list,
            ["http://a.test", "http://b.test"],
        )

    def test_views_dir_holds_home_page(self) -> None:
        self.assertTrue(DEFAULT_VIEWS_DIR.endswith("views"))


class LoggingSetupTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers
        self.saved_level = self.root.level
        self.root.handlers = []

    def tearDown(self) -> None:
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_configures_once(self) -> None:
        self.assertTrue(setup_logging("debug"))
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(len(self.root.handlers), 1)
        self.assertFalse(setup_logging("error"))
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(len(self.root.handlers), 1)

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("chatty")
        self.assertEqual(self.root.level, logging.INFO)
