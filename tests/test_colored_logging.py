import logging
from unittest import TestCase

from esdl_auto_generator.colored_logging import (
    ColoredFormatter,
    log_section,
    log_success,
    setup_colored_logging,
)


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, message, None, None)


class TestColoredFormatter(TestCase):

    def _formatter(self) -> ColoredFormatter:
        formatter = ColoredFormatter(use_colors=False)
        formatter.use_colors = True
        return formatter

    def test_colors_disabled(self):
        formatter = ColoredFormatter(use_colors=False)

        self.assertEqual(formatter.format(_record(logging.ERROR, "boom")), "ERROR: boom")

    def test_error_is_red(self):
        formatted = self._formatter().format(_record(logging.ERROR, "translated anyway"))

        self.assertTrue(formatted.startswith(ColoredFormatter.COLORS["ERROR"]))
        self.assertTrue(formatted.endswith(ColoredFormatter.RESET))

    def test_success_message(self):
        formatted = self._formatter().format(_record(logging.INFO, "✓ ESDL schema written"))

        self.assertTrue(formatted.startswith(ColoredFormatter.SPECIAL_COLORS["success"]))

    def test_progress_message(self):
        formatted = self._formatter().format(_record(logging.INFO, "→ Loading configuration..."))

        self.assertTrue(formatted.startswith(ColoredFormatter.SPECIAL_COLORS["progress"]))

    def test_plain_info_is_uncolored(self):
        self.assertEqual(self._formatter().format(_record(logging.INFO, "hello")), "INFO: hello")


class TestHelpers(TestCase):

    def test_setup_replaces_root_handlers(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_colored_logging(level=logging.DEBUG, use_colors=False)

            self.assertEqual(len(root.handlers), 1)
            self.assertIsInstance(root.handlers[0].formatter, ColoredFormatter)
            self.assertEqual(root.level, logging.DEBUG)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_log_helpers(self):
        logger = logging.getLogger("esdl_auto_generator.tests")
        with self.assertLogs(logger, level=logging.INFO) as logs:
            log_success(logger, "done")
            log_section(logger, "translation")

        self.assertEqual(logs.output[0], "INFO:esdl_auto_generator.tests:✓ done")
        self.assertIn("TRANSLATION", logs.output[2])
