import io
import json
import logging
import os
import unittest
from unittest.mock import patch

from herald import InterpolatorConfig
from herald.config import check_herald
from herald.logging import (
    DefaultLoggerFactory,
    JsonLogFormatter,
    get_logger,
    is_trace_scan_enabled,
    setup_base_logger,
)


# --------------------------------------------------------------------------- #
#  Configuration                                                              #
# --------------------------------------------------------------------------- #
class InterpolatorConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = InterpolatorConfig()
        self.assertEqual((cfg.herald, cfg.literal), ("%", True))

    def test_from_env(self) -> None:
        cfg = InterpolatorConfig.from_env({"HERALD_DEFAULT": "$", "HERALD_LITERAL": "false"})
        self.assertEqual((cfg.herald, cfg.literal), ("$", False))

    def test_from_env_falls_back(self) -> None:
        cfg = InterpolatorConfig.from_env({"HERALD_DEFAULT": "", "HERALD_LITERAL": "1"})
        self.assertEqual((cfg.herald, cfg.literal), ("%", True))

    def test_empty_herald_rejected(self) -> None:
        with self.assertRaises(ValueError):
            InterpolatorConfig(herald="")

    def test_check_herald(self) -> None:
        self.assertEqual(check_herald("!!!"), "!!!")
        for bad in ("", None, 5):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    check_herald(bad)  # type: ignore[arg-type]


# --------------------------------------------------------------------------- #
#  Logging                                                                    #
# --------------------------------------------------------------------------- #
class LoggingHelpersTests(unittest.TestCase):
    def setUp(self) -> None:
        base = logging.getLogger("herald")
        self._saved = (list(base.handlers), base.level, base.propagate)
        base.handlers.clear()

    def tearDown(self) -> None:
        base = logging.getLogger("herald")
        base.handlers[:] = self._saved[0]
        base.setLevel(self._saved[1])
        base.propagate = self._saved[2]

    def test_get_logger_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "herald")
        self.assertEqual(get_logger("scanner").name, "herald.scanner")
        self.assertEqual(get_logger("herald.trie").name, "herald.trie")
        self.assertEqual(get_logger("heraldry").name, "herald.heraldry")

    def test_plain_text_output(self) -> None:
        stream = io.StringIO()
        setup_base_logger(json_logs=False, stream=stream)
        get_logger("scanner").warning("hello %s", "there")
        self.assertEqual(stream.getvalue(), "WARNING: hello there\n")

    def test_json_output(self) -> None:
        stream = io.StringIO()
        setup_base_logger(json_logs=True, stream=stream)
        get_logger("trie").info("merged", extra={"context": {"key": "a"}})
        payload = json.loads(stream.getvalue())
        self.assertEqual(payload["module"], "herald.trie")
        self.assertEqual(payload["msg"], "merged")
        self.assertEqual(payload["ctx"], {"key": "a"})
        self.assertEqual(payload["version"], "1.0.0")
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_json_from_env(self) -> None:
        stream = io.StringIO()
        with patch.dict(os.environ, {"HERALD_JSON_LOGS": "1"}):
            base = setup_base_logger(stream=stream)
        self.assertIsInstance(base.handlers[0].formatter, JsonLogFormatter)

    def test_setup_is_idempotent(self) -> None:
        first = setup_base_logger(stream=io.StringIO())
        second = setup_base_logger(level=logging.DEBUG)
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertEqual(second.level, logging.DEBUG)

    def test_factory_configures_lazily(self) -> None:
        factory = DefaultLoggerFactory(stream=io.StringIO())
        self.assertFalse(logging.getLogger("herald").handlers)
        self.assertEqual(factory.get_logger("templates").name, "herald.templates")
        self.assertEqual(len(logging.getLogger("herald").handlers), 1)

    def test_trace_flag(self) -> None:
        with patch.dict(os.environ, {"HERALD_TRACE_SCAN": "1"}):
            self.assertTrue(is_trace_scan_enabled())
        with patch.dict(os.environ, {"HERALD_TRACE_SCAN": "0"}):
            self.assertFalse(is_trace_scan_enabled())


if __name__ == "__main__":
    unittest.main()
