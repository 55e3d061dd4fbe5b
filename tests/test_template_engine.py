import logging
import unittest

from herald import (
    HeraldTemplateEngine,
    InterpolatorConfig,
    InvalidPlaceholderError,
    UnusedRequiredPlaceholdersError,
)


class HeraldTemplateEngineTests(unittest.TestCase):
    def test_render(self) -> None:
        engine = HeraldTemplateEngine()
        self.assertEqual(engine.render("Hi %n, 60%% done", {"n": "Bob"}), "Hi Bob, 60% done")

    def test_each_render_uses_a_fresh_registry(self) -> None:
        engine = HeraldTemplateEngine()
        self.assertEqual(engine.render("%a", {"a": "1"}), "1")
        # Same key again must not be reported as a duplicate.
        self.assertEqual(engine.render("%a", {"a": "2"}), "2")

    def test_custom_config(self) -> None:
        engine = HeraldTemplateEngine(config=InterpolatorConfig(herald="{{", literal=False))
        self.assertEqual(engine.render("x{{y", {"y": "Y"}), "xY")

    def test_required_keys(self) -> None:
        engine = HeraldTemplateEngine(required=["who"])
        with self.assertRaises(UnusedRequiredPlaceholdersError):
            engine.render("nobody", {"who": "me"})

    def test_failures_are_logged_and_raised(self) -> None:
        logger = logging.getLogger("herald.test.templates")
        engine = HeraldTemplateEngine(logger=logger)
        with self.assertLogs(logger, level="ERROR") as logs:
            with self.assertRaises(InvalidPlaceholderError):
                engine.render("%missing", {})
        self.assertIn("invalid placeholder: %m", logs.output[0])


if __name__ == "__main__":
    unittest.main()
