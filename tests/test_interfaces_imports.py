def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import herald.core.interfaces as I

    assert hasattr(I, "InterpolatorProtocol")
    assert hasattr(I, "TemplateEngineProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")


def test_concrete_types_satisfy_protocols():
    from herald import HeraldTemplateEngine, StringInterpolator
    from herald.core.interfaces import (
        InterpolatorProtocol,
        LoggerFactoryProtocol,
        LoggerLikeProtocol,
        TemplateEngineProtocol,
    )
    from herald.logging import DefaultLoggerFactory, get_logger

    assert isinstance(StringInterpolator(), InterpolatorProtocol)
    assert isinstance(HeraldTemplateEngine(), TemplateEngineProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(get_logger("x"), LoggerLikeProtocol)


def test_core_reexports_models():
    from herald.core import Branch, Leaf, LiteralRun, PlaceholderMatch

    assert Branch({"a": Leaf("1")}).children["a"] == Leaf("1")
    assert LiteralRun("x", 0, 1).text == "x"
    assert PlaceholderMatch("a", "1", 0, 2).text == "1"


def test_logger_protocol_needs_only_debug_and_error():
    from herald.core.interfaces import LoggerLikeProtocol

    class _Quiet:
        def debug(self, msg, *args, **kwargs):
            pass

        def error(self, msg, *args, **kwargs):
            pass

    assert isinstance(_Quiet(), LoggerLikeProtocol)
    assert not isinstance(object(), LoggerLikeProtocol)
