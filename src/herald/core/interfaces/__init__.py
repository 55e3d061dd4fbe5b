from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .templating import InterpolatorProtocol, TemplateEngineProtocol

__all__ = [
    'InterpolatorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateEngineProtocol',
]
