import logging
from typing import Iterator, Optional

from herald.core.models import LiteralRun, PlaceholderMatch, Token
from herald.logging.helpers import get_logger, trace_scan
from herald.processing.trie import PlaceholderTrie


class HeraldScanner:
    """Single left-to-right pass that splits text into literal runs and placeholders.

    Every herald occurrence is handled the same way: the herald is consumed
    and the trie decides what follows. The double-herald escape is simply
    the herald registered as a key of its own, so ``%%`` resolves like any
    other placeholder and no counting of consecutive heralds takes place.
    """

    def __init__(self, *, herald: str, trie: PlaceholderTrie, logger: Optional[logging.Logger] = None) -> None:
        self._herald = herald
        self._trie = trie
        self._log = logger or get_logger('scanner')

    def scan(self, text: str) -> Iterator[Token]:
        """Yield tokens for *text* lazily.

        Resolution failures propagate out of the generator; nothing after the
        failing herald is produced.
        """
        herald = self._herald
        width = len(herald)
        pos = 0
        end = len(text)
        while pos < end:
            if text.startswith(herald, pos):
                key, replacement, stop = self._trie.resolve(text, pos + width)
                trace_scan(self._log, 'placeholder', key=key, start=pos, end=stop)
                yield PlaceholderMatch(key=key, replacement=replacement, start=pos, end=stop)
                pos = stop
                continue

            stop = text.find(herald, pos + 1)
            if stop == -1:
                stop = end
            trace_scan(self._log, 'literal', start=pos, end=stop)
            yield LiteralRun(text=text[pos:stop], start=pos, end=stop)
            pos = stop
