from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..errors import LoadError

logger = logging.getLogger(__name__)

FALLBACK_WORD = 'silkworm'


class WordPool:
    """Root words for one game. Each draw removes the word, so it is never offered twice."""

    def __init__(self, fallback: str = FALLBACK_WORD, rng: Optional[random.Random] = None):
        self.fallback = fallback
        self.rng = rng or random.Random()
        self._words: List[str] = []

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> 'WordPool':
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as exc:
            logger.error("Could not load root words from %s: %s", path, exc)
            raise LoadError(f"Could not load root words from {path}: {exc}") from exc
        pool = cls(**kwargs)
        pool.initialize(text)
        logger.info("Loaded %s root words from %s", len(pool), path)
        return pool

    def initialize(self, source: Union[str, Iterable[str], None]):
        if source is None:
            raise LoadError("No root word source")
        lines = source.splitlines() if isinstance(source, str) else source
        # Blank lines (e.g. a trailing newline) are not words
        self._words = [line.rstrip('\r\n') for line in lines if line.strip()]

    def draw(self) -> str:
        if not self._words:
            logger.warning("Word pool is empty, using fallback %r", self.fallback)
            return self.fallback
        word = self.rng.choice(self._words)
        # list.remove drops the first occurrence only
        self._words.remove(word)
        return word

    @property
    def remaining(self) -> List[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._words
