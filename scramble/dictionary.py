from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Set

logger = logging.getLogger(__name__)

# is_real_word(word, language) -> bool
WordChecker = Callable[[str, str], bool]

# Small built-in English list for development and tests.
# In production, use the wordfreq backend or point SCRAMBLE_DICTIONARY_PATH at a large word list.
DEFAULT_WORDS = {
    # Very short words
    'a','i','am','an','as','at','be','by','do','go','he','if','in','is','it','me','my','no','of',
    'on','or','so','to','up','us','we',
    # Common longer words
    'ant','ate','bat','bee','cat','dog','eat','ear','era','eta','god','ink','let','lie','lit',
    'net','nil','nit','sat','sea','set','sin','sit','ten','tie','tin','tan','tea','art','rat',
    'tar','star','rats','arts','tsar','east','seat','eats','teas','sate','isle','lies',
    'lens','nest','nets','sent','tens','tile','tiles','line','lines','lint','list','silt',
    'slit','tilt','inlet','islet','stein','tines','enlist','listen','silent','tinsel','tennis',
    'baa','bar','bazaar','raza','zebra','work','worm','silk','milk','risk','mow','row','sow',
    'slow','mils','owl','owls','lows','wok','woks','rim','rims','skim','milks',
}


class DictionaryService:
    """Static word-list backend for the is-real-word capability, keyed by language."""

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = 'en'):
        # Store lowercase words
        self._words: Dict[str, Set[str]] = {
            language: {w.strip().lower() for w in (DEFAULT_WORDS if words is None else words) if w.strip()},
        }

    @classmethod
    def from_file(cls, path: str | Path, language: str = 'en') -> 'DictionaryService':
        path = Path(path)
        with path.open('r', encoding='utf-8', errors='ignore') as f:
            service = cls((line for line in f), language=language)
        logger.info("Loaded %s dictionary words from %s", len(service), path)
        return service

    def add_language(self, language: str, words: Iterable[str]):
        self._words[language] = {w.strip().lower() for w in words if w.strip()}

    def is_real_word(self, word: str, language: str = 'en') -> bool:
        if not word:
            return False
        return word.lower() in self._words.get(language, ())

    __call__ = is_real_word

    def __len__(self) -> int:
        return sum(len(words) for words in self._words.values())


class WordfreqChecker:
    """Treats a word as real when wordfreq knows it at or above a Zipf frequency threshold."""

    def __init__(self, min_zipf: float = 2.5):
        self.min_zipf = min_zipf

    def is_real_word(self, word: str, language: str = 'en') -> bool:
        # Imported lazily; loading wordfreq's tables is slow and unneeded for the wordlist backend
        from wordfreq import zipf_frequency

        if not word or not word.isalpha():
            return False
        try:
            return zipf_frequency(word, language) >= self.min_zipf
        except LookupError:
            logger.warning("wordfreq has no data for language %r", language)
            return False

    __call__ = is_real_word


def build_checker(config) -> WordChecker:
    backend = config.DICTIONARY.lower()
    if backend == 'wordfreq':
        return WordfreqChecker(min_zipf=config.MIN_ZIPF)
    if backend == 'wordlist':
        if config.DICTIONARY_PATH:
            return DictionaryService.from_file(config.DICTIONARY_PATH, language=config.LANGUAGE)
        return DictionaryService(language=config.LANGUAGE)
    raise ValueError(f"Unknown dictionary backend: {config.DICTIONARY!r}")
