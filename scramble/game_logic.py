from __future__ import annotations
import logging
from collections import Counter
from typing import Callable, List

from .schemas import GameSummary, RoundStatus, SubmissionOutcome

logger = logging.getLogger(__name__)


def is_possible(word: str, root: str) -> bool:
    """True if every letter of ``word`` can be taken from ``root``, each root letter used at most once."""
    available = Counter(root)
    for letter in word:
        if available[letter] == 0:
            return False
        available[letter] -= 1
    return True


def normalize(raw: str) -> str:
    return raw.strip().lower()


class RoundEngine:
    """
    Validates submissions against the current root word and keeps the score.

    Checks run in a fixed order and stop at the first failure:
    empty, too short (opt-in), already used, not a real word,
    letters not in the root word, the root word itself (opt-in).
    """

    def __init__(
        self,
        is_real_word: Callable[[str, str], bool],
        language: str = 'en',
        min_word_length: int = 1,
        reject_root_word: bool = False,
    ):
        self.is_real_word = is_real_word
        self.language = language
        self.min_word_length = min_word_length
        self.reject_root_word = reject_root_word
        self.root_word: str = ''
        # Most recent first
        self._used_words: List[str] = []
        self.score: int = 0
        self.status: RoundStatus = 'awaiting_word'

    @property
    def used_words(self) -> List[str]:
        return list(self._used_words)

    def start_round(self, root: str):
        self.root_word = root
        self._used_words.clear()
        self.status = 'in_round'

    def submit(self, raw: str) -> SubmissionOutcome:
        word = normalize(raw)

        if not word:
            return SubmissionOutcome(kind='rejected_empty', word=word)

        if len(word) < self.min_word_length:
            return self._reject(
                'rejected_too_short', word,
                'Too short.', f"Words must be at least {self.min_word_length} letters long.",
            )

        if word in self._used_words:
            return self._reject(
                'rejected_duplicate', word,
                'Stop Hallucinating.', f"You have already found {word}.",
            )

        if not self.is_real_word(word, self.language):
            return self._reject(
                'rejected_not_a_word', word,
                'Are you high?', f"{word} is not a real word.",
            )

        if not is_possible(word, self.root_word):
            return self._reject(
                'rejected_letter_mismatch', word,
                'Please wear your prescriptive lens.',
                'You can only use the same number of letters in the root word.',
            )

        if self.reject_root_word and word == self.root_word:
            return self._reject('rejected_trivial', word, 'Nice try.', f"{word} is the root word.")

        self._used_words.insert(0, word)
        self.score += len(word)
        logger.debug("Accepted %r for root %r (+%s, score %s)", word, self.root_word, len(word), self.score)
        return SubmissionOutcome(kind='accepted', word=word, scoreDelta=len(word))

    def end_game(self) -> GameSummary:
        final_score = self.score
        self.score = 0
        self._used_words.clear()
        self.status = 'ended'
        return GameSummary(finalScore=final_score, message=f"Your score is {final_score}")

    def _reject(self, kind, word: str, title: str, message: str) -> SubmissionOutcome:
        logger.debug("Rejected %r for root %r: %s", word, self.root_word, kind)
        return SubmissionOutcome(kind=kind, word=word, title=title, message=message)
