from __future__ import annotations
import logging
import random
import uuid
from typing import Dict, Optional

from ..config import Config
from ..dictionary import WordChecker, build_checker
from ..errors import SessionNotFound
from ..game_logic import RoundEngine
from ..schemas import GameSummary, RoundState, SubmissionOutcome, UsedWord
from .pool import WordPool

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, session_id: str, pool: WordPool, engine: RoundEngine):
        self.id = session_id
        self.pool = pool
        self.engine = engine

    @classmethod
    def from_settings(
        cls,
        session_id: str,
        config=Config,
        checker: Optional[WordChecker] = None,
        rng: Optional[random.Random] = None,
    ) -> 'GameSession':
        pool = WordPool.from_file(config.WORDS_PATH, fallback=config.FALLBACK_WORD, rng=rng)
        engine = RoundEngine(
            checker or build_checker(config),
            language=config.LANGUAGE,
            min_word_length=config.MIN_WORD_LENGTH,
            reject_root_word=config.REJECT_ROOT_WORD,
        )
        return cls(session_id, pool, engine)

    @property
    def root_word(self) -> str:
        return self.engine.root_word

    @property
    def used_words(self):
        return self.engine.used_words

    @property
    def score(self) -> int:
        return self.engine.score

    def start(self) -> str:
        return self.next_word()

    def next_word(self) -> str:
        root = self.pool.draw()
        self.engine.start_round(root)
        logger.info("Session %s: new root word %r (%s left)", self.id, root, len(self.pool))
        return root

    def submit(self, raw: str) -> SubmissionOutcome:
        outcome = self.engine.submit(raw)
        if outcome.accepted:
            logger.info("Session %s: accepted %r, score %s", self.id, outcome.word, self.engine.score)
        return outcome

    def end_game(self) -> GameSummary:
        summary = self.engine.end_game()
        logger.info("Session %s: game ended with score %s", self.id, summary.finalScore)
        return summary

    def snapshot(self) -> RoundState:
        return RoundState(
            sessionId=self.id,
            status=self.engine.status,
            rootWord=self.engine.root_word,
            usedWords=[UsedWord(word=w, length=len(w)) for w in self.engine.used_words],
            score=self.engine.score,
            wordsRemaining=len(self.pool),
        )


class GameManager:
    """Independent game sessions keyed by id. Sessions share the dictionary checker, nothing else."""

    def __init__(self, config=Config, checker: Optional[WordChecker] = None):
        self.config = config
        self.checker = checker or build_checker(config)
        self.sessions: Dict[str, GameSession] = {}

    def create(self, session_id: Optional[str] = None, rng: Optional[random.Random] = None) -> GameSession:
        session_id = session_id or uuid.uuid4().hex
        session = GameSession.from_settings(session_id, self.config, checker=self.checker, rng=rng)
        session.start()
        self.sessions[session_id] = session
        return session

    def get(self, session_id: str) -> GameSession:
        try:
            return self.sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def get_or_create(self, session_id: str) -> GameSession:
        if session_id not in self.sessions:
            return self.create(session_id)
        return self.sessions[session_id]

    def remove(self, session_id: str) -> Optional[GameSession]:
        return self.sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self.sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self.sessions
