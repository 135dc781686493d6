from __future__ import annotations
from pydantic import BaseModel
from typing import List, Literal, Optional

OutcomeKind = Literal[
    'accepted',
    'rejected_empty',
    'rejected_too_short',
    'rejected_duplicate',
    'rejected_not_a_word',
    'rejected_letter_mismatch',
    'rejected_trivial',
]

RoundStatus = Literal['awaiting_word', 'in_round', 'ended']


class SubmissionOutcome(BaseModel):
    kind: OutcomeKind
    word: str
    scoreDelta: int = 0
    # Alert shown to the player; empty submissions have none
    title: Optional[str] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.kind == 'accepted'


class UsedWord(BaseModel):
    word: str
    length: int


class RoundState(BaseModel):
    sessionId: Optional[str] = None
    status: RoundStatus = 'awaiting_word'
    rootWord: str = ''
    usedWords: List[UsedWord] = []
    score: int = 0
    wordsRemaining: int = 0


class GameSummary(BaseModel):
    finalScore: int
    title: str = 'Game Ended.'
    message: str


class WordSubmission(BaseModel):
    word: str


class SubmissionResult(BaseModel):
    outcome: SubmissionOutcome
    state: RoundState


class EndGameResult(BaseModel):
    summary: GameSummary
    state: RoundState
