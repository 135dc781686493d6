from __future__ import annotations


class ScrambleError(Exception):
    """Base class for word scramble errors."""


class LoadError(ScrambleError):
    """The root-word source could not be obtained. Fatal: a game cannot start without it."""


class SessionNotFound(ScrambleError, KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session not found: {self.session_id}"
