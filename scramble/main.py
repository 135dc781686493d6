from __future__ import annotations
import logging
from typing import Dict

import socketio
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Config, configure_logging
from .errors import LoadError, SessionNotFound
from .managers.game import GameManager
from .routers import ws
from .schemas import EndGameResult, RoundState, SubmissionResult, WordSubmission

configure_logging(Config.LOG_LEVEL)
logger = logging.getLogger(__name__)

cors_origins = '*' if Config.CORS_ORIGINS == ['*'] else Config.CORS_ORIGINS

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=cors_origins)
app = FastAPI(title="Word Scramble Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

games = GameManager(Config)
app.state.games = games
app.include_router(ws.router, prefix='/ws')


@app.exception_handler(SessionNotFound)
async def session_not_found(request: Request, exc: SessionNotFound):
    return JSONResponse(status_code=404, content={'error': str(exc)})


@app.exception_handler(LoadError)
async def load_error(request: Request, exc: LoadError):
    # No word list, no game
    return JSONResponse(status_code=503, content={'error': str(exc)})


# REST Endpoints
@app.get('/health')
async def health() -> Dict[str, str]:
    return {'status': 'ok'}


@app.post('/sessions', status_code=201, response_model=RoundState)
async def create_session():
    session = games.create()
    return session.snapshot()


@app.get('/sessions/{session_id}', response_model=RoundState)
async def get_session(session_id: str):
    return games.get(session_id).snapshot()


@app.post('/sessions/{session_id}/words', response_model=SubmissionResult)
async def submit_word(session_id: str, body: WordSubmission):
    session = games.get(session_id)
    outcome = session.submit(body.word)
    return SubmissionResult(outcome=outcome, state=session.snapshot())


@app.post('/sessions/{session_id}/next', response_model=RoundState)
async def next_word(session_id: str):
    session = games.get(session_id)
    session.next_word()
    return session.snapshot()


@app.post('/sessions/{session_id}/end', response_model=EndGameResult)
async def end_game(session_id: str):
    session = games.get(session_id)
    summary = session.end_game()
    return EndGameResult(summary=summary, state=session.snapshot())


@app.delete('/sessions/{session_id}', status_code=204)
async def delete_session(session_id: str):
    games.get(session_id)
    games.remove(session_id)
    return Response(status_code=204)


# Dictionary validation REST endpoint
@app.get('/dict/validate')
async def validate_word(word: str):
    normalized = word.strip().lower()
    valid = games.checker(normalized, games.config.LANGUAGE)
    return {'word': normalized, 'valid': valid}


# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.save_session(sid, {'game_id': None})
    await sio.emit('pong', to=sid)


@sio.event
async def disconnect(sid, reason=None):
    sess = await sio.get_session(sid) or {}
    game_id = sess.get('game_id')
    if game_id and games.remove(game_id):
        logger.info("Session %s closed on disconnect", game_id)


@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)


async def _session_for(sid):
    sess = await sio.get_session(sid) or {}
    game_id = sess.get('game_id')
    if not game_id or game_id not in games:
        await sio.emit('game:error', {'error': 'No game in progress'}, to=sid)
        return None
    return games.get(game_id)


@sio.on('game:start')
async def game_start(sid):
    sess = await sio.get_session(sid) or {}
    # A socket plays one game at a time
    if sess.get('game_id'):
        games.remove(sess['game_id'])
    try:
        session = games.create(sid)
    except LoadError as exc:
        await sio.emit('game:error', {'error': str(exc)}, to=sid)
        return
    await sio.save_session(sid, {**sess, 'game_id': session.id})
    await sio.emit('game:state', session.snapshot().model_dump(), to=sid)


@sio.on('word:submit')
async def word_submit(sid, word=None):
    session = await _session_for(sid)
    if not session:
        return
    outcome = session.submit(word if isinstance(word, str) else '')
    await sio.emit('word:result', outcome.model_dump(), to=sid)
    await sio.emit('game:state', session.snapshot().model_dump(), to=sid)


@sio.on('word:next')
async def word_next(sid):
    session = await _session_for(sid)
    if not session:
        return
    session.next_word()
    await sio.emit('game:state', session.snapshot().model_dump(), to=sid)


@sio.on('game:end')
async def game_end(sid):
    session = await _session_for(sid)
    if not session:
        return
    summary = session.end_game()
    await sio.emit('game:ended', summary.model_dump(), to=sid)
    await sio.emit('game:state', session.snapshot().model_dump(), to=sid)


# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn scramble.main:application --reload --host 0.0.0.0 --port 8000
