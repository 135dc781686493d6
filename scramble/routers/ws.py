import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..errors import LoadError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/{session_id}")
async def websocket_endpoint(websocket: WebSocket, session_id: str):
    games = websocket.app.state.games
    await websocket.accept()

    try:
        session = games.get_or_create(session_id)
    except LoadError as exc:
        await websocket.send_json({"type": "error", "error": str(exc)})
        await websocket.close(code=1011)
        return

    # Send initial state to player
    await websocket.send_json({"type": "init", "state": session.snapshot().model_dump()})

    try:
        while True:
            try:
                data = json.loads(await websocket.receive_text())
            except ValueError:
                await websocket.send_json({"type": "error", "error": "Invalid JSON"})
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            if kind == "submit":
                outcome = session.submit(str(data.get("word") or ""))
                await websocket.send_json({"type": "result", "outcome": outcome.model_dump()})
            elif kind == "next":
                session.next_word()
            elif kind == "end":
                summary = session.end_game()
                await websocket.send_json({"type": "ended", "summary": summary.model_dump()})
            else:
                await websocket.send_json({"type": "error", "error": f"Unknown message type: {kind}"})
                continue
            await websocket.send_json({"type": "update", "state": session.snapshot().model_dump()})
    except WebSocketDisconnect:
        # The game lives as long as its connection
        if games.remove(session_id):
            logger.info("Session %s closed on disconnect", session_id)
