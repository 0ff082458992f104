"""WebSocket router for the live match feed."""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from pitchside.api.schemas.match import decode_control
from pitchside.api.services.match_service import MatchSessionManager
from pitchside.exceptions import InvalidControlMessageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["match-websocket"])


@router.websocket("/ws/match")
async def match_websocket(websocket: WebSocket) -> None:
    """
    WebSocket endpoint for a live simulated match.

    Every connection gets its own freshly kicked-off match and receives a
    ``match_update`` message each tick.

    Clients can send:
    - {"type": "control", "action": "pause"}: stop the match clock
    - {"type": "control", "action": "play"}: restart the match clock
    - {"type": "control", "action": "reset"}: zero time and score, recentre the ball

    Anything else is logged and ignored.
    """
    await websocket.accept()

    manager: MatchSessionManager = websocket.app.state.session_manager
    session = await manager.create_session(websocket)
    logger.info("Client connected: %s", websocket.client)

    try:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", 1000), frame.get("reason"))

            data = frame.get("text") or frame.get("bytes") or ""
            try:
                message = decode_control(data)
            except InvalidControlMessageError as e:
                logger.warning("Ignoring inbound message %.80r: %s", e.raw, e)
                continue
            session.service.apply_control(message.action)

    except WebSocketDisconnect as e:
        logger.info("Client disconnected (code %s)", e.code)
    finally:
        await manager.remove_session(session.session_id)
