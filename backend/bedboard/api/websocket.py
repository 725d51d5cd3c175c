"""
WebSocket endpoint for notifications.
"""
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState
import logging

from bedboard.core.websocket_manager import manager

router = APIRouter()
logger = logging.getLogger("bedboard.websocket")


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """
    Notification channel.

    The client may send JSON messages:
    - {"action": "subscribe", "session_id": "..."} to receive that tab's toasts
    - {"action": "unsubscribe", "session_id": "..."}
    - {"action": "ping"} to keep the connection alive
    """
    await manager.connect(websocket)

    try:
        while True:
            if websocket.client_state != WebSocketState.CONNECTED:
                break

            try:
                data = await websocket.receive_json()
                action = data.get("action")

                if action == "subscribe":
                    session_id = data.get("session_id")
                    if session_id:
                        manager.subscribe(websocket, session_id)
                        await websocket.send_json({
                            "type": "subscribed",
                            "session_id": session_id
                        })

                elif action == "unsubscribe":
                    session_id = data.get("session_id")
                    if session_id:
                        manager.unsubscribe(websocket, session_id)
                        await websocket.send_json({
                            "type": "unsubscribed",
                            "session_id": session_id
                        })

                elif action == "ping":
                    await websocket.send_json({"type": "pong"})

            except WebSocketDisconnect:
                break
            except RuntimeError as e:
                # "Cannot call receive once a disconnect message has been received"
                if "disconnect" not in str(e).lower():
                    logger.warning(f"WebSocket runtime error: {e}")
                break
            except ValueError as e:
                # Not JSON
                logger.warning(f"Invalid WebSocket message: {e}")

    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)
