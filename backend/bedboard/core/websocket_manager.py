"""
WebSocket connection manager.
Fire-and-forget notification sink for toasts shown by the browser.
"""
from typing import List, Dict, Optional, Set
from fastapi import WebSocket
import logging

logger = logging.getLogger("bedboard.websocket")


class ConnectionManager:
    """
    WebSocket connection manager.

    - Keeps the list of active connections
    - Optional subscription per board session (one per browser tab)
    - Drops dead connections when a send fails
    """

    def __init__(self):
        self.active_connections: List[WebSocket] = []
        # Connections per board session, for toasts meant for a single tab
        self.session_subscriptions: Dict[str, Set[WebSocket]] = {}

    async def connect(
        self,
        websocket: WebSocket,
        session_id: Optional[str] = None
    ) -> None:
        """
        Accepts a WebSocket client.

        Args:
            websocket: WebSocket connection
            session_id: Board session to subscribe to (optional)
        """
        await websocket.accept()
        self.active_connections.append(websocket)

        if session_id:
            self.subscribe(websocket, session_id)

        logger.info(
            f"WebSocket connected. Total connections: {len(self.active_connections)}"
        )

    def subscribe(self, websocket: WebSocket, session_id: str) -> None:
        """Subscribes a connection to a board session."""
        self.session_subscriptions.setdefault(session_id, set()).add(websocket)

    def unsubscribe(self, websocket: WebSocket, session_id: str) -> None:
        """Removes a connection from a board session."""
        subscribers = self.session_subscriptions.get(session_id)
        if subscribers is None:
            return
        subscribers.discard(websocket)
        if not subscribers:
            del self.session_subscriptions[session_id]

    def disconnect(self, websocket: WebSocket) -> None:
        """
        Forgets a WebSocket client.

        Args:
            websocket: Connection to drop
        """
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

        for session_id in list(self.session_subscriptions.keys()):
            self.unsubscribe(websocket, session_id)

        logger.info(
            f"WebSocket disconnected. Total connections: {len(self.active_connections)}"
        )

    async def _send_all(self, connections: List[WebSocket], message: dict) -> None:
        disconnected: List[WebSocket] = []

        for connection in connections:
            try:
                await connection.send_json(message)
            except Exception as e:
                logger.warning(f"Error sending message: {e}")
                disconnected.append(connection)

        for conn in disconnected:
            self.disconnect(conn)

    async def broadcast(self, message: dict) -> None:
        """
        Sends a message to every connected client.

        Args:
            message: JSON-serialisable message
        """
        await self._send_all(list(self.active_connections), message)

    async def broadcast_to_session(self, session_id: str, message: dict) -> None:
        """
        Sends a message only to clients subscribed to a board session.

        Args:
            session_id: Board session id
            message: JSON-serialisable message
        """
        subscribers = self.session_subscriptions.get(session_id)
        if not subscribers:
            return
        await self._send_all(list(subscribers), message)

    async def notify(
        self,
        kind: str,
        message: str,
        session_id: Optional[str] = None,
        **extra
    ) -> None:
        """
        Emits a toast notification.

        No acknowledgement and no queueing: clients that are not connected
        simply miss it.

        Args:
            kind: Notification kind (info, success, warning, error)
            message: Text shown to the user
            session_id: If given, only that session's tab receives it
            **extra: Additional payload fields
        """
        notification = {
            "type": "notification",
            "kind": kind,
            "message": message,
            **extra,
        }
        logger.debug(f"Notification [{kind}] {message}")

        if session_id:
            await self.broadcast_to_session(session_id, notification)
        else:
            await self.broadcast(notification)

    @property
    def connection_count(self) -> int:
        """Total number of active connections."""
        return len(self.active_connections)


# Global manager instance
manager = ConnectionManager()
