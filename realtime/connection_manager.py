"""WebSocket connection management for chat sessions"""
import json
from fastapi import WebSocket


class ConnectionManager:
    """Tracks open WebSocket connections and sends JSON frames to them

    Every connection is a private session, so there is no broadcast.
    """

    def __init__(self) -> None:
        """Initialize connection manager with empty active connections"""
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and track a new WebSocket connection"""
        await websocket.accept()
        self.active_connections.append(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        """Remove a WebSocket connection from active connections"""
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

    async def send_personal(self, message: dict, websocket: WebSocket) -> bool:
        """Send a message to a single client

        Args:
            message: Dictionary to be JSON-serialized and sent
            websocket: Target connection

        Returns:
            True if the frame was sent, False if the connection was dropped
        """
        try:
            await websocket.send_text(json.dumps(message))
            return True
        except Exception as e:
            print(f"Error sending message to client: {e}")
            self.disconnect(websocket)
            return False

    def get_connection_count(self) -> int:
        """Get the number of active connections"""
        return len(self.active_connections)
