"""Event consuming and handling for the chat system"""
import asyncio
from fastapi import WebSocket

from domain.constants import EVENT_TYPE_USER_MESSAGE, EVENT_TYPE_BOT_RESPONSE, EVENT_TYPE_TYPING
from realtime.connection_manager import ConnectionManager


class EventConsumer:
    """Consumes a session's events and forwards them to its client"""

    def __init__(self, queue: asyncio.Queue[dict], websocket: WebSocket, connection_manager: ConnectionManager) -> None:
        self.queue = queue
        self.websocket = websocket
        self.connection_manager = connection_manager

    async def consume(self) -> None:
        """Continuously consume and process events"""
        while True:
            event = await self.queue.get()
            await self.handle_event(event)
            self.queue.task_done()

    async def handle_event(self, event: dict) -> None:
        """Route event to appropriate handler"""
        event_type: str = event.get("type", "")

        if event_type in (EVENT_TYPE_USER_MESSAGE, EVENT_TYPE_BOT_RESPONSE):
            await self.handle_message(event)
        elif event_type == EVENT_TYPE_TYPING:
            await self.handle_typing(event)

    async def handle_message(self, event: dict) -> None:
        """Send a newly appended message to the client"""
        message: dict | None = event.get("message")
        if not message:
            return

        category: str = event.get("detected_category", "")
        if category:
            print(f"Bot reply ({category}) to: {event.get('original_message', '')}")

        await self.connection_manager.send_personal({
            "type": "message",
            "message": message
        }, self.websocket)

    async def handle_typing(self, event: dict) -> None:
        """Send a typing indicator change to the client"""
        await self.connection_manager.send_personal({
            "type": "typing",
            "is_typing": bool(event.get("is_typing", False))
        }, self.websocket)
