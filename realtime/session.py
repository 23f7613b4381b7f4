"""Per-connection chat session wiring"""
import asyncio
import uuid
from fastapi import WebSocket

from ai.agent import SupportAgent
from conversation.store import ConversationStore
from conversation.turn_controller import TurnController
from events.consumer import EventConsumer
from events.publisher import EventPublisher
from realtime.connection_manager import ConnectionManager


class ChatSession:
    """Store, turn controller and event pipeline for one client connection"""

    def __init__(self, websocket: WebSocket, agent: SupportAgent, connection_manager: ConnectionManager, **controller_options) -> None:
        self.session_id = str(uuid.uuid4())
        self.queue: asyncio.Queue[dict] = asyncio.Queue()
        self.store = ConversationStore()
        self.publisher = EventPublisher(self.queue)
        self.controller = TurnController(self.store, agent, self.publisher, **controller_options)
        self.consumer = EventConsumer(self.queue, websocket, connection_manager)
        self.consumer_task: asyncio.Task | None = None

    def start(self) -> None:
        """Start forwarding session events to the client"""
        if self.consumer_task is None:
            self.consumer_task = asyncio.create_task(self.consumer.consume())

    def close(self) -> None:
        """Stop forwarding events

        Replies still pending complete into the discarded session.
        """
        if self.consumer_task is not None:
            self.consumer_task.cancel()
            self.consumer_task = None
            print(f"Session {self.session_id} closed with {self.controller.pending_count} reply(s) pending")
