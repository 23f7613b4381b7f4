"""Event publishing for the chat system"""
import asyncio

from domain.models import UserMessageEvent, BotResponseEvent, TypingEvent


class EventPublisher:
    """Publishes events to a session's event queue"""

    def __init__(self, queue: asyncio.Queue[dict]) -> None:
        self.queue = queue

    async def publish(self, event: UserMessageEvent | BotResponseEvent | TypingEvent | dict) -> None:
        """Publish an event to the queue (accepts dataclass or dict)"""
        # Messages are flattened to plain dicts so consumers never hold Message objects
        if isinstance(event, UserMessageEvent):
            event_dict = {
                "type": event.type,
                "message": event.message.to_dict() if event.message else None,
            }
        elif isinstance(event, BotResponseEvent):
            event_dict = {
                "type": event.type,
                "message": event.message.to_dict() if event.message else None,
                "original_message": event.original_message,
                "detected_category": event.detected_category,
            }
        elif isinstance(event, TypingEvent):
            event_dict = {
                "type": event.type,
                "is_typing": event.is_typing,
            }
        else:
            event_dict = event
        await self.queue.put(event_dict)
