"""Domain models for the chat system"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from .constants import Sender, EventType, SENDER_USER, SENDER_BOT, EVENT_TYPE_USER_MESSAGE, EVENT_TYPE_BOT_RESPONSE, EVENT_TYPE_TYPING


def new_message_id() -> str:
    """Generate a unique message id"""
    return str(uuid.uuid4())


def now() -> datetime:
    """Current local time, timezone-aware"""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Message:
    """A single chat message. Immutable once created."""
    text: str
    sender: Sender
    id: str = field(default_factory=new_message_id)
    timestamp: datetime = field(default_factory=now)

    @classmethod
    def from_user(cls, text: str) -> "Message":
        return cls(text=text, sender=SENDER_USER)

    @classmethod
    def from_bot(cls, text: str) -> "Message":
        return cls(text=text, sender=SENDER_BOT)

    def format_time(self) -> str:
        """Hour:minute label shown under the message bubble"""
        return self.timestamp.strftime("%H:%M")

    def to_dict(self) -> dict:
        """Message as it is sent to the client

        Fields:
        - id: Unique message id
        - text: Message content
        - sender: "user" or "bot"
        - timestamp: ISO 8601 creation time
        - time: Display label (HH:MM)
        """
        return {
            "id": self.id,
            "text": self.text,
            "sender": self.sender,
            "timestamp": self.timestamp.isoformat(),
            "time": self.format_time(),
        }


@dataclass
class UserMessageEvent:
    """Event: A user message was appended to the conversation"""
    type: EventType = EVENT_TYPE_USER_MESSAGE
    message: Message | None = None


@dataclass
class BotResponseEvent:
    """Event: A bot reply was appended to the conversation"""
    type: EventType = EVENT_TYPE_BOT_RESPONSE
    message: Message | None = None
    original_message: str = ""
    detected_category: str = ""


@dataclass
class TypingEvent:
    """Event: The bot started or stopped composing"""
    type: EventType = EVENT_TYPE_TYPING
    is_typing: bool = False
