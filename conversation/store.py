"""In-memory conversation store for a single chat session"""
from collections.abc import Iterator

from domain.constants import SEED_GREETING
from domain.models import Message


class ConversationStore:
    """Append-only, ordered list of messages for one session

    Insertion order is display order and chronological order. Messages are
    never removed, reordered or edited; the session drops the whole store
    when it ends.
    """

    def __init__(self, seed_greeting: str = SEED_GREETING) -> None:
        self._messages: list[Message] = [Message.from_bot(seed_greeting)]

    def append(self, message: Message) -> Message:
        """Append a message to the end of the conversation"""
        self._messages.append(message)
        return message

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def last(self) -> Message:
        return self._messages[-1]

    def get_history_dict(self) -> list[dict]:
        """Get the conversation as client-ready dicts, oldest first"""
        return [message.to_dict() for message in self]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
