"""Turn controller: runs one user -> bot exchange and owns the typing state"""
import asyncio
import random

from ai.agent import SupportAgent
from conversation.store import ConversationStore
from domain.constants import TYPING_DELAY_MIN_MS, TYPING_DELAY_MAX_MS
from domain.models import Message, UserMessageEvent, BotResponseEvent, TypingEvent
from events.publisher import EventPublisher


class TurnController:
    """Orchestrates conversation turns for a single session

    submit() appends the user message and flips the typing state right away,
    then schedules the bot reply on the event loop after a randomized delay.
    Callers must not submit while is_typing is True; there is no queueing.
    """

    def __init__(
        self,
        store: ConversationStore,
        agent: SupportAgent,
        publisher: EventPublisher | None = None,
        min_delay_ms: float = TYPING_DELAY_MIN_MS,
        max_delay_ms: float = TYPING_DELAY_MAX_MS,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.agent = agent
        self.publisher = publisher
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self.rng = rng or random.Random()
        self.is_typing = False
        # Held until done so a scheduled reply is never dropped
        self._pending: set[asyncio.Task] = set()

    def next_delay(self) -> float:
        """Draw a reply delay in seconds from [min_delay_ms, max_delay_ms)"""
        delay_ms = self.min_delay_ms + self.rng.random() * (self.max_delay_ms - self.min_delay_ms)
        return delay_ms / 1000

    async def submit(self, user_text: str) -> Message | None:
        """Start a turn for the given user text

        Returns the appended user message, or None when the text is blank
        (nothing is changed in that case).
        """
        if not user_text.strip():
            return None

        user_message = self.store.append(Message.from_user(user_text))
        self.is_typing = True

        task = asyncio.create_task(self._reply(user_text, self.next_delay()))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

        await self._publish(UserMessageEvent(message=user_message))
        await self._publish(TypingEvent(is_typing=True))
        return user_message

    async def _reply(self, user_text: str, delay: float) -> None:
        """Wait out the typing delay, then append the bot reply"""
        try:
            await asyncio.sleep(delay)

            category = self.agent.detect_category(user_text)
            bot_message = self.store.append(Message.from_bot(self.agent.get_response(category)))

            await self._publish(BotResponseEvent(
                message=bot_message,
                original_message=user_text,
                detected_category=category
            ))
        except Exception as e:
            print(f"Error composing reply: {e}")
        finally:
            self.is_typing = False
            await self._publish(TypingEvent(is_typing=False))

    async def _publish(self, event: UserMessageEvent | BotResponseEvent | TypingEvent) -> None:
        if self.publisher is not None:
            await self.publisher.publish(event)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def wait_idle(self) -> None:
        """Wait until every scheduled reply has been delivered"""
        while self._pending:
            await asyncio.gather(*self._pending)
