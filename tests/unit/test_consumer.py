"""Unit tests for EventConsumer"""
import pytest
import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

from events.consumer import EventConsumer
from domain.constants import (
    EVENT_TYPE_USER_MESSAGE,
    EVENT_TYPE_BOT_RESPONSE,
    EVENT_TYPE_TYPING,
)


@pytest.mark.unit
class TestEventConsumerInitialization:
    """Test EventConsumer initialization"""

    def test_consumer_initialization(self):
        """Test creating EventConsumer instance"""
        queue = asyncio.Queue()
        websocket = MagicMock()
        connection_manager = MagicMock()

        consumer = EventConsumer(queue, websocket, connection_manager)

        assert consumer.queue is queue
        assert consumer.websocket is websocket
        assert consumer.connection_manager is connection_manager


@pytest.mark.unit
@pytest.mark.asyncio
class TestEventConsumerHandleEvent:
    """Test EventConsumer event routing"""

    async def test_user_message_routed(self):
        """Test that USER_MESSAGE events are routed to handle_message"""
        consumer = EventConsumer(asyncio.Queue(), MagicMock(), AsyncMock())
        consumer.handle_message = AsyncMock()
        consumer.handle_typing = AsyncMock()

        event = {"type": EVENT_TYPE_USER_MESSAGE, "message": {"text": "Hello"}}
        await consumer.handle_event(event)

        consumer.handle_message.assert_called_once_with(event)
        consumer.handle_typing.assert_not_called()

    async def test_bot_response_routed(self):
        """Test that BOT_RESPONSE events are routed to handle_message"""
        consumer = EventConsumer(asyncio.Queue(), MagicMock(), AsyncMock())
        consumer.handle_message = AsyncMock()
        consumer.handle_typing = AsyncMock()

        event = {"type": EVENT_TYPE_BOT_RESPONSE, "message": {"text": "Hi"}}
        await consumer.handle_event(event)

        consumer.handle_message.assert_called_once_with(event)

    async def test_typing_routed(self):
        """Test that TYPING events are routed to handle_typing"""
        consumer = EventConsumer(asyncio.Queue(), MagicMock(), AsyncMock())
        consumer.handle_message = AsyncMock()
        consumer.handle_typing = AsyncMock()

        event = {"type": EVENT_TYPE_TYPING, "is_typing": True}
        await consumer.handle_event(event)

        consumer.handle_typing.assert_called_once_with(event)
        consumer.handle_message.assert_not_called()

    async def test_unknown_type_ignored(self):
        """Test that unknown event types are ignored"""
        consumer = EventConsumer(asyncio.Queue(), MagicMock(), AsyncMock())
        consumer.handle_message = AsyncMock()
        consumer.handle_typing = AsyncMock()

        await consumer.handle_event({"type": "unknown_type"})

        consumer.handle_message.assert_not_called()
        consumer.handle_typing.assert_not_called()


@pytest.mark.unit
@pytest.mark.asyncio
class TestEventConsumerHandlers:
    """Test frames sent to the client"""

    async def test_handle_message_sends_frame(self, event_consumer, mock_websocket):
        """Test that messages are sent to the session's websocket"""
        message = {"id": "1", "text": "Hello", "sender": "user"}

        await event_consumer.handle_message({"type": EVENT_TYPE_USER_MESSAGE, "message": message})

        mock_websocket.send_text.assert_called_once()
        frame = json.loads(mock_websocket.send_text.call_args[0][0])
        assert frame == {"type": "message", "message": message}

    async def test_handle_message_skips_empty(self, event_consumer, mock_websocket):
        """Test that events without a message are not sent"""
        await event_consumer.handle_message({"type": EVENT_TYPE_BOT_RESPONSE, "message": None})

        mock_websocket.send_text.assert_not_called()

    async def test_handle_typing_sends_frame(self, event_consumer, mock_websocket):
        """Test that typing changes are sent to the client"""
        await event_consumer.handle_typing({"type": EVENT_TYPE_TYPING, "is_typing": True})

        frame = json.loads(mock_websocket.send_text.call_args[0][0])
        assert frame == {"type": "typing", "is_typing": True}

    async def test_handle_typing_defaults_false(self, event_consumer, mock_websocket):
        """Test that a missing flag is sent as False"""
        await event_consumer.handle_typing({"type": EVENT_TYPE_TYPING})

        frame = json.loads(mock_websocket.send_text.call_args[0][0])
        assert frame["is_typing"] is False


@pytest.mark.unit
@pytest.mark.asyncio
class TestEventConsumerConsume:
    """Test the consume loop"""

    async def test_consume_processes_queued_events(self, event_queue, event_consumer, mock_websocket):
        """Test that queued events are forwarded in order"""
        await event_queue.put({"type": EVENT_TYPE_TYPING, "is_typing": True})
        await event_queue.put({"type": EVENT_TYPE_BOT_RESPONSE, "message": {"text": "Hi"}})

        task = asyncio.create_task(event_consumer.consume())
        await asyncio.wait_for(event_queue.join(), timeout=1.0)
        task.cancel()

        frames = [json.loads(call[0][0]) for call in mock_websocket.send_text.call_args_list]
        assert [f["type"] for f in frames] == ["typing", "message"]


@pytest.mark.unit
@pytest.mark.asyncio
class TestEventConsumerDiagnostics:
    """Test the diagnostic output for bot replies"""

    async def test_bot_reply_reports_category(self, event_consumer, capsys):
        """Test that the detected category is printed for bot replies"""
        await event_consumer.handle_message({
            "type": EVENT_TYPE_BOT_RESPONSE,
            "message": {"text": "Breathe with me."},
            "original_message": "I feel so anxious today",
            "detected_category": "anxiety",
        })

        assert "Bot reply (anxiety) to: I feel so anxious today" in capsys.readouterr().out

    async def test_user_message_prints_nothing(self, event_consumer, capsys):
        """Test that user echoes carry no category output"""
        await event_consumer.handle_message({"type": EVENT_TYPE_USER_MESSAGE, "message": {"text": "hi"}})

        assert "Bot reply" not in capsys.readouterr().out
