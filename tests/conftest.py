"""Pytest configuration and shared fixtures for all tests"""
import pytest
import asyncio
import random
from unittest.mock import AsyncMock

from ai.agent import SupportAgent
from conversation.store import ConversationStore
from conversation.turn_controller import TurnController
from events.publisher import EventPublisher
from events.consumer import EventConsumer
from realtime.connection_manager import ConnectionManager

pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
async def event_queue():
    """Create a new event queue for each test"""
    return asyncio.Queue()


@pytest.fixture
def conversation_store():
    """Create a freshly seeded conversation store"""
    return ConversationStore()


@pytest.fixture
def support_agent():
    """Create a SupportAgent with a seeded random generator"""
    return SupportAgent(rng=random.Random(1234))


@pytest.fixture
def connection_manager():
    """Create a ConnectionManager instance for testing"""
    return ConnectionManager()


@pytest.fixture
async def event_publisher(event_queue):
    """Create an EventPublisher instance for testing"""
    return EventPublisher(event_queue)


@pytest.fixture
async def turn_controller(conversation_store, support_agent, event_publisher):
    """Create a TurnController whose replies arrive without delay"""
    return TurnController(conversation_store, support_agent, event_publisher, min_delay_ms=0, max_delay_ms=0)


@pytest.fixture
def mock_websocket():
    """Create a mock WebSocket for testing"""
    ws = AsyncMock()
    ws.accept = AsyncMock()
    ws.send_text = AsyncMock()
    ws.close = AsyncMock()
    return ws


@pytest.fixture
async def event_consumer(event_queue, mock_websocket, connection_manager):
    """Create an EventConsumer instance for testing"""
    return EventConsumer(event_queue, mock_websocket, connection_manager)
