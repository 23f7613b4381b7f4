"""WebSocket connection handling and message parsing"""
import json
from fastapi import WebSocket, WebSocketDisconnect

from ai.agent import SupportAgent
from domain.constants import BOT_NAME, DISCLAIMER
from realtime.connection_manager import ConnectionManager
from realtime.session import ChatSession

BUSY_MESSAGE = "Please wait for a reply before sending another message."


def parse_message_text(message: str) -> str:
    """Extract the submitted text from a client frame

    Raises json.JSONDecodeError for frames that are not valid JSON.
    """
    data = json.loads(message)
    if not isinstance(data, dict):
        return ""
    text = data.get("text", "")
    return text if isinstance(text, str) else ""


async def process_message(session: ChatSession, connection_manager: ConnectionManager, websocket: WebSocket, text: str) -> None:
    """Submit text to the session, rejecting it while a reply is pending"""
    if not text.strip():
        return

    if session.controller.is_typing:
        await connection_manager.send_personal({
            "type": "error",
            "message": BUSY_MESSAGE
        }, websocket)
        return

    await session.controller.submit(text)


async def handle_websocket_connection(websocket: WebSocket, agent: SupportAgent, connection_manager: ConnectionManager, **controller_options) -> None:
    """Run one chat session for the lifetime of a WebSocket connection"""
    session: ChatSession | None = None

    try:
        await connection_manager.connect(websocket)

        session = ChatSession(websocket, agent, connection_manager, **controller_options)
        print(f"Session {session.session_id} connected. Total clients: {connection_manager.get_connection_count()}")

        # Send connection success
        await connection_manager.send_personal({
            "type": "connected",
            "session_id": session.session_id,
            "bot_name": BOT_NAME,
            "disclaimer": DISCLAIMER
        }, websocket)

        # Send the seeded conversation
        history = session.store.get_history_dict()
        await connection_manager.send_personal({
            "type": "history",
            "messages": history,
            "count": len(history)
        }, websocket)

        session.start()

        while True:
            message = await websocket.receive_text()
            try:
                text = parse_message_text(message)
            except json.JSONDecodeError:
                print(f"Invalid JSON received in session {session.session_id}")
                # Send error but don't close connection - client can recover
                await connection_manager.send_personal({
                    "type": "error",
                    "message": "Invalid JSON format"
                }, websocket)
                continue

            await process_message(session, connection_manager, websocket, text)

    except WebSocketDisconnect:
        connection_manager.disconnect(websocket)
        print(f"Client disconnected. Total clients: {connection_manager.get_connection_count()}")
    except Exception as e:
        print(f"WebSocket error: {e}")
        connection_manager.disconnect(websocket)
    finally:
        if session is not None:
            session.close()
