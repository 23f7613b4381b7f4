"""Main FastAPI application - supportive chat widget served over WebSockets"""
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, WebSocket
from fastapi.responses import FileResponse
import uvicorn

from ai.agent import default_agent
from domain.constants import DISCLAIMER
from realtime.handler import handle_websocket_connection
from realtime.connection_manager import ConnectionManager

HOST = "localhost"
PORT = 8765
CLIENT_PAGE = Path(__file__).parent / "client.html"

# The response table is read-only, so one agent serves every session
agent = default_agent
connection_manager = ConnectionManager()  # Track open chat sessions


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown"""
    print("Chat server started")

    yield

    print(f"Application shutdown complete. Open sessions dropped: {connection_manager.get_connection_count()}")


app = FastAPI(lifespan=lifespan)


@app.get("/")
async def get_index():
    """Serve the chat widget page"""
    return FileResponse(CLIENT_PAGE)


@app.get("/disclaimer")
async def get_disclaimer() -> dict:
    """Disclaimer text that every front end must show verbatim"""
    return {"disclaimer": DISCLAIMER}


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """WebSocket endpoint that delegates to handler"""
    await handle_websocket_connection(websocket, agent, connection_manager)


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
