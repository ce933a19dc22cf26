"""FastAPI decode service for IGC flight logs.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Two ways to decode a log:

* ``POST /decode`` with ``{"lines": [...]}`` decodes a whole log in one
  request and returns one entry per line.
* WebSocket clients connect to ``ws://<host>:8000/ws`` and send text frames
  holding one or more lines; the server answers each line with one JSON
  message. Every connection decodes its own log, so I/J schemas declared on
  one connection never affect another.
"""

import asyncio
import logging
from typing import Any

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, Field

from flightlog.session import LogDecoder
from server.formatters import format_decoded_line, format_message

_MAX_LINES_PER_REQUEST = 200_000
_TIMEOUT_SECONDS = 30.0

logger = logging.getLogger(__name__)


class DecodeRequest(BaseModel):
    """Lines of one IGC log, in file order."""

    lines: list[str] = Field(max_length=_MAX_LINES_PER_REQUEST)


app = FastAPI(title="flightlog")


@app.post("/decode")
def decode(request: DecodeRequest) -> dict[str, Any]:
    """Decode every line of one log.

    Bad lines do not fail the request; they are reported in place with their
    error, and counted in ``error_count``.
    """
    decoder = LogDecoder()
    lines = [format_decoded_line(decoded) for decoded in decoder.decode_all(request.lines)]
    error_count = sum(1 for line in lines if not line["ok"])
    if error_count:
        logger.info(f"Decoded {len(lines)} lines with {error_count} errors")
    return {"lines": lines, "error_count": error_count}


async def _decode_until_disconnect(websocket: WebSocket, decoder: LogDecoder) -> None:
    try:
        while True:
            text = await asyncio.wait_for(
                websocket.receive_text(), timeout=_TIMEOUT_SECONDS
            )
            for line in text.splitlines():
                await websocket.send_text(format_message(decoder.decode(line)))
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Decode the lines a client sends, answering each with a JSON message.

    The connection owns one ``LogDecoder``, so schemas declared by I and J
    lines apply to the B and K lines that follow on the same connection. The
    connection closes with code 1001 if the client sends nothing for
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    decoder = LogDecoder()
    await _decode_until_disconnect(websocket, decoder)
    logger.info(f"Decode session closed after {decoder.line_number} lines")
