"""A string binding that follows the messages of a web socket."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

import websocket

from .binding import StringCloser


class WebSocketString(StringCloser):
    """Holds the latest message received on a web socket connection.

    A background thread reads messages until the connection fails or closes;
    the error that stopped it is raised by ``get``.
    """

    def __init__(self, conn: Any) -> None:
        super().__init__("")
        self._conn = conn
        self._error: Exception | None = None
        self._reader = threading.Thread(
            target=self._read_messages, name="websocket-string", daemon=True
        )
        self._reader.start()

    def _read_messages(self) -> None:
        conn = self._conn
        while True:
            try:
                data = conn.recv()
            except Exception as exc:
                self._error = exc
                return
            self._error = None
            if isinstance(data, (bytes, bytearray)):
                data = bytes(data).decode("utf-8", errors="replace")
            super().set(data)

    def get(self) -> str:
        """Return the latest message, or raise why reading stopped."""
        if self._error is not None:
            raise self._error
        return super().get()

    def close(self) -> None:
        """Close the connection. Closing twice is harmless."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()
        super().close()


def new_websocket_string(
    url: str,
    connect: Callable[[str], Any] = websocket.create_connection,
) -> WebSocketString:
    """Connect to the web socket server at ``url`` and bind to its messages."""
    return WebSocketString(connect(url))