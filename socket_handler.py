"""Low-level socket read/write utilities."""

from __future__ import annotations

import logging
import socket

from config import BUFFER_SIZE
from response import HTTPResponse

logger = logging.getLogger(__name__)


def read_http_request(client_socket: socket.socket, buffer_size: int = BUFFER_SIZE) -> bytes:
    """Read the request with a single recv call of at most buffer_size bytes.

    A request line that is longer than the buffer or that arrives in several
    segments is not reassembled.
    """
    return client_socket.recv(buffer_size)


def write_http_response(client_socket: socket.socket, response: HTTPResponse) -> int:
    """Send the serialized response with one send call and return bytes sent.

    Short writes are logged and not retried.
    """
    payload = response.to_bytes()
    bytes_sent = client_socket.send(payload)
    if bytes_sent < len(payload):
        logger.warning("Partial response write: %d of %d bytes sent", bytes_sent, len(payload))
    return bytes_sent
