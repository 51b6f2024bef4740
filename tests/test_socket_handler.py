"""Unit tests for socket read/write helpers."""

import socket

from response import text_response
from socket_handler import read_http_request, write_http_response


def test_read_is_bounded_by_buffer_size() -> None:
    server_side, client_side = socket.socketpair()
    with server_side, client_side:
        client_side.sendall(b"GET /" + b"a" * 2000)

        data = read_http_request(server_side, buffer_size=1024)

    assert len(data) <= 1024
    assert data.startswith(b"GET /")


def test_write_sends_whole_small_response() -> None:
    response = text_response(200, "Result: 5.00\n")
    server_side, client_side = socket.socketpair()
    with server_side, client_side:
        bytes_sent = write_http_response(server_side, response)
        received = client_side.recv(4096)

    assert bytes_sent == len(response.to_bytes())
    assert received == response.to_bytes()
