"""Main HTTP server entry point and connection lifecycle orchestration."""

from __future__ import annotations

import argparse
import functools
import logging
import socket
import sys
import threading
import time
from collections.abc import Sequence
from pathlib import Path

from config import (
    ACCEPT_POLL_SECS,
    HOST,
    LISTEN_BACKLOG,
    LOG_FORMAT,
    MAX_PORT,
    PORT,
    STATIC_DIR,
)
from handlers.calc import handle_calc
from handlers.static import serve_static
from request import HTTPRequest
from response import HTTPResponse, text_response
from router import Router
from socket_handler import read_http_request, write_http_response

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Only GET method is supported."
MALFORMED_REQUEST = "Malformed request line."
NOT_FOUND = "The requested resource was not found."
INTERNAL_ERROR = "Internal Server Error"


class HTTPServer:
    def __init__(
        self,
        host: str = HOST,
        port: int = PORT,
        router: Router | None = None,
        *,
        static_dir: str | Path = STATIC_DIR,
    ) -> None:
        self.host = host
        self.port = port
        self.static_dir = static_dir
        self.router = router or self._build_default_router()

        self._server_socket: socket.socket | None = None
        self._next_connection_id = 0
        self._running = False

    def _build_default_router(self) -> Router:
        router = Router()
        router.add_route("/static/", functools.partial(serve_static, static_dir=self.static_dir))
        router.add_route("/calc/", handle_calc)
        return router

    def start(self) -> None:
        """Bind, listen and accept clients until stop() is called.

        Bind and listen failures propagate as OSError.
        """
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server_socket:
            self._server_socket = server_socket
            server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server_socket.bind((self.host, self.port))
            server_socket.listen(LISTEN_BACKLOG)
            server_socket.settimeout(ACCEPT_POLL_SECS)
            self.port = server_socket.getsockname()[1]
            logger.info("Server is running on port %d...", self.port)

            self._running = True
            while self._running:
                try:
                    client_socket, address = server_socket.accept()
                except socket.timeout:
                    continue
                except OSError:
                    if not self._running:
                        break
                    logger.exception("Accept failed")
                    continue

                self._spawn_worker(client_socket, address)

    def stop(self) -> None:
        self._running = False
        if self._server_socket is not None:
            self._server_socket.close()
            self._server_socket = None

    def _spawn_worker(self, client_socket: socket.socket, address: tuple[str, int]) -> None:
        # Accepted sockets inherit the listener's timeout; workers block without one.
        client_socket.settimeout(None)
        self._next_connection_id += 1
        worker = threading.Thread(
            target=self._handle_client,
            args=(client_socket, address),
            name=f"http-conn-{self._next_connection_id}",
            daemon=True,
        )
        try:
            worker.start()
        except RuntimeError:
            logger.exception("Thread creation failed")
            client_socket.close()

    def _handle_client(self, client_socket: socket.socket, address: tuple[str, int]) -> None:
        with client_socket:
            started_at = time.perf_counter()
            try:
                raw_request = read_http_request(client_socket)
                request = HTTPRequest.from_bytes(raw_request)
                response = self._dispatch(request)
                bytes_sent = write_http_response(client_socket, response)
            except OSError as exc:
                logger.warning("Connection error from %s: %s", address[0], exc)
                return
            except Exception:
                logger.exception("Unhandled error while serving %s", address[0])
                return

            logger.info(
                "client=%s method=%s path=%s status=%s bytes_out=%s duration_ms=%.2f",
                address[0],
                request.method or "-",
                request.path or "-",
                response.status_code,
                bytes_sent,
                (time.perf_counter() - started_at) * 1000,
            )

    def _dispatch(self, request: HTTPRequest) -> HTTPResponse:
        if request.method != "GET":
            return text_response(405, METHOD_NOT_ALLOWED)

        if request.malformed:
            return text_response(400, MALFORMED_REQUEST)

        handler = self.router.resolve(request.path)
        if handler is None:
            return text_response(404, NOT_FOUND)

        try:
            return handler(request)
        except Exception:
            logger.exception("Unhandled error in route handler")
            return text_response(500, INTERNAL_ERROR)


def _port(value: str) -> int:
    try:
        port = int(value, 10)
    except ValueError:
        port = 0
    if port <= 0 or port > MAX_PORT:
        raise argparse.ArgumentTypeError(f"invalid port number: {value}")
    return port


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve static files and /calc arithmetic over HTTP",
        add_help=False,
    )
    parser.add_argument("port", nargs="?", type=_port, help=f"TCP port to listen on (default {PORT})")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    port = args.port
    if port is None:
        port = PORT
        print(f"starting server on default port ({PORT})")
        print(f"to launch with custom port: {Path(sys.argv[0]).name} <port>", file=sys.stderr)

    server = HTTPServer(port=port)
    try:
        server.start()
    except KeyboardInterrupt:
        server.stop()
    except OSError as exc:
        logger.error("Could not listen on port %d: %s", port, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
