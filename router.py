"""Ordered prefix routing table for GET handlers."""

from collections.abc import Callable

from request import HTTPRequest
from response import HTTPResponse

Handler = Callable[[HTTPRequest], HTTPResponse]


class Router:
    def __init__(self) -> None:
        self._routes: list[tuple[str, Handler]] = []

    def add_route(self, prefix: str, handler: Handler) -> None:
        if not prefix.startswith("/"):
            raise ValueError("prefix must start with '/'")
        self._routes.append((prefix, handler))

    def resolve(self, path: str) -> Handler | None:
        """Return the handler of the first registered prefix matching path."""
        for prefix, handler in self._routes:
            if path.startswith(prefix):
                return handler
        return None
