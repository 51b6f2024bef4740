"""Unit tests for prefix router behavior."""

import pytest

from request import HTTPRequest
from response import HTTPResponse
from router import Router


def _handler_ok(_request: HTTPRequest) -> HTTPResponse:
    return HTTPResponse(status_code=200, body="ok")


def _handler_other(_request: HTTPRequest) -> HTTPResponse:
    return HTTPResponse(status_code=200, body="other")


def test_router_resolves_by_prefix() -> None:
    router = Router()
    router.add_route("/static/", _handler_ok)

    assert router.resolve("/static/a/b.txt") is _handler_ok


def test_router_prefers_first_registered_prefix() -> None:
    router = Router()
    router.add_route("/calc/", _handler_ok)
    router.add_route("/", _handler_other)

    assert router.resolve("/calc/add/1/2") is _handler_ok
    assert router.resolve("/elsewhere") is _handler_other


def test_router_returns_none_for_unknown_path() -> None:
    router = Router()
    router.add_route("/static/", _handler_ok)

    assert router.resolve("/static") is None
    assert router.resolve("") is None


def test_router_rejects_invalid_prefix() -> None:
    router = Router()

    with pytest.raises(ValueError, match="prefix must start"):
        router.add_route("static/", _handler_ok)
