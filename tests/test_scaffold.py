"""Sanity checks for baseline repository scaffolding."""

from pathlib import Path

from config import BUFFER_SIZE, HOST, PORT, STATIC_DIR

ROOT = Path(__file__).resolve().parent.parent


def test_core_files_exist() -> None:
    expected = [
        "server.py",
        "socket_handler.py",
        "request.py",
        "response.py",
        "router.py",
        "config.py",
        "utils.py",
        "handlers/static.py",
        "handlers/calc.py",
    ]
    for rel_path in expected:
        assert (ROOT / rel_path).exists()


def test_basic_config_values() -> None:
    assert HOST == "0.0.0.0"
    assert PORT == 80
    assert BUFFER_SIZE == 1024
    assert STATIC_DIR == "static"
