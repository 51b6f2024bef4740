"""Configuration constants for the static/calc HTTP server."""

HOST: str = "0.0.0.0"
PORT: int = 80
MAX_PORT: int = 65535
BUFFER_SIZE: int = 1024
LISTEN_BACKLOG: int = 10
ACCEPT_POLL_SECS: float = 0.2
STATIC_DIR: str = "static"
MAX_PATH_LENGTH: int = 255
MAX_CALC_SEGMENT_LENGTH: int = 15
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
