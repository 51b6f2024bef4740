"""Static file handler for /static/ requests."""

from pathlib import Path

from config import STATIC_DIR
from request import HTTPRequest
from response import OCTET_STREAM, HTTPResponse, text_response
from utils import resolve_static_file

FILE_NOT_FOUND = "File not found."


def read_static_file(file_path: Path | None) -> HTTPResponse:
    """Read file_path fully and wrap it in a 200 octet-stream response."""
    if file_path is None:
        return text_response(404, FILE_NOT_FOUND)

    try:
        body = file_path.read_bytes()
    except (OSError, ValueError):
        return text_response(404, FILE_NOT_FOUND)

    return HTTPResponse(status_code=200, body=body, content_type=OCTET_STREAM)


def serve_static(request: HTTPRequest, static_dir: str | Path = STATIC_DIR) -> HTTPResponse:
    return read_static_file(resolve_static_file(request.path, static_dir))
