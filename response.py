"""HTTP response model and serializer."""

from dataclasses import dataclass

from config import BUFFER_SIZE

REASON_PHRASES: dict[int, str] = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}

TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"


@dataclass(slots=True)
class HTTPResponse:
    status_code: int
    body: bytes | str = b""
    content_type: str = TEXT_PLAIN
    reason_phrase: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")

    @property
    def status_line(self) -> str:
        reason = self.reason_phrase or REASON_PHRASES.get(self.status_code, "Unknown")
        return f"{self.status_code} {reason}"

    def to_bytes(self) -> bytes:
        """Serialize the response into HTTP/1.1 wire format bytes.

        Content-Length is the byte length of the body, so binary bodies with
        embedded NUL bytes are framed correctly.
        """
        head = (
            f"HTTP/1.1 {self.status_line}\r\n"
            f"Content-Type: {self.content_type}\r\n"
            f"Content-Length: {len(self.body)}\r\n"
            "\r\n"
        ).encode("iso-8859-1")
        payload = head + self.body
        if self.content_type.startswith("text/") and len(payload) > BUFFER_SIZE:
            raise ValueError("Text response exceeds BUFFER_SIZE")
        return payload


def text_response(status_code: int, message: str) -> HTTPResponse:
    return HTTPResponse(status_code=status_code, body=message, content_type=TEXT_PLAIN)
