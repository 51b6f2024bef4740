"""HTTP request-line model and parser."""

from dataclasses import dataclass

from config import MAX_PATH_LENGTH


@dataclass(slots=True)
class HTTPRequest:
    method: str
    path: str
    malformed: bool = False

    @classmethod
    def from_bytes(cls, raw: bytes) -> "HTTPRequest":
        """Extract method and path from the first two whitespace-delimited tokens.

        Only the bytes read from the connection are inspected; anything after
        the path (version, headers, body) is ignored. Missing tokens become
        empty strings and a path longer than MAX_PATH_LENGTH flags the request
        as malformed, so this never raises on client input.
        """
        tokens = [token.decode("iso-8859-1") for token in raw.split(maxsplit=2)[:2]]
        method = tokens[0] if tokens else ""
        path = tokens[1] if len(tokens) > 1 else ""
        malformed = len(path) > MAX_PATH_LENGTH
        return cls(method=method, path=path, malformed=malformed)
