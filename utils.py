"""Utility helpers shared across server modules."""

from pathlib import Path

from config import STATIC_DIR

STATIC_PREFIX = "/static"


def resolve_static_file(request_path: str, static_dir: str | Path = STATIC_DIR) -> Path | None:
    """Resolve a /static/ request path under static_dir, or None if it escapes it."""
    if not request_path.startswith(STATIC_PREFIX + "/"):
        return None

    relative_path = request_path.removeprefix(STATIC_PREFIX).lstrip("/")

    static_root = Path(static_dir).resolve()
    try:
        candidate = (static_root / relative_path).resolve()
    except (OSError, RuntimeError, ValueError):
        # Symlink loops and embedded NUL bytes.
        return None

    try:
        candidate.relative_to(static_root)
    except ValueError:
        return None

    return candidate
