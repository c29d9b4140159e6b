import threading
import time
import uuid

_lock = threading.Lock()
_last_suffix = 0


def generate_document_id() -> str:
    return str(uuid.uuid4())


def _next_suffix() -> int:
    """Millisecond timestamp, bumped so two calls never share a value."""
    global _last_suffix
    with _lock:
        suffix = int(time.time() * 1000)
        if suffix <= _last_suffix:
            suffix = _last_suffix + 1
        _last_suffix = suffix
        return suffix


def generate_document_number(prefix: str) -> str:
    """e.g. INV-1718035200123 or QUO-1718035200124"""
    return f"{prefix}-{_next_suffix()}"
