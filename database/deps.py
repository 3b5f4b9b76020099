"""FastAPI dependencies exposing request-scoped DB sessions.

Summary and listing routes take `get_db_read` so they can be pointed at a
replica; anything that writes entries, goals or assignments takes
`get_db_write`.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write session; a request that fails leaves nothing pending."""
    for session in get_write_session():
        try:
            yield session
        except Exception:
            session.rollback()
            raise


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
