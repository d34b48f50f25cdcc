"""Database utilities - engine and session."""

from src.hirehub.core.db.engine import dispose_engine, get_engine
from src.hirehub.core.db.session import create_tables, get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    # Session
    "create_tables",
    "get_session",
]
