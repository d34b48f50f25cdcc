"""Base factory configuration for polyfactory."""

from uuid import uuid4

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.hirehub.models.base import utc_now

__all__ = ["BaseFactory", "unique_suffix", "utc_now"]


def unique_suffix() -> str:
    """Short random suffix for values that must be unique per row."""
    return uuid4().hex[-8:]


class BaseFactory(SQLAlchemyFactory):
    """Base factory with common configuration for all models.

    Provides:
    - Database-assigned integer primary keys (never generated here)
    - UTC timestamp generation
    - Disabled auto-relationship setting (we control relationships manually)
    """

    __is_base_factory__ = True
    __set_primary_key__ = False
    __set_relationships__ = False
    __set_foreign_keys__ = False  # We set FK values explicitly
