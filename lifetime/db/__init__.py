"""Database models and session management."""

from .models import Base, Category, Product
from .session import get_session, init_db, close_db
from .seed import seed_sample_data

__all__ = [
    "Base",
    "Category",
    "Product",
    "get_session",
    "init_db",
    "close_db",
    "seed_sample_data",
]
