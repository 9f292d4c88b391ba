"""Data access objects sharing one connect/select/process/disconnect skeleton."""

import logging
from abc import ABC, abstractmethod
from typing import List

from lifetime.db import Category, Product, close_db, get_session, init_db, seed_sample_data

logger = logging.getLogger(__name__)


class DataAccessObject(ABC):
    """Abstract class. run() is the template method."""

    def __init__(self, db_path: str = ":memory:", limit: int = 10):
        self.db_path = db_path
        self.limit = limit
        self.rows: List[str] = []

    def connect(self):
        init_db(self.db_path)
        seed_sample_data()

    @abstractmethod
    def select(self):
        pass

    @abstractmethod
    def process(self):
        pass

    def disconnect(self):
        close_db()

    def run(self):
        self.connect()
        try:
            self.select()
            self.process()
        finally:
            self.disconnect()


class Categories(DataAccessObject):
    def select(self):
        with get_session() as session:
            query = session.query(Category.name).order_by(Category.id).limit(self.limit)
            self.rows = [name for (name,) in query]
        logger.debug(f"Selected {len(self.rows)} categories")

    def process(self):
        print("Categories")
        for name in self.rows:
            print(name)
        print()


class Products(DataAccessObject):
    def select(self):
        with get_session() as session:
            query = session.query(Product.name).order_by(Product.id).limit(self.limit)
            self.rows = [name for (name,) in query]
        logger.debug(f"Selected {len(self.rows)} products")

    def process(self):
        print("Products")
        for name in self.rows:
            print(name)
        print()
