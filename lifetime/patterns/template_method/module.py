"""Template Method demo - reading categories and products from a database."""

from lifetime.config import get
from lifetime.core import Demo

from .data_access import Categories, Products


class TemplateMethodDemo(Demo):
    """run() fixes the calling sequence; subclasses supply select() and process()."""

    @property
    def name(self) -> str:
        return "template_method"

    @property
    def display_name(self) -> str:
        return "Template Method"

    @property
    def description(self) -> str:
        return (
            "Define the skeleton of an algorithm in an operation, deferring some "
            "steps to subclasses"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "AbstractClass": ["DataAccessObject"],
            "ConcreteClass": ["Categories", "Products"],
        }

    def get_config_schema(self):
        return {
            "database_path": {
                "type": "str",
                "default": None,
                "description": "SQLite file to read; defaults to database.path from config.yaml",
            },
            "limit": {
                "type": "int",
                "default": 10,
                "description": "Rows read per table",
            },
        }

    def compute(self):
        db_path = self.setting("database_path") or get("database.path", ":memory:")
        limit = self.setting("limit")

        Categories(db_path, limit).run()
        Products(db_path, limit).run()
