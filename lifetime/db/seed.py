"""Sample catalogue data for the data-access demos."""

import logging
from decimal import Decimal

from .models import Category, Product
from .session import get_session

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = [
    ("Beverages", "Soft drinks, coffees, teas, beers, and ales"),
    ("Condiments", "Sweet and savory sauces, relishes, spreads, and seasonings"),
    ("Confections", "Desserts, candies, and sweet breads"),
    ("Dairy Products", "Cheeses"),
    ("Grains/Cereals", "Breads, crackers, pasta, and cereal"),
    ("Meat/Poultry", "Prepared meats"),
    ("Produce", "Dried fruit and bean curd"),
    ("Seafood", "Seaweed and fish"),
]

SAMPLE_PRODUCTS = [
    ("Chai", "Beverages", "18.00"),
    ("Chang", "Beverages", "19.00"),
    ("Aniseed Syrup", "Condiments", "10.00"),
    ("Chef Anton's Cajun Seasoning", "Condiments", "22.00"),
    ("Chef Anton's Gumbo Mix", "Condiments", "21.35"),
    ("Grandma's Boysenberry Spread", "Condiments", "25.00"),
    ("Uncle Bob's Organic Dried Pears", "Produce", "30.00"),
    ("Northwoods Cranberry Sauce", "Condiments", "40.00"),
    ("Mishi Kobe Niku", "Meat/Poultry", "97.00"),
    ("Ikura", "Seafood", "31.00"),
    ("Queso Cabrales", "Dairy Products", "21.00"),
    ("Queso Manchego La Pastora", "Dairy Products", "38.00"),
]


def seed_sample_data() -> bool:
    """
    Insert the sample catalogue if the database is empty.

    Returns:
        True if rows were inserted, False if data was already present
    """
    with get_session() as session:
        if session.query(Category).count() > 0:
            return False

        categories = {}
        for name, description in SAMPLE_CATEGORIES:
            category = Category(name=name, description=description)
            session.add(category)
            categories[name] = category

        for name, category_name, price in SAMPLE_PRODUCTS:
            session.add(Product(
                name=name,
                category=categories[category_name],
                unit_price=Decimal(price),
            ))

    logger.info(
        f"Seeded {len(SAMPLE_CATEGORIES)} categories and {len(SAMPLE_PRODUCTS)} products"
    )
    return True
