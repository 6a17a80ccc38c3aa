import logging

from sqlalchemy import select, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from inventory_api.database import Base
from inventory_api.models.product import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ("Laptop Pro", "Electronics", 15, 1299.99, "High-performance laptop"),
    ("Wireless Mouse", "Electronics", 45, 29.99, "Ergonomic wireless mouse"),
    ("Office Chair", "Furniture", 8, 199.99, "Comfortable office chair"),
    ("Coffee Beans", "Food", 120, 12.99, "Premium coffee beans"),
    ("Notebook Set", "Office Supplies", 200, 8.99, "Pack of 3 notebooks"),
]


def init_db(engine: Engine, session_factory: sessionmaker, seed: bool = True) -> int:
    """
    Create the products table if needed and seed an empty table.

    Safe to run any number of times: the sample rows are only inserted
    while the table has no rows at all.

    Args:
        engine: Engine bound to the products database
        session_factory: Session factory bound to the same engine
        seed: Whether to insert the sample rows into an empty table

    Returns:
        Number of sample rows inserted
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")

    if not seed:
        return 0

    with session_factory() as db:
        count = db.scalar(select(func.count()).select_from(Product))
        if count:
            logger.info(f"Products table already has {count} rows, skipping seed")
            return 0

        db.add_all(
            Product(
                name=name,
                category=category,
                quantity=quantity,
                price=price,
                description=description,
            )
            for name, category, quantity, price, description in SAMPLE_PRODUCTS
        )
        db.commit()

    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)
