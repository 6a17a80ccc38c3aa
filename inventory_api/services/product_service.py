from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete, func
from typing import Optional, List
import logging

from inventory_api.models.product import Product
from inventory_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations and statistics.

    Every method issues exactly one statement against the database.
    Database errors are not caught here; they propagate to the
    application's exception handlers.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, product_data: ProductCreate) -> int:
        """
        Create a new product.

        Args:
            product_data: Validated product creation data

        Returns:
            ID assigned to the new product
        """
        product = Product(
            name=product_data.name,
            category=product_data.category,
            quantity=product_data.quantity,
            price=product_data.price,
            description=product_data.description,
        )
        self.db.add(product)
        self.db.flush()
        product_id = product.id
        self.db.commit()

        logger.info(f"Product #{product_id} created")
        return product_id

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get a product by ID, or None if it does not exist."""
        return self.db.get(Product, product_id)

    def get_all(self) -> List[Product]:
        """
        Get every product, most recently created first.

        Rows created within the same clock tick are ordered by id so the
        newer one still comes first.
        """
        stmt = select(Product).order_by(Product.created_at.desc(), Product.id.desc())
        return list(self.db.scalars(stmt))

    def update(self, product_id: int, product_data: ProductUpdate) -> bool:
        """
        Overwrite all editable fields of a product.

        Args:
            product_id: ID of product to update
            product_data: New field values (None is written as NULL)

        Returns:
            True if a row was updated, False if not found
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(
                name=product_data.name,
                category=product_data.category,
                quantity=product_data.quantity,
                price=product_data.price,
                description=product_data.description,
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()

        if result.rowcount == 0:
            return False

        logger.info(f"Product #{product_id} updated")
        return True

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Returns:
            True if deleted, False if not found
        """
        stmt = (
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()

        if result.rowcount == 0:
            return False

        logger.info(f"Product #{product_id} deleted")
        return True

    def get_stats(self) -> dict:
        """
        Compute dashboard totals in a single aggregate query.

        Sums over an empty table come back as 0 rather than NULL.
        """
        stmt = select(
            func.count().label("total_products"),
            func.coalesce(func.sum(Product.quantity), 0).label("total_items"),
            func.count(func.distinct(Product.category)).label("categories"),
            func.coalesce(func.sum(Product.quantity * Product.price), 0).label("total_value"),
        ).select_from(Product)
        row = self.db.execute(stmt).one()

        return {
            "total_products": row.total_products,
            "total_items": row.total_items,
            "categories": row.categories,
            "total_value": float(row.total_value),
        }
