from sqlalchemy import Column, Integer, Text, Float, DateTime
from sqlalchemy.sql import func

from inventory_api.database import Base


class Product(Base):
    """
    Product model representing an inventory item.

    Attributes:
        id: Unique identifier, assigned by the database and never reused
        name: Product name
        category: Free-form category label
        quantity: Units in stock
        price: Unit price
        description: Optional free text
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())

    # Keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', quantity={self.quantity})>"
