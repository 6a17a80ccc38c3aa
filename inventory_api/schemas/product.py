from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class ProductCreate(BaseModel):
    """Schema for creating a new product."""
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Product category")
    quantity: int = Field(..., description="Units in stock (0 is allowed)")
    price: float = Field(..., allow_inf_nan=False, description="Unit price (0 is allowed)")
    description: Optional[str] = Field(None, description="Optional description")


class ProductUpdate(BaseModel):
    """
    Schema for replacing a product.

    Nothing is required here: every field is written as given, and a
    missing name, category, quantity or price is left for the database's
    NOT NULL constraints to reject.
    """
    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = Field(None, allow_inf_nan=False)
    description: Optional[str] = None


class ProductResponse(BaseModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    category: str
    quantity: int
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductCreatedResponse(BaseModel):
    id: int
    message: str = "Product created successfully"


class MessageResponse(BaseModel):
    message: str


class StatsResponse(BaseModel):
    """Aggregate figures over the whole products table."""
    total_products: int
    total_items: int
    categories: int
    total_value: float


class ErrorResponse(BaseModel):
    error: str
