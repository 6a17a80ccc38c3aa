from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from inventory_api.database import get_db
from inventory_api.errors import PRODUCT_NOT_FOUND
from inventory_api.services.product_service import ProductService
from inventory_api.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductCreatedResponse,
    MessageResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
    description="Get every product, most recently created first."
)
def list_products(db: Session = Depends(get_db)):
    service = ProductService(db)
    return service.get_all()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get product by ID"
)
def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Get a product by ID."""
    service = ProductService(db)
    product = service.get_by_id(product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_NOT_FOUND
        )

    return product


@router.post(
    "",
    response_model=ProductCreatedResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="Create a new product",
    description="Create a product with name, category, quantity, price and an optional description."
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new product.

    - **name**: Product name (required, non-empty)
    - **category**: Product category (required, non-empty)
    - **quantity**: Units in stock (required, 0 allowed)
    - **price**: Unit price (required, 0 allowed)
    - **description**: Free text (optional)
    """
    service = ProductService(db)
    product_id = service.create(product_data)
    return ProductCreatedResponse(id=product_id)


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Update a product",
    description="Replace every editable field of a product. Omitted fields are written as null."
)
def update_product(
    product_id: int,
    product_data: Optional[ProductUpdate] = None,
    db: Session = Depends(get_db)
):
    """
    Update a product.

    Unlike create, no field is checked for presence here; a missing
    required field is rejected by the database and reported as a 500.
    A request without a body is treated as an empty object.
    """
    if product_data is None:
        product_data = ProductUpdate()
    service = ProductService(db)
    updated = service.update(product_id, product_data)

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_NOT_FOUND
        )

    return MessageResponse(message="Product updated successfully")


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a product"
)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Delete a product."""
    service = ProductService(db)
    deleted = service.delete(product_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=PRODUCT_NOT_FOUND
        )

    return MessageResponse(message="Product deleted successfully")
