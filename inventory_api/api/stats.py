from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.services.product_service import ProductService
from inventory_api.schemas.product import StatsResponse

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get(
    "",
    response_model=StatsResponse,
    summary="Dashboard statistics",
    description="Product count, total units, distinct categories and total stock value."
)
def get_stats(db: Session = Depends(get_db)):
    service = ProductService(db)
    return service.get_stats()
