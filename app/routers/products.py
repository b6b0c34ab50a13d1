# =============================================================================
# app/routers/products.py - Products Endpoint
# =============================================================================
# Placeholder route for the upcoming products feature.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

PRODUCTS_MESSAGE = "This is new feature change, a new route for products samin"


class ProductsResponse(BaseModel):
    message: str


@router.get("", response_model=ProductsResponse)
async def list_products():
    """Static message until products are backed by storage."""
    return ProductsResponse(message=PRODUCTS_MESSAGE)
