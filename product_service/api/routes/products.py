from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status

from product_service.api.dependencies import get_product_service
from product_service.domain.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from product_service.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product"
)
def add_product(
    product: ProductCreate,
    product_service: ProductService = Depends(get_product_service)
):
    """Adds a product with its initial stock."""
    return product_service.add_product(product)


@router.get("", response_model=List[ProductResponse], summary="List products")
def get_all_products(product_service: ProductService = Depends(get_product_service)):
    return product_service.get_all_products()


@router.get("/filter/price", response_model=List[ProductResponse])
def get_products_by_price_range(
    min_price: float = Query(..., alias="min"),
    max_price: float = Query(..., alias="max"),
    product_service: ProductService = Depends(get_product_service)
):
    """Gets products priced between min and max, both inclusive."""
    return product_service.get_products_by_price_range(min_price, max_price)


@router.get("/filter/name", response_model=List[ProductResponse])
def get_products_by_name(
    name: str = Query(...),
    product_service: ProductService = Depends(get_product_service)
):
    """Gets products whose name contains the given text."""
    return product_service.get_products_by_name(name)


@router.get("/filter/category", response_model=List[ProductResponse])
def get_products_by_category(
    category: str = Query(...),
    product_service: ProductService = Depends(get_product_service)
):
    """Gets products by category."""
    return product_service.get_products_by_category(category)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product_by_id(
    product_id: int = Path(...),
    product_service: ProductService = Depends(get_product_service)
):
    """Gets product by ID."""
    return product_service.get_product_by_id(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product: ProductUpdate,
    product_id: int = Path(...),
    product_service: ProductService = Depends(get_product_service)
):
    """Replaces name, description, category, price and quantity."""
    return product_service.update_product(product_id, product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Path(...),
    product_service: ProductService = Depends(get_product_service)
):
    product_service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
