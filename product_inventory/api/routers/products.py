# product_inventory/api/routers/products.py
from fastapi import APIRouter, Depends, HTTPException

from product_inventory.api import get_service
from product_inventory.domain.errors import InvalidProduct, ProductNotFound, StorageError
from product_inventory.domain.schemas import MessageOut, ProductCreate, ProductOut, ProductUpdate
from product_inventory.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


#GET i PUT zwracają rekordy tak jak są w pliku, bez response_model
@router.get("")
def list_products(svc: ProductService = Depends(get_service)):
    try:
        return svc.list_products()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


# musi być przed /{product_id}, inaczej "instock" trafi jako id
@router.get("/instock")
def list_in_stock(svc: ProductService = Depends(get_service)):
    try:
        return svc.list_in_stock()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{product_id}")
def get_product(product_id: str, svc: ProductService = Depends(get_service)):
    try:
        return svc.get_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate | None = None,
    svc: ProductService = Depends(get_service),
):
    try:
        return svc.create_product(payload or ProductCreate())
    except InvalidProduct as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{product_id}")
def update_product(
    product_id: str,
    payload: ProductUpdate | None = None,
    svc: ProductService = Depends(get_service),
):
    try:
        return svc.update_product(product_id, payload or ProductUpdate())
    except InvalidProduct as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(product_id: str, svc: ProductService = Depends(get_service)):
    try:
        svc.delete_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Product deleted successfully"}
