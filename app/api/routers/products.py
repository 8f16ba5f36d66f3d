# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import ProductIn, ProductOut
from app.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def list_products(
    seller_id: int | None = Query(None, alias="sellerId"),
    db: Session = Depends(get_db),
):
    return get_service(db).list_products(seller_id)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_product(product_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    """
    Tworzy produkt z payloadu formularza sprzedawcy.
    """
    svc = get_service(db)
    try:
        return svc.create_product(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    payload: ProductIn,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_product(product_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
