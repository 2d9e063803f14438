from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from bizhub.core.errors import BizhubError
from bizhub.dependencies import get_db, require_auth
from bizhub.routers.common import RPC_PREFIX, http_error
from bizhub.schemas.common import SuccessResult, IdInput
from bizhub.schemas.product import ProductCreate, ProductFilters, ProductRead, ProductUpdate
from bizhub.services import product_service

router = APIRouter(prefix=RPC_PREFIX, tags=["Products"])


@router.post("/createProduct", response_model=ProductRead)
def create_product(payload: ProductCreate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return product_service.create_product(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/getProducts", response_model=list[ProductRead])
def get_products(filters: Optional[ProductFilters] = Body(None), db: Session = Depends(get_db)):
    return product_service.list_products(db, filters)


@router.post("/getProductById", response_model=Optional[ProductRead])
def get_product_by_id(payload: IdInput, db: Session = Depends(get_db)):
    return product_service.get_product(db, payload.id)


@router.post("/updateProduct", response_model=ProductRead)
def update_product(payload: ProductUpdate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return product_service.update_product(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/deleteProduct", response_model=SuccessResult)
def delete_product(payload: IdInput, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    product_service.delete_product(db, payload.id)
    return SuccessResult()


__all__ = ["router"]
