from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from bizhub.core.errors import BizhubError
from bizhub.dependencies import get_db, require_auth
from bizhub.routers.common import RPC_PREFIX, http_error
from bizhub.schemas.common import SuccessResult, IdInput
from bizhub.schemas.customer import CustomerCreate, CustomerFilters, CustomerRead, CustomerUpdate
from bizhub.services import customer_service

router = APIRouter(prefix=RPC_PREFIX, tags=["Customers"])


@router.post("/createCustomer", response_model=CustomerRead)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return customer_service.create_customer(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/getCustomers", response_model=list[CustomerRead])
def get_customers(filters: Optional[CustomerFilters] = Body(None), db: Session = Depends(get_db)):
    return customer_service.list_customers(db, filters)


@router.post("/getCustomerById", response_model=Optional[CustomerRead])
def get_customer_by_id(payload: IdInput, db: Session = Depends(get_db)):
    return customer_service.get_customer(db, payload.id)


@router.post("/updateCustomer", response_model=CustomerRead)
def update_customer(payload: CustomerUpdate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return customer_service.update_customer(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/deleteCustomer", response_model=SuccessResult)
def delete_customer(payload: IdInput, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    customer_service.delete_customer(db, payload.id)
    return SuccessResult()


__all__ = ["router"]
