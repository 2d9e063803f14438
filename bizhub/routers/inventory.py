from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from bizhub.core.errors import BizhubError
from bizhub.dependencies import get_db, require_auth
from bizhub.routers.common import RPC_PREFIX, http_error
from bizhub.schemas.common import SuccessResult, IdInput
from bizhub.schemas.inventory import InventoryCreate, InventoryFilters, InventoryRead, InventoryUpdate
from bizhub.services import inventory_service

router = APIRouter(prefix=RPC_PREFIX, tags=["Inventory"])


def _detail(db: Session, inventory_id: int) -> Optional[InventoryRead]:
    row = inventory_service.get_inventory_detail(db, inventory_id)
    if row is None:
        return None
    return InventoryRead.from_row(row)


@router.post("/createInventory", response_model=InventoryRead)
def create_inventory(payload: InventoryCreate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        inventory = inventory_service.create_inventory(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc
    return _detail(db, inventory.id)


@router.post("/getInventory", response_model=list[InventoryRead])
def get_inventory(filters: Optional[InventoryFilters] = Body(None), db: Session = Depends(get_db)):
    rows = inventory_service.list_inventory(db, filters)
    return [InventoryRead.from_row(row) for row in rows]


@router.post("/getInventoryById", response_model=Optional[InventoryRead])
def get_inventory_by_id(payload: IdInput, db: Session = Depends(get_db)):
    return _detail(db, payload.id)


@router.post("/updateInventory", response_model=InventoryRead)
def update_inventory(payload: InventoryUpdate, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        inventory = inventory_service.update_inventory(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc
    return _detail(db, inventory.id)


@router.post("/deleteInventory", response_model=SuccessResult)
def delete_inventory(payload: IdInput, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    inventory_service.delete_inventory(db, payload.id)
    return SuccessResult()


__all__ = ["router"]
