from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bizhub.core.errors import BizhubError
from bizhub.dependencies import get_db, require_auth
from bizhub.routers.common import RPC_PREFIX, http_error
from bizhub.schemas.common import CountResult, SuccessResult, IdInput
from bizhub.schemas.notification import NotificationCreate, NotificationRead
from bizhub.services import notification_service

router = APIRouter(prefix=RPC_PREFIX, tags=["Notifications"])


@router.post("/createNotification", response_model=NotificationRead)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    _auth=Depends(require_auth),
):
    try:
        return notification_service.create_notification(db, payload)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/getNotifications", response_model=list[NotificationRead])
def get_notifications(db: Session = Depends(get_db)):
    return notification_service.list_notifications(db)


@router.post("/getUnreadNotificationsCount", response_model=CountResult)
def get_unread_notifications_count(db: Session = Depends(get_db)):
    return CountResult(count=notification_service.count_unread(db))


@router.post("/markNotificationRead", response_model=NotificationRead)
def mark_notification_read(payload: IdInput, db: Session = Depends(get_db), _auth=Depends(require_auth)):
    try:
        return notification_service.mark_read(db, payload.id)
    except BizhubError as exc:
        raise http_error(exc) from exc


@router.post("/markAllNotificationsRead", response_model=SuccessResult)
def mark_all_notifications_read(db: Session = Depends(get_db), _auth=Depends(require_auth)):
    notification_service.mark_all_read(db)
    return SuccessResult()


__all__ = ["router"]
