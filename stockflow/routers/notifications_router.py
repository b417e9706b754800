from typing import List
from fastapi import APIRouter, Depends, Query

from ..application.services.inbox_service import InboxService
from ..dependencies import get_current_user, get_inbox_service
from ..schemas import NotificationResponse, MarkAllReadResponse, MessageResponse

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("", response_model=List[NotificationResponse])
def get_notifications(
    unread_only: bool = Query(False),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: int = Depends(get_current_user),
    inbox: InboxService = Depends(get_inbox_service),
):
    items = inbox.list_for_user(current_user, unread_only=unread_only, limit=limit, offset=offset)
    return [NotificationResponse(**vars(n)) for n in items]


@router.put("/read-all", response_model=MarkAllReadResponse)
def mark_all_notifications_read(current_user: int = Depends(get_current_user), inbox: InboxService = Depends(get_inbox_service)):
    count = inbox.mark_all_read(current_user)
    return MarkAllReadResponse(success=True, message="All notifications marked as read", updated_count=count)


@router.put("/{notification_id}/read", response_model=MessageResponse)
def mark_notification_read(notification_id: int, current_user: int = Depends(get_current_user), inbox: InboxService = Depends(get_inbox_service)):
    inbox.mark_read(current_user, notification_id)
    return MessageResponse(message="Notification marked as read")


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(notification_id: int, current_user: int = Depends(get_current_user), inbox: InboxService = Depends(get_inbox_service)):
    inbox.delete(current_user, notification_id)
    return MessageResponse(message="Notification deleted successfully")
