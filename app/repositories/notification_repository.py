from app.db import db
from app.models.notification_model import Notification


def add_notification(from_user_id: int, to_user_id: int, notification_type: str):
    notification = Notification(
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        type=notification_type,
    )
    db.session.add(notification)
    return notification
