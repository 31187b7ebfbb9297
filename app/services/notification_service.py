import logging

from app.models.notification_model import NOTIFICATION_TYPES
from app.repositories.notification_repository import add_notification


logger = logging.getLogger(__name__)


def emit_notification(from_user_id: int, to_user_id: int, notification_type: str):
    """Queue a notification on the caller's unit of work; the caller commits."""
    if notification_type not in NOTIFICATION_TYPES:
        raise ValueError(f"Invalid notification type: {notification_type}")

    notification = add_notification(from_user_id, to_user_id, notification_type)
    logger.debug(
        "Queued %s notification %s -> %s",
        notification_type, from_user_id, to_user_id,
    )
    return notification
