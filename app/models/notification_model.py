from datetime import datetime

from app.db import db


NOTIFICATION_LIKE = "like"
NOTIFICATION_FOLLOW = "follow"
NOTIFICATION_TYPES = (NOTIFICATION_LIKE, NOTIFICATION_FOLLOW)


class Notification(db.Model):
    __tablename__ = "notifications"

    id = db.Column(db.Integer, primary_key=True)
    from_user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    to_user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    type = db.Column(db.String(20), nullable=False)  # "like" | "follow"

    # Reserved for a notification inbox; nothing sets it yet.
    read = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.CheckConstraint(
            "type IN ('like', 'follow')",
            name="notification_type",
        ),
    )
