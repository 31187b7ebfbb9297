from datetime import datetime

from app.db import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    text = db.Column(db.Text, nullable=True)
    media_url = db.Column(db.String(512), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    author = db.relationship("User", lazy="joined")

    comments = db.relationship(
        "Comment",
        backref="post",
        order_by="Comment.id",
        lazy="select",
        cascade="all, delete-orphan"
    )
    likes = db.relationship(
        "PostLike",
        back_populates="post",
        order_by="PostLike.id",
        lazy="select",
        cascade="all, delete-orphan"
    )

    @property
    def liked_user_ids(self):
        return [like.user_id for like in self.likes]
