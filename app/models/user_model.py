from datetime import datetime

from app.db import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    full_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    bio = db.Column(db.Text, nullable=False, default="")
    link = db.Column(db.String(255), nullable=False, default="")
    profile_image_url = db.Column(db.String(512), nullable=True)
    cover_image_url = db.Column(db.String(512), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Follow rows and likes are written through their repositories;
    # these collections are read-only views of them.
    following_links = db.relationship(
        "Follow",
        foreign_keys="Follow.follower_id",
        order_by="Follow.id",
        lazy="select",
        viewonly=True,
    )
    follower_links = db.relationship(
        "Follow",
        foreign_keys="Follow.following_id",
        order_by="Follow.id",
        lazy="select",
        viewonly=True,
    )
    likes = db.relationship(
        "PostLike",
        order_by="PostLike.id",
        lazy="select",
        viewonly=True,
    )

    @property
    def following_ids(self):
        return [link.following_id for link in self.following_links]

    @property
    def follower_ids(self):
        return [link.follower_id for link in self.follower_links]

    @property
    def liked_post_ids(self):
        return [like.post_id for like in self.likes]
