from app.db import db
from app.models.follow_model import Follow


def get_follow(follower_id: int, following_id: int):
    return Follow.query.filter_by(
        follower_id=follower_id,
        following_id=following_id,
    ).first()


def is_following(follower_id: int, following_id: int) -> bool:
    return get_follow(follower_id, following_id) is not None


def add_follow(follower_id: int, following_id: int):
    follow = Follow(
        follower_id=follower_id,
        following_id=following_id,
    )
    db.session.add(follow)
    return follow


def remove_follow(follow):
    db.session.delete(follow)


def get_following_ids(follower_id: int):
    rows = (
        db.session.query(Follow.following_id)
        .filter(Follow.follower_id == follower_id)
        .order_by(Follow.id.asc())
        .all()
    )
    return [row[0] for row in rows]
