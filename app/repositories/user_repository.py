from sqlalchemy import func, or_

from app.db import db
from app.models.user_model import User


def get_by_id(user_id: int):
    return db.session.get(User, user_id)


def get_by_username(username: str):
    return User.query.filter_by(username=username).first()


def get_by_email(email: str):
    return User.query.filter_by(email=email).first()


def get_by_ids(user_ids):
    if not user_ids:
        return []
    users = User.query.filter(User.id.in_(user_ids)).all()
    user_by_id = {user.id: user for user in users}
    return [user_by_id[user_id] for user_id in user_ids if user_id in user_by_id]


def create_user(username, full_name, email, password_hash):
    user = User(
        username=username,
        full_name=full_name,
        email=email,
        password_hash=password_hash,
    )
    db.session.add(user)
    db.session.commit()
    return user


def sample_ids_except(user_id: int, size: int):
    rows = (
        db.session.query(User.id)
        .filter(User.id != user_id)
        .order_by(func.random())
        .limit(size)
        .all()
    )
    return [row[0] for row in rows]


def _escape_like(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


def search(query: str):
    pattern = f"%{_escape_like(query)}%"
    return (
        User.query
        .filter(
            or_(
                User.username.ilike(pattern, escape="\\"),
                User.full_name.ilike(pattern, escape="\\"),
            )
        )
        .order_by(User.username.asc())
        .all()
    )
