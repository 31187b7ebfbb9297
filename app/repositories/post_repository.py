from sqlalchemy.orm import selectinload

from app.db import db
from app.models.comment_model import Comment
from app.models.post_model import Post


def _feed_query():
    return (
        Post.query
        .options(
            selectinload(Post.comments).joinedload(Comment.author),
            selectinload(Post.likes),
        )
        .order_by(Post.created_at.desc(), Post.id.desc())
    )


def get_by_id(post_id: int):
    return db.session.get(Post, post_id)


def create_post(author_id, text, media_url):
    post = Post(
        author_id=author_id,
        text=text,
        media_url=media_url
    )
    db.session.add(post)
    return post


def delete_post(post):
    db.session.delete(post)


def get_all():
    return _feed_query().all()


def get_by_authors(author_ids):
    if not author_ids:
        return []
    return _feed_query().filter(Post.author_id.in_(author_ids)).all()


def get_by_author(author_id: int):
    return _feed_query().filter(Post.author_id == author_id).all()


def get_by_ids(post_ids):
    if not post_ids:
        return []
    return _feed_query().filter(Post.id.in_(post_ids)).all()
