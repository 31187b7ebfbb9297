from app.db import db
from app.errors import NotFoundError, ValidationError
from app.repositories import post_repository
from app.repositories.comment_repository import create_comment


def add_comment(actor_id, post_id, text):
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Text is required")

    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")

    comment = create_comment(
        post=post,
        author_id=actor_id,
        text=text
    )

    db.session.commit()
    return comment
