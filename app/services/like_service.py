import logging

from app.db import db
from app.errors import NotFoundError
from app.models.notification_model import NOTIFICATION_LIKE
from app.repositories import post_repository
from app.repositories.like_repository import add_like, get_like, remove_like
from app.services.notification_service import emit_notification


logger = logging.getLogger(__name__)


def like_unlike_post(actor_id: int, post_id: int):
    """Toggle the actor's like on a post and return the resulting liker ids.

    Liking notifies the post author; unliking is silent. The like row and the
    notification are committed together.
    """
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")

    like = get_like(post.id, actor_id)
    if like:
        remove_like(post, like)
        db.session.commit()
        logger.info("User %s unliked post %s", actor_id, post.id)
    else:
        add_like(post, actor_id)
        emit_notification(actor_id, post.author_id, NOTIFICATION_LIKE)
        db.session.commit()
        logger.info("User %s liked post %s", actor_id, post.id)

    return post.liked_user_ids
