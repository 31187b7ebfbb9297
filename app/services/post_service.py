import logging

from app.db import db
from app.errors import AuthorizationError, NotFoundError, ValidationError
from app.repositories import post_repository, user_repository
from app.services import media_service


logger = logging.getLogger(__name__)


def create_post(actor_id: int, text=None, media_file=None):
    author = user_repository.get_by_id(actor_id)
    if not author:
        raise NotFoundError("User not found")

    if text is not None and not isinstance(text, str):
        raise ValidationError("Text must be a string")
    text = text.strip() if text else None

    media_url = None
    if media_file is not None:
        media_url = media_service.upload_media(media_file)

    if not text and not media_url:
        raise ValidationError("Post must have text, image, or video")

    post = post_repository.create_post(
        author_id=author.id,
        text=text,
        media_url=media_url,
    )
    db.session.commit()

    logger.info("User %s created post %s", author.id, post.id)
    return post


def delete_post(actor_id: int, post_id: int):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")

    if post.author_id != actor_id:
        raise AuthorizationError("Unauthorized to delete this post")

    # The record goes even if the media host refuses the delete.
    if post.media_url:
        media_service.destroy_media_quietly(post.media_url)

    post_repository.delete_post(post)
    db.session.commit()

    logger.info("User %s deleted post %s", actor_id, post_id)
    return post_id


def get_all_posts():
    return post_repository.get_all()


def get_following_posts(actor_id: int):
    user = user_repository.get_by_id(actor_id)
    if not user:
        raise NotFoundError("User not found")

    return post_repository.get_by_authors(user.following_ids)


def get_user_posts(username: str):
    user = user_repository.get_by_username(username)
    if not user:
        raise NotFoundError("User not found")

    return post_repository.get_by_author(user.id)


def get_liked_posts(user_id: int):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")

    return post_repository.get_by_ids(user.liked_post_ids)
