import logging

from werkzeug.security import check_password_hash, generate_password_hash

from app.db import db
from app.errors import AuthorizationError, NotFoundError, ValidationError
from app.repositories import user_repository
from app.services import media_service
from app.services.auth_service import MIN_PASSWORD_LENGTH, validate_email


logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("full_name", "bio", "link")


def get_profile(username: str):
    user = user_repository.get_by_username(username)
    if not user:
        raise NotFoundError("User not found")
    return user


def _clean_text(field, value):
    """Strip a submitted string; ``None`` means the field was not supplied."""
    if not value:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip() or None


def _change_password(user, current_password, new_password):
    if bool(current_password) != bool(new_password):
        raise ValidationError("Please provide both current and new password")
    if not current_password:
        return
    if not isinstance(current_password, str) or not isinstance(new_password, str):
        raise ValidationError("Passwords must be strings")

    if not check_password_hash(user.password_hash, current_password):
        raise AuthorizationError("Incorrect current password")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    user.password_hash = generate_password_hash(new_password)


def _replace_image(previous_url, validated):
    if previous_url:
        media_service.destroy_media_quietly(previous_url)
    return media_service.store_media(validated)


def update_profile(
    actor_id: int,
    username=None,
    full_name=None,
    email=None,
    bio=None,
    link=None,
    current_password=None,
    new_password=None,
    profile_image=None,
    cover_image=None,
):
    """Apply a partial profile update.

    Empty or blank values leave the stored field untouched, so fields can be
    replaced but never cleared. Every input is checked before a stored image
    is removed.
    """
    user = user_repository.get_by_id(actor_id)
    if not user:
        raise NotFoundError("User not found")

    _change_password(user, current_password, new_password)

    username = _clean_text("username", username)
    if username and username != user.username:
        if user_repository.get_by_username(username):
            raise ValidationError("Username already exists")
        user.username = username

    email = _clean_text("email", email)
    if email and email.lower() != user.email:
        email = validate_email(email)
        if user_repository.get_by_email(email):
            raise ValidationError("Email already exists")
        user.email = email

    values = {"full_name": full_name, "bio": bio, "link": link}
    for field in _TEXT_FIELDS:
        value = _clean_text(field, values[field])
        if value:
            setattr(user, field, value)

    profile_media = media_service.validate_media(profile_image) if profile_image else None
    cover_media = media_service.validate_media(cover_image) if cover_image else None

    if profile_media:
        user.profile_image_url = _replace_image(user.profile_image_url, profile_media)
    if cover_media:
        user.cover_image_url = _replace_image(user.cover_image_url, cover_media)

    db.session.commit()
    logger.info("User %s updated their profile", user.id)
    return user


def search_users(query):
    if not isinstance(query, str) or not query.strip():
        raise ValidationError("Search query is required")
    return user_repository.search(query.strip())
