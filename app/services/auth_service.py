import logging
import re

from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token, create_refresh_token

from app.errors import AuthorizationError, NotFoundError, ValidationError
from app.repositories import user_repository


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def validate_email(email) -> str:
    if not _require_non_empty_string(email) or not _EMAIL_RE.match(email.strip()):
        raise ValidationError("Invalid email format")
    return email.strip().lower()


def register(username, full_name, email, password):
    if not all(_require_non_empty_string(value) for value in (username, full_name, email, password)):
        raise ValidationError("Missing fields")

    username = username.strip()
    email = validate_email(email)

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if user_repository.get_by_username(username):
        raise ValidationError("Username already exists")
    if user_repository.get_by_email(email):
        raise ValidationError("Email already exists")

    user = user_repository.create_user(
        username=username,
        full_name=full_name.strip(),
        email=email,
        password_hash=generate_password_hash(password),
    )
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


def login(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise AuthorizationError("Invalid credentials")

    user = user_repository.get_by_username(username.strip())
    if not user or not check_password_hash(user.password_hash, password):
        raise AuthorizationError("Invalid credentials")

    identity = str(user.id)
    return {
        "access_token": create_access_token(identity=identity),
        "refresh_token": create_refresh_token(identity=identity)
    }


def refresh_access_token(identity):
    return {
        "access_token": create_access_token(identity=identity)
    }


def resolve_actor_id(identity) -> int:
    """Map a token identity to the id of an existing user."""
    try:
        actor_id = int(identity)
    except (TypeError, ValueError):
        raise AuthorizationError("Invalid token identity")

    if not user_repository.get_by_id(actor_id):
        raise NotFoundError("User not found")
    return actor_id
