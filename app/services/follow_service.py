import logging
import random

from flask import current_app

from app.db import db
from app.errors import NotFoundError, ValidationError
from app.models.notification_model import NOTIFICATION_FOLLOW
from app.repositories import user_repository
from app.repositories.follow_repository import (
    add_follow,
    get_follow,
    get_following_ids,
    remove_follow,
)
from app.services.notification_service import emit_notification


logger = logging.getLogger(__name__)

FOLLOWED = "followed"
UNFOLLOWED = "unfollowed"


def follow_unfollow(actor_id: int, target_id: int) -> str:
    """Toggle the follow edge from actor to target.

    Returns ``"followed"`` or ``"unfollowed"``. A new edge notifies the target;
    the edge and the notification are committed together.
    """
    if actor_id == target_id:
        raise ValidationError("You can't follow yourself")

    actor = user_repository.get_by_id(actor_id)
    target = user_repository.get_by_id(target_id)
    if not actor or not target:
        raise NotFoundError("User not found")

    follow = get_follow(actor.id, target.id)
    if follow:
        remove_follow(follow)
        db.session.commit()
        logger.info("User %s unfollowed %s", actor.id, target.id)
        return UNFOLLOWED

    add_follow(actor.id, target.id)
    emit_notification(actor.id, target.id, NOTIFICATION_FOLLOW)
    db.session.commit()
    logger.info("User %s followed %s", actor.id, target.id)
    return FOLLOWED


def sample_candidates(candidate_ids, size: int, rng=None):
    """Uniform sample without replacement of at most ``size`` ids."""
    rng = rng or random
    candidate_ids = list(candidate_ids)
    if size >= len(candidate_ids):
        sampled = candidate_ids[:]
        rng.shuffle(sampled)
        return sampled
    return rng.sample(candidate_ids, size)


def filter_followed(candidate_ids, following_ids, limit: int):
    following = set(following_ids)
    return [user_id for user_id in candidate_ids if user_id not in following][:limit]


def get_suggested_users(actor_id: int, rng=None):
    sample_size = current_app.config.get("SUGGESTED_USERS_SAMPLE_SIZE", 10)
    limit = current_app.config.get("SUGGESTED_USERS_LIMIT", 4)

    candidates = sample_candidates(
        user_repository.sample_ids_except(actor_id, sample_size),
        sample_size,
        rng=rng,
    )
    suggested_ids = filter_followed(candidates, get_following_ids(actor_id), limit)
    return user_repository.get_by_ids(suggested_ids)
