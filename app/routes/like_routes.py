from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from app.services import auth_service
from app.services.like_service import like_unlike_post

like_bp = Blueprint("likes", __name__)


@like_bp.route("/posts/<int:post_id>/like", methods=["POST"])
@jwt_required()
def like_route(post_id):
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())
    return jsonify(like_unlike_post(actor_id, post_id)), 200
