from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from app.services import auth_service, follow_service


follow_bp = Blueprint("follows", __name__)

_MESSAGES = {
    follow_service.FOLLOWED: "Followed successfully",
    follow_service.UNFOLLOWED: "Unfollowed successfully",
}


@follow_bp.route("/users/<int:user_id>/follow", methods=["POST"])
@jwt_required()
def follow_unfollow_user(user_id):
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())

    result = follow_service.follow_unfollow(actor_id, user_id)
    return jsonify({"message": _MESSAGES[result], "status": result}), 200
