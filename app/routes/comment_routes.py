from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from app.schemas.post_schema import CommentSchema
from app.services import auth_service
from app.services.comment_service import add_comment


comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/posts/<int:post_id>/comments", methods=["POST"])
@jwt_required()
def create_comment(post_id):
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    comment = add_comment(
        actor_id=actor_id,
        post_id=post_id,
        text=data.get("text")
    )
    return jsonify({"comment": CommentSchema().dump(comment)}), 200
