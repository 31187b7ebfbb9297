from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from app.schemas.post_schema import PostSchema
from app.services import auth_service, post_service

post_bp = Blueprint("posts", __name__)

post_schema = PostSchema()
posts_schema = PostSchema(many=True)


@post_bp.route("/posts", methods=["POST"])
@jwt_required()
def create_post():
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())

    content_type = (request.content_type or "").lower()
    media = None

    if "multipart/form-data" in content_type:
        text = request.form.get("text")
        media = (
            request.files.get("media")
            or request.files.get("file")
            or request.files.get("image")
            or request.files.get("video")
        )
    else:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Invalid JSON body"}), 400
        text = data.get("text")
        media = data.get("media") or None

    post = post_service.create_post(actor_id, text=text, media_file=media)
    return jsonify(post_schema.dump(post)), 200


@post_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id):
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())

    deleted_id = post_service.delete_post(actor_id, post_id)
    return jsonify({"message": "Post deleted successfully", "id": deleted_id}), 200


@post_bp.route("/posts", methods=["GET"])
def list_posts():
    return jsonify(posts_schema.dump(post_service.get_all_posts())), 200


@post_bp.route("/feed", methods=["GET"])
@jwt_required()
def following_feed():
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())
    return jsonify(posts_schema.dump(post_service.get_following_posts(actor_id))), 200


@post_bp.route("/users/<username>/posts", methods=["GET"])
def list_user_posts(username):
    return jsonify(posts_schema.dump(post_service.get_user_posts(username))), 200


@post_bp.route("/users/<int:user_id>/liked", methods=["GET"])
def list_liked_posts(user_id):
    return jsonify(posts_schema.dump(post_service.get_liked_posts(user_id))), 200
