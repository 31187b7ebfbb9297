from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from app.schemas.user_schema import UserSchema, UserSummarySchema
from app.services import auth_service, follow_service, profile_service


profile_bp = Blueprint("profiles", __name__)

_UPDATE_FIELDS = (
    "username",
    "full_name",
    "email",
    "bio",
    "link",
    "current_password",
    "new_password",
)
_IMAGE_FIELDS = ("profile_image", "cover_image")


@profile_bp.route("/users/suggested", methods=["GET"])
@jwt_required()
def suggested_users():
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())
    users = follow_service.get_suggested_users(actor_id)
    return jsonify(UserSchema(many=True).dump(users)), 200


@profile_bp.route("/users/search", methods=["GET"])
def search_users():
    users = profile_service.search_users(request.args.get("q"))
    return jsonify(UserSummarySchema(many=True).dump(users)), 200


@profile_bp.route("/users/me", methods=["PATCH"])
@jwt_required()
def update_my_profile():
    actor_id = auth_service.resolve_actor_id(get_jwt_identity())

    content_type = (request.content_type or "").lower()
    if "multipart/form-data" in content_type:
        fields = {name: request.form.get(name) for name in _UPDATE_FIELDS}
        for name in _IMAGE_FIELDS:
            fields[name] = request.files.get(name) or request.form.get(name)
    else:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Invalid JSON body"}), 400
        fields = {name: data.get(name) for name in _UPDATE_FIELDS + _IMAGE_FIELDS}

    user = profile_service.update_profile(actor_id, **fields)
    return jsonify(UserSchema().dump(user)), 200


@profile_bp.route("/users/<username>", methods=["GET"])
def get_profile(username):
    return jsonify(UserSchema().dump(profile_service.get_profile(username))), 200
