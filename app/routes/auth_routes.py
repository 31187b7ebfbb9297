from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from app.schemas.user_schema import UserSchema
from app.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    user = auth_service.register(
        data.get("username"),
        data.get("full_name"),
        data.get("email"),
        data.get("password"),
    )
    return jsonify(UserSchema().dump(user)), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    tokens = auth_service.login(
        data.get("username"),
        data.get("password")
    )
    return jsonify(tokens), 200


@auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh_token():
    return jsonify(auth_service.refresh_access_token(get_jwt_identity())), 200
