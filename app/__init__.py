import logging

from flask import Flask

from app.config import Config
from app.db import db
from app.errors import error_response, register_error_handlers
from app.extensions.extensions import cors, jwt, ma


def _configure_logging(app):
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))


def _register_jwt_handlers():
    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response(reason, 401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response(reason, 401)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response("Token has expired", 401)


def _register_blueprints(app):
    from app.routes.auth_routes import auth_bp
    from app.routes.post_routes import post_bp
    from app.routes.comment_routes import comment_bp
    from app.routes.like_routes import like_bp
    from app.routes.follow_routes import follow_bp
    from app.routes.profile_routes import profile_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(like_bp, url_prefix="/api")
    app.register_blueprint(follow_bp, url_prefix="/api")
    app.register_blueprint(profile_bp, url_prefix="/api")


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ALLOWED_ORIGINS"]}},
        supports_credentials=True,
    )
    _register_jwt_handlers()
    register_error_handlers(app)
    _register_blueprints(app)

    with app.app_context():
        # Tables must be registered on the metadata before create_all.
        from app import models  # noqa: F401
        db.create_all()

    return app
