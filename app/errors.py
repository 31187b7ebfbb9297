import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException


logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = 400


class AuthorizationError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class ServerError(ApiError):
    status_code = 500


class MediaStorageError(ServerError):
    pass


def error_response(message: str, status_code: int):
    return jsonify({"error": message}), status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError):
        if error.status_code >= 500:
            logger.error("%s: %s", type(error).__name__, error.message, exc_info=error)
            return error_response("Server Error", error.status_code)
        return error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception("Unhandled error: %s", error)
        return error_response("Server Error", 500)
