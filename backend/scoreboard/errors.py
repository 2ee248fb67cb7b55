"""Error types raised by handlers and the persistence layer.

Each carries the HTTP status it maps to; ``register_error_handlers`` renders
them (and Werkzeug's own HTTP errors) as ``{"error": message}`` bodies.
"""
from flask import jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': self.message}


class ValidationError(ApiError):
    """A required field is missing or a body is unusable."""
    status_code = 422


class AuthError(ApiError):
    """Missing, invalid or non-admin token."""
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class StoreError(ApiError):
    """Failure inside the database; message is passed through verbatim."""
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        if exc.status_code >= 500:
            app.logger.error(f"[api-error] status={exc.status_code} error={exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'error': exc.description}), exc.code
