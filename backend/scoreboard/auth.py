"""Request authorization for the mutating endpoints.

Flask-Login's request loader turns the bearer token on each request into a
TokenUser; ``admin_required`` then lets the view run only for admin claims.
"""
from functools import wraps

from flask import current_app, g, request
from flask_login import UserMixin, current_user

from scoreboard import login_manager
from scoreboard.errors import AuthError
from scoreboard.services.tokens import get_token_service

MISSING_TOKEN = 'You must be authorized to hit this endpoint.'
NOT_ADMIN = 'Invalid request credentials'


class TokenUser(UserMixin):
    def __init__(self, claims):
        self.claims = claims

    @property
    def email(self):
        return self.claims.get('email')

    @property
    def app_name(self):
        return self.claims.get('appName')

    @property
    def is_admin(self):
        return self.claims.get('admin') is True

    def get_id(self):
        return self.email


def extract_token(req):
    """Body field first, then query string, then the Authorization header."""
    body = req.get_json(silent=True)
    if isinstance(body, dict) and body.get('token'):
        return body['token']
    if req.form.get('token'):
        return req.form['token']
    if req.args.get('token'):
        return req.args['token']
    header = req.headers.get('Authorization', '').strip()
    if header.lower().startswith('bearer '):
        header = header[7:].strip()
    return header or None


@login_manager.request_loader
def load_user_from_request(req):
    token = extract_token(req)
    if not token:
        g.auth_error = MISSING_TOKEN
        return None
    try:
        claims = get_token_service().verify(token)
    except AuthError as exc:
        current_app.logger.info(f"[auth-invalid] path={req.path} reason={exc.__cause__!r}")
        g.auth_error = exc.message
        return None
    return TokenUser(claims)


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            reason = g.get('auth_error', MISSING_TOKEN)
            current_app.logger.warning(f"[auth-deny] path={request.path} reason={reason}")
            raise AuthError(reason)
        if not current_user.is_admin:
            current_app.logger.warning(f"[auth-deny] path={request.path} email={current_user.email} reason=not-admin")
            raise AuthError(NOT_ADMIN)
        return view(*args, **kwargs)
    return wrapper
