"""Issue and verify the signed bearer tokens handed out by /authenticate.

Tokens are stateless: nothing is persisted, so expiry is the only bound on a
token's lifetime and rotating the secret invalidates every issued token.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from flask import current_app

from scoreboard.errors import AuthError


class TokenService:
    def __init__(self, secret: str, admin_domain: str = 'turing.io',
                 lifetime: timedelta = timedelta(days=2), algorithm: str = 'HS256'):
        if not secret:
            raise ValueError('A token signing secret is required')
        self.secret = secret
        self.admin_domain = admin_domain
        self.lifetime = lifetime
        self.algorithm = algorithm

    @classmethod
    def from_config(cls, config) -> 'TokenService':
        return cls(
            secret=config.get('JWT_SECRET'),
            admin_domain=config.get('ADMIN_EMAIL_DOMAIN', 'turing.io'),
            lifetime=timedelta(seconds=int(config.get('TOKEN_LIFETIME_SEC', 2 * 24 * 60 * 60))),
            algorithm=config.get('JWT_ALGORITHM', 'HS256'),
        )

    def is_admin_email(self, email: str) -> bool:
        local, sep, domain = email.rpartition('@')
        return bool(sep and local) and domain == self.admin_domain

    def claims(self, email: str, app_name: str, issued_at: Optional[datetime] = None) -> dict:
        issued_at = issued_at or datetime.now(timezone.utc)
        return {
            'email': email,
            'appName': app_name,
            'admin': self.is_admin_email(email),
            'iat': issued_at,
            'exp': issued_at + self.lifetime,
        }

    def sign(self, claims: dict) -> str:
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def issue(self, email: str, app_name: str, issued_at: Optional[datetime] = None) -> str:
        return self.sign(self.claims(email, app_name, issued_at))

    def verify(self, token: str) -> dict:
        """Return the decoded claims, or raise AuthError for a bad or expired token."""
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            raise AuthError('Invalid token.') from exc


def get_token_service() -> TokenService:
    return current_app.extensions['token_service']
