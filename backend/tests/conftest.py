import os
import sys
import secrets
import pytest

# Ensure the backend root (containing the `scoreboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreboard import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    # Fresh signing secret per run so no token outlives the session
    JWT_SECRET = secrets.token_hex(32)
    JWT_ALGORITHM = 'HS256'
    TOKEN_LIFETIME_SEC = 2 * 24 * 60 * 60
    ADMIN_EMAIL_DOMAIN = 'turing.io'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    FORCE_HTTPS = False
    APP_TITLE = 'Build Your Own Backend'
    CORS_ORIGINS = ['http://localhost:3000']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import scoreboard.models  # noqa: F401
        db.create_all()
    # Each test request gets its own app context, so the per-request user
    # cached on `g` never leaks between requests
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def _token_for(client, email):
    res = client.post('/api/v1/authenticate', json={'email': email, 'appName': 'tests'})
    assert res.status_code == 201
    return res.get_json()['token']


@pytest.fixture()
def admin_headers(client):
    return {'Authorization': f"Bearer {_token_for(client, 'admin@turing.io')}"}


@pytest.fixture()
def user_headers(client):
    return {'Authorization': f"Bearer {_token_for(client, 'player@example.com')}"}


@pytest.fixture()
def seeded(client, admin_headers):
    """Two games, each with a couple of records."""
    pong = client.post('/api/v1/games', json={'game_title': 'Pong'}, headers=admin_headers).get_json()
    tetris = client.post('/api/v1/games', json={'game_title': 'Tetris', 'game_image': 'tetris.png'},
                         headers=admin_headers).get_json()
    rows = [
        (pong, 'AAA', 2, '00:44.05'),
        (pong, 'BRK', 1, '00:41.20'),
        (tetris, 'TET', 1, '07:12.88'),
    ]
    created = []
    for game, handle, rank, time in rows:
        res = client.post(f"/api/v1/games/{game['id']}/records",
                          json={'handle': handle, 'rank': rank, 'time': time, 'game_id': game['id']},
                          headers=admin_headers)
        assert res.status_code == 201
        created.append(res.get_json())
    return {'pong': pong, 'tetris': tetris, 'records': created}
