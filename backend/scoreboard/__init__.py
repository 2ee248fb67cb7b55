from flask import Flask, jsonify, redirect, request
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
import click
from scoreboard.config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()

API_PREFIX = '/api/v1'

SEED_GAMES = [
    {'game_title': 'Pong', 'game_image': None, 'records': [
        {'handle': 'AAA', 'rank': 1, 'time': '00:41.20'},
        {'handle': 'BRK', 'rank': 2, 'time': '00:44.05'},
    ]},
    {'game_title': 'Tetris', 'game_image': None, 'records': [
        {'handle': 'TET', 'rank': 1, 'time': '07:12.88'},
    ]},
    {'game_title': 'Galaga', 'game_image': None, 'records': []},
]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    from scoreboard.services.tokens import TokenService
    # Fails fast when no signing secret is configured
    flask_app.extensions['token_service'] = TokenService.from_config(flask_app.config)

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    from scoreboard.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Registers the request loader on login_manager
    import scoreboard.auth  # noqa: F401

    if flask_app.config.get('FORCE_HTTPS'):
        @flask_app.before_request
        def https_redirect():
            if request.headers.get('X-Forwarded-Proto', 'http') != 'https':
                return redirect(request.url.replace('http://', 'https://', 1), code=302)

    @flask_app.route('/')
    def index():
        return jsonify({'message': f"{flask_app.config.get('APP_TITLE')} is running"})

    from scoreboard.api.auth import auth
    flask_app.register_blueprint(auth, url_prefix=API_PREFIX)

    from scoreboard.api.games import games
    flask_app.register_blueprint(games, url_prefix=f'{API_PREFIX}/games')

    from scoreboard.api.records import records
    flask_app.register_blueprint(records, url_prefix=f'{API_PREFIX}/records')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from scoreboard.models import Game, Record
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            for entry in SEED_GAMES:
                game = Game(game_title=entry['game_title'], game_image=entry['game_image'])
                db.session.add(game)
                db.session.flush()
                for r in entry['records']:
                    db.session.add(Record(game_id=game.id, **r))

            db.session.commit()
            click.echo('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
