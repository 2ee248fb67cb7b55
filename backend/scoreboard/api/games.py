from flask import Blueprint, current_app, jsonify

from scoreboard.auth import admin_required
from scoreboard.errors import NotFoundError, ValidationError
from scoreboard.services import store
from scoreboard.validators import json_body, pick, require_fields

games = Blueprint('games', __name__)

GAME_FIELDS = ('game_title', 'game_image')
RECORD_FIELDS = ('handle', 'rank', 'time', 'game_id')


@games.route('', methods=['GET'])
def list_games():
    return jsonify([g.to_dict() for g in store.list_games()]), 200


@games.route('/<int:game_id>', methods=['GET'])
def get_game(game_id):
    game = store.get_game(game_id)
    if game is None:
        raise NotFoundError(f'Unable to locate game with id of {game_id}')
    return jsonify(game.to_dict()), 200


@games.route('/<int:game_id>/records', methods=['GET'])
def list_game_records(game_id):
    if store.get_game(game_id) is None:
        raise NotFoundError(f'Unable to locate game record with id of {game_id}')
    records = store.list_records(game_id=game_id)
    return jsonify([r.to_dict() for r in records]), 200


@games.route('', methods=['POST'])
@admin_required
def create_game():
    data = json_body()
    require_fields(data, ('game_title',))
    game = store.insert_game(data['game_title'], data.get('game_image'))
    current_app.logger.info(f"[game-create] id={game.id} title={game.game_title!r}")
    return jsonify(game.to_dict()), 201


@games.route('/<int:game_id>/records', methods=['POST'])
@admin_required
def create_game_record(game_id):
    data = json_body()
    require_fields(data, RECORD_FIELDS)
    if str(data['game_id']) != str(game_id):
        raise ValidationError(f'game_id {data["game_id"]} does not match the game in the URL ({game_id}).')
    if store.get_game(game_id) is None:
        raise ValidationError(f'No game with an id of {game_id} was found.')
    record = store.insert_record(data['handle'], data['rank'], data['time'], game_id)
    current_app.logger.info(f"[record-create] id={record.id} game={game_id} handle={record.handle!r}")
    return jsonify(record.to_dict()), 201


@games.route('/<int:game_id>', methods=['PATCH'])
@admin_required
def update_game(game_id):
    fields = pick(json_body(), GAME_FIELDS)
    if not fields:
        raise ValidationError('Expected at least one of game_title, game_image.')
    if 'game_title' in fields:
        require_fields(fields, ('game_title',))
    game = store.update_game(game_id, fields)
    if game is None:
        raise NotFoundError(f'No resource with an id of {game_id} was found.', status_code=422)
    current_app.logger.info(f"[game-update] id={game_id} fields={sorted(fields)}")
    return jsonify(game.to_dict()), 200


@games.route('/<int:game_id>', methods=['DELETE'])
@admin_required
def delete_game(game_id):
    removed = store.delete_game(game_id)
    if removed is None:
        raise NotFoundError(f'No resource with an id of {game_id} was found.', status_code=422)
    current_app.logger.info(f"[game-delete] id={game_id} records_removed={removed}")
    return '', 204
