from flask import Blueprint, current_app, jsonify, request

from scoreboard.auth import admin_required
from scoreboard.errors import NotFoundError, ValidationError
from scoreboard.services import store
from scoreboard.validators import json_body, pick, require_fields

records = Blueprint('records', __name__)

UPDATABLE_FIELDS = ('handle', 'rank', 'time')


@records.route('', methods=['GET'])
def list_records():
    game_id = request.args.get('game_id', type=int)
    if game_id is None and request.args.get('game_id'):
        raise ValidationError('game_id must be an integer.')
    return jsonify([r.to_dict() for r in store.list_records(game_id=game_id)]), 200


@records.route('/<int:record_id>', methods=['GET'])
def get_record(record_id):
    record = store.get_record(record_id)
    if record is None:
        raise NotFoundError(f'Unable to locate record with id of {record_id}')
    return jsonify(record.to_dict()), 200


@records.route('/<int:record_id>', methods=['PATCH'])
@admin_required
def update_record(record_id):
    fields = pick(json_body(), UPDATABLE_FIELDS)
    if not fields:
        raise ValidationError('Expected at least one of handle, rank, time.')
    require_fields(fields, fields.keys())
    record = store.update_record(record_id, fields)
    if record is None:
        raise NotFoundError(f'No resource with an id of {record_id} was found.', status_code=422)
    current_app.logger.info(f"[record-update] id={record_id} fields={sorted(fields)}")
    return jsonify(record.to_dict()), 200


@records.route('/<int:record_id>', methods=['DELETE'])
@admin_required
def delete_record(record_id):
    if not store.delete_record(record_id):
        raise NotFoundError(f'No resource with an id of {record_id} was found.', status_code=422)
    current_app.logger.info(f"[record-delete] id={record_id}")
    return '', 204
