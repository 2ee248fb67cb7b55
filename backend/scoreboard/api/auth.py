from flask import Blueprint, current_app, jsonify

from scoreboard.services.tokens import get_token_service
from scoreboard.validators import json_body, require_fields

auth = Blueprint('auth', __name__)


@auth.route('/authenticate', methods=['POST'])
def authenticate():
    data = json_body()
    require_fields(
        data, ('email', 'appName'),
        message='Expected format of { email: <string>, appName: <string> }. You are missing a {field} property',
    )
    service = get_token_service()
    email, app_name = str(data['email']), str(data['appName'])
    claims = service.claims(email, app_name)
    token = service.sign(claims)
    current_app.logger.info(f"[auth-issue] email={email} app={app_name} admin={claims['admin']}")
    return jsonify({'token': token}), 201
