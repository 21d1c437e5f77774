import logging

from flask import Blueprint, current_app, jsonify, request, session

from parking_violations.constants import L10N
from parking_violations.services.constants.exceptions import \
    RegistrationException
from parking_violations.web.auth import SESSION_USER_KEY

LOG = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@auth_bp.route('/register', methods=['POST'])
def register():
    payload = request.get_json(silent=True) or {}

    try:
        user = current_app.extensions['auth_service'].register(
            email=payload.get('email'),
            password=payload.get('password'),
            first_name=payload.get('firstName'),
            last_name=payload.get('lastName'))
    except RegistrationException as exc:
        return jsonify({'error': str(exc)}), 400

    session.clear()
    session[SESSION_USER_KEY] = user.id

    return jsonify({'user': user.to_dict()}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    payload = request.get_json(silent=True) or {}

    user = current_app.extensions['auth_service'].authenticate(
        email=payload.get('email'),
        password=payload.get('password'))

    if user is None:
        return jsonify({'error': L10N.INVALID_CREDENTIALS_STRING}), 401

    session.clear()
    session[SESSION_USER_KEY] = user.id

    return jsonify({'user': user.to_dict()})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()

    return jsonify({'message': L10N.LOGGED_OUT_STRING})


@auth_bp.route('/session')
def current_session():
    user = current_app.extensions['auth_service'].get_user(
        session.get(SESSION_USER_KEY))

    return jsonify({'user': user.to_dict() if user else None})
