from functools import wraps

from flask import current_app, g, jsonify, session

from parking_violations.constants import L10N

SESSION_USER_KEY = 'user_id'


def login_required(view):
    """Reject the request with a 401 unless a user is logged in; the user is
    made available as g.user.
    """
    @wraps(view)
    def wrapped_view(*args, **kwargs):
        user = current_app.extensions['auth_service'].get_user(
            session.get(SESSION_USER_KEY))

        if user is None:
            return jsonify({'error': L10N.UNAUTHORIZED_STRING}), 401

        g.user = user

        return view(*args, **kwargs)

    return wrapped_view
