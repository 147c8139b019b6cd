from flask_jwt_extended import get_jwt_identity
from flask_jwt_extended.exceptions import NoAuthorizationError


def current_user_id():
    """User id carried in the ``sub`` claim of the request's verified token.

    Must be called inside a ``jwt_required`` view.
    """
    identity = get_jwt_identity()
    try:
        return int(identity)
    except (TypeError, ValueError):
        raise NoAuthorizationError("Token does not identify a user")
