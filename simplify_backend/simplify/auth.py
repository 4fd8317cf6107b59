from functools import wraps

from flask_jwt_extended import get_current_user, verify_jwt_in_request

from .errors import Forbidden, NotFound, error_response
from .models.user_model import User


ROLE_STUDENT = "student"
ROLE_ORGANIZATION = "organization"
ROLE_ADMIN = "admin"


def ensure_role(user, *roles):
    if user is None or user.role not in roles:
        raise Forbidden("Permission denied")


def role_required(*roles, owns=None, missing="Not found"):
    """
    Guard for routes that need a logged-in caller.

    :param roles: roles allowed to call the route; empty means any role.
    :param owns: optional predicate ``owns(user, **view_args) -> bool``
        checked after the role. A failing predicate reports NotFound so that
        another organization's resources are indistinguishable from missing
        ones.
    :param missing: message of that NotFound.
    """
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            user = get_current_user()
            if roles:
                ensure_role(user, *roles)
            if owns is not None and not owns(user, **kwargs):
                raise NotFound(missing)
            return fn(user, *args, **kwargs)
        return decorator
    return wrapper


def register_jwt_callbacks(jwt):
    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_data):
        return User.query.filter_by(login_id=jwt_data["sub"]).one_or_none()

    @jwt.user_lookup_error_loader
    def user_lookup_error(jwt_header, jwt_data):
        return error_response("Not logged in", 401)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response("Not logged in", 401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response("Invalid login token", 401)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_data):
        return error_response("Session expired", 401)
