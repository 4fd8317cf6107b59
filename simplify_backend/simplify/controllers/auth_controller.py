from flask import Blueprint, request, jsonify

from ..auth import role_required
from ..services.user_service import UserService, get_profile

auth_blueprint = Blueprint('auth_blueprint', __name__)


@auth_blueprint.route('/register', methods=['POST'])
def register_user():
    user, login_token = UserService().register(request.get_json(silent=True))
    return jsonify(
        success=True,
        message="Account created successfully",
        user_id=user.id,
        login_token=login_token,
        role=user.role,
    ), 201


@auth_blueprint.route('/login', methods=['POST'])
def login_user():
    user, login_token = UserService().login(request.get_json(silent=True))
    return jsonify(
        success=True,
        message="Login successful",
        login_token=login_token,
        role=user.role,
        name=user.name,
    ), 200


@auth_blueprint.route('/me', methods=['GET'])
@role_required()
def me(user):
    return jsonify(success=True, user=get_profile(user)), 200


@auth_blueprint.route('/logout', methods=['POST'])
@role_required()
def logout(user):
    # Every token issued so far carries the old login id and stops resolving
    UserService().rotate_login_id(user)
    return jsonify(success=True, message="Logged out"), 200
