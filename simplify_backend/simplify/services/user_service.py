import datetime

from flask import current_app
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy.exc import IntegrityError

from .. import db, bcrypt
from ..auth import ROLE_ADMIN, ROLE_STUDENT
from ..errors import Conflict, InvalidArgument, Unauthorized
from ..models.user_model import User, new_login_id
from ..schemas.input_schema import load_input
from ..schemas.user_schema import login_schema, register_schema


INVALID_CREDENTIALS = "Invalid email or password"

_dummy_hash = None


def _hash_password(password):
    return bcrypt.generate_password_hash(password).decode('utf-8')


def _dummy_password_hash():
    # checked for unknown emails so both login failures cost one bcrypt round
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = _hash_password(new_login_id())
    return _dummy_hash


def issue_login_token(user):
    return create_access_token(identity=user.login_id, additional_claims={"role": user.role})


class UserService:
    def __init__(self, session=None):
        self.session = session or db.session

    def get_user_by_email(self, email):
        return self.session.query(User).filter_by(email=email.strip().lower()).first()

    def get_user_by_login_id(self, login_id):
        return self.session.query(User).filter_by(login_id=login_id).first()

    def register(self, data):
        """
        Creates a student or organization account.

        :return: (user, login_token)
        """
        fields = load_input(register_schema, data)
        email = fields['email'].strip().lower()

        if self.get_user_by_email(email):
            raise Conflict("Email already registered")

        is_student = fields['role'] == ROLE_STUDENT
        new_user = User(
            login_id=new_login_id(),
            name=fields['name'].strip(),
            email=email,
            password=_hash_password(fields['password']),
            role=fields['role'],
            college_name=fields['college_name'] if is_student else None,
            skills=fields['skills'] if is_student else None,
        )
        self.session.add(new_user)
        try:
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            raise Conflict("Email already registered") from err

        current_app.logger.info("Registered %s user %s", new_user.role, new_user.id)
        return new_user, issue_login_token(new_user)

    def login(self, data):
        """:return: (user, login_token)"""
        fields = load_input(login_schema, data)
        user = self.get_user_by_email(fields['email'])

        if user is None:
            bcrypt.check_password_hash(_dummy_password_hash(), fields['password'])
            raise Unauthorized(INVALID_CREDENTIALS)
        if not bcrypt.check_password_hash(user.password, fields['password']):
            raise Unauthorized(INVALID_CREDENTIALS)

        user.last_login_at = datetime.datetime.utcnow()
        self.session.commit()
        return user, issue_login_token(user)

    def resolve(self, login_token):
        """Returns the user a login token belongs to, or None for a bad, expired or revoked token."""
        if not login_token:
            return None
        try:
            payload = decode_token(login_token)
        except (JWTExtendedException, PyJWTError):
            return None
        return self.get_user_by_login_id(payload["sub"])

    def rotate_login_id(self, user):
        user.login_id = new_login_id()
        self.session.commit()
        current_app.logger.info("Rotated login id for user %s", user.id)

    def create_admin(self, name, email, password):
        if not name or not email or not password:
            raise InvalidArgument("Missing required fields")
        email = email.strip().lower()
        if self.get_user_by_email(email):
            raise Conflict("Email already registered")

        admin = User(
            login_id=new_login_id(),
            name=name,
            email=email,
            password=_hash_password(password),
            role=ROLE_ADMIN,
        )
        self.session.add(admin)
        self.session.commit()
        return admin


def get_profile(user):
    profile = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "created_at": user.created_at.strftime("%Y-%m-%d %H:%M:%S"),
    }
    if user.role == ROLE_STUDENT:
        profile["college_name"] = user.college_name
        profile["skills"] = user.skills
    return profile
