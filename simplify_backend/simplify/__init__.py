import sqlite3

from flask import Flask, request
from flask_sqlalchemy import SQLAlchemy
from flask_marshmallow import Marshmallow
from flask_bcrypt import Bcrypt
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_mail import Mail
from sqlalchemy import event
from sqlalchemy.engine import Engine


db = SQLAlchemy()
ma = Marshmallow()
bcrypt = Bcrypt()
mail = Mail()
jwt = JWTManager()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_app(config_object="simplify.config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    mail.init_app(app)
    bcrypt.init_app(app)
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)

    from .tasks import celery_init_app
    celery_init_app(app)

    from .errors import register_error_handlers
    from .auth import register_jwt_callbacks
    register_error_handlers(app)
    register_jwt_callbacks(jwt)

    @app.before_request
    def log_request():
        app.logger.debug("%s %s", request.method, request.path)

    with app.app_context():
        from .controllers.auth_controller import auth_blueprint
        from .controllers.organization_controller import organization_blueprint
        from .controllers.student_controller import student_blueprint
        from .controllers.admin_controller import admin_blueprint
        app.register_blueprint(auth_blueprint, url_prefix="/auth")
        app.register_blueprint(organization_blueprint, url_prefix="/organization")
        app.register_blueprint(organization_blueprint, url_prefix="/org", name="org")
        app.register_blueprint(student_blueprint, url_prefix="/student")
        app.register_blueprint(admin_blueprint, url_prefix="/admin")

        from .cli import register_commands
        register_commands(app)

        db.create_all()

    return app
