import os
from datetime import timedelta


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///simplify.sqlite3')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session tokens: signed JWTs whose subject is the user's login_id
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY', 'change-this-secret-key')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get('SESSION_HOURS', '12')))
    JWT_TOKEN_LOCATION = ['headers', 'cookies', 'query_string', 'json']
    JWT_HEADER_NAME = 'X-Login-Id'
    JWT_HEADER_TYPE = ''
    JWT_ACCESS_COOKIE_NAME = 'login_id'
    JWT_QUERY_STRING_NAME = 'login_id'
    JWT_JSON_KEY = 'login_id'
    JWT_COOKIE_CSRF_PROTECT = False

    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', '587'))
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS', True)
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER', 'noreply@simplify.local')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@simplify.local')

    CELERY = {
        'broker_url': os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0'),
        'result_backend': os.environ.get('CELERY_RESULT_BACKEND', 'redis://localhost:6379/0'),
        'task_ignore_result': True,
        'task_always_eager': _env_flag('CELERY_TASK_ALWAYS_EAGER'),
    }

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    JWT_SECRET_KEY = 'testing-secret-key-with-enough-length'
    MAIL_SUPPRESS_SEND = True
    BCRYPT_LOG_ROUNDS = 4
    CELERY = {
        'broker_url': 'memory://',
        'result_backend': 'cache+memory://',
        'task_ignore_result': True,
        'task_always_eager': True,
    }
