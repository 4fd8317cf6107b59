from celery import Celery, Task, shared_task
from flask import current_app
from flask_mail import Message

from . import mail


def celery_init_app(app):
    class FlaskTask(Task):
        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    celery_app = Celery(app.name, task_cls=FlaskTask)
    celery_app.config_from_object(app.config["CELERY"])
    celery_app.set_default()
    app.extensions["celery"] = celery_app
    return celery_app


@shared_task(ignore_result=True, name="simplify.tasks.send_email")
def send_email(subject, recipients, body, reply_to=None, html=None):
    """Sends one email; delivery failures are logged and dropped."""
    msg = Message(subject, recipients=recipients, reply_to=reply_to)
    msg.body = body
    msg.html = html
    try:
        mail.send(msg)
        current_app.logger.info("Email sent to %s", ", ".join(recipients))
    except Exception:
        current_app.logger.exception("Failed to send email %r", subject)
