import html

from flask import current_app

from .tasks import send_email


def notify_safely(notify, *args, **kwargs):
    """
    Runs a notifier call after the caller's transaction has committed.

    Queueing problems (for example an unreachable broker) are logged and
    never raised, so a notification can not fail the operation that
    triggered it.
    """
    try:
        notify(*args, **kwargs)
    except Exception:
        current_app.logger.exception("Could not queue notification %s", getattr(notify, "__name__", notify))


class Notifier:
    """Builds outbound emails and queues them on the Celery worker."""

    def dispatch(self, subject, recipients, body, reply_to=None, html_body=None):
        send_email.delay(subject, recipients, body, reply_to=reply_to, html=html_body)

    def report_submitted(self, name, email, category, description):
        subject = f"New Report from {name}: {category}"
        body = f"""
A new problem has been reported on Simplify.

Name: {name}
Email: {email}
Category: {category}

Description:
{description}
"""
        html_body = (
            "<h2>New Problem Reported on Simplify</h2>"
            f"<p><strong>Name:</strong> {html.escape(name)}</p>"
            f"<p><strong>Email:</strong> {html.escape(email)}</p>"
            f"<p><strong>Category:</strong> {html.escape(category)}</p>"
            "<p><strong>Description:</strong></p>"
            f"<p>{html.escape(description).replace(chr(10), '<br>')}</p>"
        )
        self.dispatch(subject, [current_app.config['ADMIN_EMAIL']], body,
                      reply_to=email, html_body=html_body)

    def student_assigned(self, student, project):
        subject = "Project Assignment Notification - Simplify"
        body = f"""
Hello {student.name},

You have been assigned to the project "{project.name}" on Simplify.

Please log in to your account to start working on its milestones.

Regards,
Simplify Team
"""
        self.dispatch(subject, [student.email], body)

    def submission_reviewed(self, student, milestone, status):
        subject = f"Milestone {status} - Simplify"
        body = f"""
Hello {student.name},

Your submission for the milestone "{milestone.title}" has been {status}.

Regards,
Simplify Team
"""
        self.dispatch(subject, [student.email], body)
