"""
Shared fixtures: a fresh app on an in-memory SQLite database per test,
registered accounts, and a notifier that records instead of queueing mail.
"""

import pytest

from simplify import create_app, db
from simplify.config import TestingConfig
from simplify.services.assignment_service import AssignmentService
from simplify.services.project_service import ProjectService
from simplify.services.submission_service import SubmissionService
from simplify.services.user_service import UserService


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def student_assigned(self, student, project):
        self.sent.append(("student_assigned", student.email, project.name))

    def submission_reviewed(self, student, milestone, status):
        self.sent.append(("submission_reviewed", student.email, milestone.title, status))

    def report_submitted(self, name, email, category, description):
        self.sent.append(("report_submitted", email, category))


class BrokenNotifier:
    def student_assigned(self, student, project):
        raise ConnectionError("broker unreachable")

    def submission_reviewed(self, student, milestone, status):
        raise ConnectionError("broker unreachable")


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def users(app):
    return UserService(db.session)


@pytest.fixture
def projects(app):
    return ProjectService(db.session)


@pytest.fixture
def assignments(app, notifier):
    return AssignmentService(db.session, notifier=notifier)


@pytest.fixture
def submissions(app, notifier):
    return SubmissionService(db.session, notifier=notifier)


@pytest.fixture
def register(users):
    """Registers an account and returns (user, login_token)."""
    def _register(name, email, role, password="secret123", **extra):
        return users.register(dict(name=name, email=email, password=password, role=role, **extra))
    return _register


@pytest.fixture
def acme(register):
    return register("Acme", "acme@example.com", "organization")


@pytest.fixture
def globex(register):
    return register("Globex", "globex@example.com", "organization")


@pytest.fixture
def sam(register):
    return register("Sam", "sam@example.com", "student", collegeName="State College", skills="HTML, CSS")


@pytest.fixture
def alex(register):
    return register("Alex", "alex@example.com", "student")


@pytest.fixture
def landing_page(projects, acme):
    org, _ = acme
    return projects.create_project(org, {
        "project_name": "Landing Page",
        "deadline": "2026-12-31",
        "milestones": [
            {"title": "Design", "price": 50},
            {"title": "Build", "price": 150, "description": "Implement the design"},
        ],
    })


@pytest.fixture
def sam_assigned(assignments, acme, sam, landing_page):
    """Sam applied to Landing Page and Acme assigned them."""
    org, _ = acme
    student, _ = sam
    assignments.apply(student, {"project_id": landing_page.id})
    return assignments.assign(org, landing_page.id, {"student_id": student.id})


def auth(token):
    return {"X-Login-Id": token}


@pytest.fixture
def headers():
    return auth
