import uuid

from flask import current_app

from .. import db
from ..auth import ROLE_ADMIN, ensure_role
from ..errors import NotFound
from ..models.catalog_model import Course, GigBook, TrialProject
from ..schemas.catalog_schema import course_input_schema, gig_book_input_schema, trial_project_input_schema
from ..schemas.input_schema import load_input


# URL slug on the student blueprint -> stored course category
COURSE_CATEGORIES = {
    'webdev-courses': 'webdev',
    'cyber-courses': 'cyber',
    'data-analytics-courses': 'data-analytics',
    'data-science-courses': 'data-science',
    'aiml-courses': 'ai-ml',
    'softwaredev-courses': 'software-dev',
}


def _unique_code(prefix):
    return f"{prefix}_{uuid.uuid4().hex[:12].upper()}"


class CatalogService:
    def __init__(self, session=None):
        self.session = session or db.session

    def list_courses(self, category, include_inactive=False):
        query = self.session.query(Course).filter_by(category=category)
        if not include_inactive:
            query = query.filter_by(is_active=True)
        return query.order_by(Course.created_at.desc(), Course.id.desc()).all()

    def list_gig_books(self):
        return self.session.query(GigBook).order_by(GigBook.title.asc()).all()

    def list_trial_projects(self):
        return (self.session.query(TrialProject)
                .order_by(TrialProject.created_at.desc(), TrialProject.id.desc())
                .all())

    def add_course(self, admin, data):
        ensure_role(admin, ROLE_ADMIN)
        fields = load_input(course_input_schema, data)
        course = Course(
            code=_unique_code("ADMIN"),
            title=fields['title'],
            short_description=fields['description'],
            category=fields['category'],
            organization=fields['organization'],
            level=fields['level'],
            duration=fields['duration'],
            external_url=fields['external_url'],
        )
        self.session.add(course)
        self.session.commit()
        current_app.logger.info("Admin %s added course %s", admin.id, course.id)
        return course

    def add_gig_book(self, admin, data):
        ensure_role(admin, ROLE_ADMIN)
        fields = load_input(gig_book_input_schema, data)
        book = GigBook(**fields)
        self.session.add(book)
        self.session.commit()
        return book

    def add_trial_project(self, admin, data):
        ensure_role(admin, ROLE_ADMIN)
        fields = load_input(trial_project_input_schema, data)
        trial = TrialProject(
            code=_unique_code("TRIAL"),
            title=fields['title'],
            short_description=fields['description'],
            domain=fields['domain'],
            skills_required=fields['skills'],
            difficulty=fields['difficulty'],
            estimated_hours=fields['estimated_hours'],
            budget_range=fields['budget_range'],
        )
        self.session.add(trial)
        self.session.commit()
        return trial

    def _delete(self, admin, model, item_id):
        ensure_role(admin, ROLE_ADMIN)
        item = self.session.get(model, item_id)
        if item is None:
            raise NotFound(f"{model.__name__} not found")
        self.session.delete(item)
        self.session.commit()

    def delete_course(self, admin, course_id):
        self._delete(admin, Course, course_id)

    def delete_gig_book(self, admin, book_id):
        self._delete(admin, GigBook, book_id)

    def delete_trial_project(self, admin, trial_id):
        self._delete(admin, TrialProject, trial_id)

    def seed(self, courses, gig_books, trial_projects=()):
        """Inserts seed rows that are not present yet; returns how many were added."""
        added = 0
        known_codes = {code for (code,) in self.session.query(Course.code)}
        for course in courses:
            if course['code'] not in known_codes:
                self.session.add(Course(**course))
                added += 1

        known_titles = {title for (title,) in self.session.query(GigBook.title)}
        for book in gig_books:
            if book['title'] not in known_titles:
                self.session.add(GigBook(**book))
                added += 1

        known_trials = {code for (code,) in self.session.query(TrialProject.code)}
        for trial in trial_projects:
            if trial['code'] not in known_trials:
                self.session.add(TrialProject(**trial))
                added += 1

        self.session.commit()
        return added
