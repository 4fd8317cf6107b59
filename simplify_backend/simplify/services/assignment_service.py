from flask import current_app
from sqlalchemy.exc import IntegrityError

from .. import db
from ..auth import ROLE_ORGANIZATION, ROLE_STUDENT, ensure_role
from ..errors import Conflict, NotFound
from ..models.application_model import Application
from ..models.assignment_model import Assignment
from ..models.milestone_model import Milestone
from ..models.project_model import Project
from ..models.submission_model import Submission
from ..models.user_model import User
from ..notifications import Notifier, notify_safely
from ..schemas.assignment_schema import apply_input_schema, assign_input_schema
from ..schemas.input_schema import load_input
from .project_service import ProjectService


ACTIVE = 'active'


class AssignmentService:
    """
    Moves a (project, student) pair from NONE to APPLIED and on to ASSIGNED.

    Assigning consumes the pending application; ASSIGNED is terminal.
    """

    def __init__(self, session=None, notifier=None):
        self.session = session or db.session
        self.notifier = notifier or Notifier()
        self.projects = ProjectService(self.session)

    def _find_application(self, project_id, student_id):
        return self.session.query(Application).filter_by(project_id=project_id, student_id=student_id).first()

    def _find_assignment(self, project_id, student_id):
        return self.session.query(Assignment).filter_by(project_id=project_id, student_id=student_id).first()

    def apply(self, student, data):
        ensure_role(student, ROLE_STUDENT)
        fields = load_input(apply_input_schema, data)
        project_id = fields['project_id']

        if self.session.get(Project, project_id) is None:
            raise NotFound("Project not found")
        if self._find_assignment(project_id, student.id):
            raise Conflict("Already assigned")
        if self._find_application(project_id, student.id):
            raise Conflict("Already applied")

        application = Application(project_id=project_id, student_id=student.id, message=fields['message'])
        self.session.add(application)
        try:
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            raise Conflict("Already applied") from err

        current_app.logger.info("Student %s applied to project %s", student.id, project_id)
        return application

    def withdraw(self, student, project_id):
        ensure_role(student, ROLE_STUDENT)
        application = self._find_application(project_id, student.id)
        if application is None:
            raise NotFound("Application not found")

        self.session.delete(application)
        self.session.commit()
        current_app.logger.info("Student %s withdrew from project %s", student.id, project_id)

    def list_applicants(self, org, project_id):
        project, applications = self.projects.get_project(org, project_id)
        return applications

    def assign(self, org, project_id, data):
        """
        Assigns a student to one of org's projects.

        The student's application, if any, is deleted in the same transaction
        that inserts the active assignment. The student is emailed after the
        commit.
        """
        fields = load_input(assign_input_schema, data)
        project = self.projects.get_owned_project(org, project_id, lock=True)

        student = self.session.get(User, fields['student_id'])
        if student is None or student.role != ROLE_STUDENT:
            raise NotFound("Student not found")
        if self._find_assignment(project.id, student.id):
            raise Conflict("Student already assigned to this project")

        assignment = Assignment(
            project_id=project.id,
            student_id=student.id,
            assigned_by_org=org.id,
            role=fields['role'],
            status=ACTIVE,
        )
        try:
            (self.session.query(Application)
             .filter_by(project_id=project.id, student_id=student.id)
             .delete(synchronize_session=False))
            self.session.add(assignment)
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            raise Conflict("Student already assigned to this project") from err

        current_app.logger.info("Organization %s assigned student %s to project %s",
                                org.id, student.id, project.id)
        notify_safely(self.notifier.student_assigned, student, project)
        return assignment

    def _active_assignments(self, org):
        return (self.session.query(Assignment, Project, User)
                .join(Project, Project.id == Assignment.project_id)
                .join(User, User.id == Assignment.student_id)
                .filter(Project.org_id == org.id, Assignment.status == ACTIVE))

    def list_active_work(self, org):
        ensure_role(org, ROLE_ORGANIZATION)
        rows = self._active_assignments(org).order_by(Assignment.assigned_at.desc()).all()
        return [
            {
                "assignment_id": assignment.id,
                "project_id": project.id,
                "project_name": project.name,
                "name": student.name,
                "email": student.email,
                "assigned_at": assignment.assigned_at.isoformat(),
            }
            for assignment, project, student in rows
        ]

    def list_active_work_details(self, org):
        """One row per (active assignment, milestone), with the submission if there is one."""
        ensure_role(org, ROLE_ORGANIZATION)
        rows = (self._active_assignments(org)
                .join(Milestone, Milestone.project_id == Project.id)
                .outerjoin(Submission, (Submission.milestone_id == Milestone.id)
                           & (Submission.assignment_id == Assignment.id))
                .add_columns(Milestone, Submission)
                .order_by(Project.id, Assignment.id, Milestone.id)
                .all())
        return [
            {
                "assignment_id": assignment.id,
                "project_name": project.name,
                "student_name": student.name,
                "student_email": student.email,
                "milestone_id": milestone.id,
                "milestone_title": milestone.title,
                "price": str(milestone.price),
                "submission_url": submission.submission_url if submission else None,
                "status": submission.status if submission else None,
            }
            for assignment, project, student, milestone, submission in rows
        ]

    def list_student_assignments(self, student):
        ensure_role(student, ROLE_STUDENT)
        rows = (self.session.query(Assignment, Project, User)
                .join(Project, Project.id == Assignment.project_id)
                .join(User, User.id == Project.org_id)
                .filter(Assignment.student_id == student.id)
                .order_by(Assignment.assigned_at.desc())
                .all())
        return [
            {
                "assignment_id": assignment.id,
                "project_id": project.id,
                "project_name": project.name,
                "org_name": organization.name,
                "status": assignment.status,
                "assigned_at": assignment.assigned_at.isoformat(),
            }
            for assignment, project, organization in rows
        ]
