import datetime
from decimal import Decimal

from flask import current_app
from sqlalchemy import or_

from .. import db
from ..auth import ROLE_ORGANIZATION, ensure_role
from ..errors import NotFound
from ..models.application_model import Application
from ..models.assignment_model import Assignment
from ..models.attachment_model import Attachment
from ..models.milestone_model import Milestone
from ..models.project_model import Project
from ..models.submission_model import Submission
from ..schemas.input_schema import load_input
from ..schemas.project_schema import project_input_schema


def owns_project(user, project_id, **kwargs):
    return db.session.query(Project.id).filter_by(id=project_id, org_id=user.id).first() is not None


class ProjectService:
    def __init__(self, session=None):
        self.session = session or db.session

    def get_owned_project(self, org, project_id, lock=False):
        ensure_role(org, ROLE_ORGANIZATION)
        query = self.session.query(Project).filter_by(id=project_id, org_id=org.id)
        if lock:
            query = query.with_for_update()
        project = query.first()
        if project is None:
            raise NotFound("Project not found")
        return project

    def create_project(self, org, data):
        """
        Creates a project together with its milestones.

        total_value is fixed here as the sum of the milestone prices; the
        project row is never visible without its milestones.
        """
        ensure_role(org, ROLE_ORGANIZATION)
        fields = load_input(project_input_schema, data)
        milestones = fields['milestones']

        created_at = datetime.datetime.utcnow()
        new_project = Project(
            org_id=org.id,
            name=fields['project_name'].strip(),
            deadline=fields['deadline'],
            total_value=sum((Decimal(m['price']) for m in milestones), Decimal('0')),
            created_at=created_at,
        )

        try:
            self.session.add(new_project)
            self.session.flush()  # Get new_project.id before committing

            for m in milestones:
                self.session.add(Milestone(
                    project_id=new_project.id,
                    title=m['title'].strip(),
                    description=m['description'],
                    price=m['price'],
                    due_date=m['due_date'],
                    created_at=created_at,
                ))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        current_app.logger.info("Organization %s created project %s with %d milestones",
                                org.id, new_project.id, len(milestones))
        return new_project

    def list_projects(self, org):
        ensure_role(org, ROLE_ORGANIZATION)
        return (self.session.query(Project)
                .filter_by(org_id=org.id)
                .order_by(Project.created_at.desc(), Project.id.desc())
                .all())

    def get_project(self, org, project_id):
        """:return: (project, applications) for a project owned by org"""
        project = self.get_owned_project(org, project_id)
        applications = (self.session.query(Application)
                        .filter_by(project_id=project.id)
                        .order_by(Application.applied_at.asc())
                        .all())
        return project, applications

    def delete_project(self, org, project_id):
        project = self.get_owned_project(org, project_id, lock=True)
        milestone_ids = self.session.query(Milestone.id).filter_by(project_id=project.id).scalar_subquery()
        assignment_ids = self.session.query(Assignment.id).filter_by(project_id=project.id).scalar_subquery()

        try:
            # Children first so foreign keys hold at every step
            (self.session.query(Submission)
             .filter(or_(Submission.milestone_id.in_(milestone_ids),
                         Submission.assignment_id.in_(assignment_ids)))
             .delete(synchronize_session=False))
            for model in (Assignment, Application, Attachment, Milestone):
                self.session.query(model).filter_by(project_id=project.id).delete(synchronize_session=False)
            self.session.query(Project).filter_by(id=project.id).delete(synchronize_session=False)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        current_app.logger.info("Organization %s deleted project %s", org.id, project_id)

    def list_all_projects(self):
        return (self.session.query(Project)
                .order_by(Project.created_at.desc(), Project.id.desc())
                .all())

    def list_project_milestones(self, project_id):
        return (self.session.query(Milestone)
                .filter_by(project_id=project_id)
                .order_by(Milestone.id.asc())
                .all())
