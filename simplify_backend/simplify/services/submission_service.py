import datetime

from flask import current_app
from sqlalchemy.exc import IntegrityError

from .. import db
from ..auth import ROLE_ORGANIZATION, ROLE_STUDENT, ensure_role
from ..errors import Conflict, Forbidden, InvalidArgument, NotFound
from ..models.assignment_model import Assignment
from ..models.milestone_model import Milestone
from ..models.project_model import Project
from ..models.submission_model import ACCEPTED, DECLINED, SUBMITTED, Submission
from ..notifications import Notifier, notify_safely
from ..schemas.input_schema import load_input
from ..schemas.submission_schema import review_input_schema, submit_input_schema
from .assignment_service import ACTIVE


def owns_milestone(user, milestone_id, **kwargs):
    return (db.session.query(Milestone.id)
            .join(Project, Project.id == Milestone.project_id)
            .filter(Milestone.id == milestone_id, Project.org_id == user.id)
            .first()) is not None


class SubmissionService:
    def __init__(self, session=None, notifier=None):
        self.session = session or db.session
        self.notifier = notifier or Notifier()

    def _get_assignment(self, assignment_id):
        assignment = self.session.get(Assignment, assignment_id)
        if assignment is None:
            raise NotFound("Assignment not found")
        return assignment

    def submit(self, student, milestone_id, data):
        """
        Records the student's work for one milestone of an assignment they hold.

        A declined submission is resubmitted in place; a pending or accepted
        one can not be replaced.
        """
        ensure_role(student, ROLE_STUDENT)
        fields = load_input(submit_input_schema, data)
        submission_url = fields['submission_url'].strip()
        if not submission_url:
            raise InvalidArgument("submission_url is required")

        assignment = self._get_assignment(fields['assignment_id'])
        if assignment.student_id != student.id:
            raise Forbidden("Assignment belongs to another student")
        if assignment.status != ACTIVE:
            raise Forbidden("Assignment is not active")

        milestone = self.session.get(Milestone, milestone_id)
        if milestone is None:
            raise NotFound("Milestone not found")
        if milestone.project_id != assignment.project_id:
            raise InvalidArgument("Milestone does not belong to the assigned project")

        submission = (self.session.query(Submission)
                      .filter_by(milestone_id=milestone.id, assignment_id=assignment.id)
                      .first())
        if submission is None:
            submission = Submission(milestone_id=milestone.id, assignment_id=assignment.id)
            self.session.add(submission)
        elif submission.status != DECLINED:
            raise Conflict(f"Milestone already {submission.status}")

        submission.submission_url = submission_url
        submission.status = SUBMITTED
        submission.submitted_at = datetime.datetime.utcnow()
        submission.reviewed_at = None
        try:
            self.session.commit()
        except IntegrityError as err:
            self.session.rollback()
            raise Conflict("Milestone already submitted") from err

        current_app.logger.info("Student %s submitted milestone %s for assignment %s",
                                student.id, milestone.id, assignment.id)
        return submission

    def list_milestone_status(self, user, assignment_id):
        """
        Every milestone of the assignment's project with its submission, if any.

        Visible to the assigned student and to the organization owning the project.
        """
        assignment = self._get_assignment(assignment_id)
        if user.role == ROLE_STUDENT:
            allowed = assignment.student_id == user.id
        else:
            allowed = user.role == ROLE_ORGANIZATION and assignment.project.org_id == user.id
        if not allowed:
            raise NotFound("Assignment not found")

        rows = (self.session.query(Milestone, Submission)
                .outerjoin(Submission, (Submission.milestone_id == Milestone.id)
                           & (Submission.assignment_id == assignment.id))
                .filter(Milestone.project_id == assignment.project_id)
                .order_by(Milestone.id)
                .all())
        return [
            {
                "milestone_id": milestone.id,
                "title": milestone.title,
                "description": milestone.description,
                "price": str(milestone.price),
                "due_date": milestone.due_date.isoformat() if milestone.due_date else None,
                "submission_url": submission.submission_url if submission else None,
                "status": submission.status if submission else None,
            }
            for milestone, submission in rows
        ]

    def accept(self, org, milestone_id, data=None):
        return self._review(org, milestone_id, data, ACCEPTED)

    def decline(self, org, milestone_id, data=None):
        return self._review(org, milestone_id, data, DECLINED)

    def _review(self, org, milestone_id, data, status):
        ensure_role(org, ROLE_ORGANIZATION)
        fields = load_input(review_input_schema, data or {})

        milestone = (self.session.query(Milestone)
                     .join(Project, Project.id == Milestone.project_id)
                     .filter(Milestone.id == milestone_id, Project.org_id == org.id)
                     .first())
        if milestone is None:
            raise NotFound("Milestone not found")

        query = self.session.query(Submission).filter_by(milestone_id=milestone.id)
        if fields['assignment_id'] is not None:
            query = query.filter_by(assignment_id=fields['assignment_id'])
        submissions = query.all()
        if not submissions:
            raise NotFound("Submission not found")

        pending = [s for s in submissions if s.status == SUBMITTED]
        if not pending:
            raise Conflict(f"Submission already {submissions[0].status}")
        if len(pending) > 1:
            raise InvalidArgument("assignment_id is required: several submissions are pending for this milestone")

        submission = pending[0]
        submission.status = status
        submission.reviewed_at = datetime.datetime.utcnow()
        self.session.commit()

        current_app.logger.info("Organization %s %s submission %s", org.id, status, submission.id)
        notify_safely(self.notifier.submission_reviewed, submission.assignment.student, milestone, status)
        return submission
