from datetime import datetime

from .. import db


SUBMITTED = 'submitted'
ACCEPTED = 'accepted'
DECLINED = 'declined'


class Submission(db.Model):
    __tablename__ = 'milestone_submissions'

    id = db.Column(db.Integer, primary_key=True)
    milestone_id = db.Column(db.Integer, db.ForeignKey('org_project_milestones.id'), nullable=False)
    assignment_id = db.Column(db.Integer, db.ForeignKey('project_assignments.id'), nullable=False)
    submission_url = db.Column(db.String(2048), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=SUBMITTED)
    submitted_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    reviewed_at = db.Column(db.DateTime, nullable=True)
    milestone = db.relationship('Milestone', lazy=True)
    assignment = db.relationship('Assignment', lazy=True)

    __table_args__ = (
        db.UniqueConstraint('milestone_id', 'assignment_id', name='unique_submission_per_assignment'),
        db.CheckConstraint("status IN ('submitted', 'accepted', 'declined')", name='valid_submission_status'),
    )
