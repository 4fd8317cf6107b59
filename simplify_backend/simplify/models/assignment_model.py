from datetime import datetime

from .. import db


class Assignment(db.Model):
    __tablename__ = 'project_assignments'

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('org_projects.id'), nullable=False)
    student_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    assigned_by_org = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    assigned_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    role = db.Column(db.String(120), nullable=True)
    status = db.Column(db.String(20), nullable=False, default='active')
    project = db.relationship('Project', lazy=True)
    student = db.relationship('User', foreign_keys=[student_id], lazy=True)

    __table_args__ = (db.UniqueConstraint('project_id', 'student_id', name='unique_assignment_per_student'),)
