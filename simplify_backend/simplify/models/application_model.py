from datetime import datetime

from .. import db


class Application(db.Model):
    __tablename__ = 'project_applications'

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('org_projects.id'), nullable=False)
    student_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    message = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default='applied')
    applied_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=True)
    student = db.relationship('User', lazy=True)

    __table_args__ = (db.UniqueConstraint('project_id', 'student_id', name='unique_application_per_student'),)
