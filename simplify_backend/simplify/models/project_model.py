from datetime import datetime
from .. import db

class Project(db.Model):
    __tablename__ = 'org_projects'

    id = db.Column(db.Integer, primary_key=True)
    org_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    deadline = db.Column(db.Date, nullable=True)
    total_value = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    milestones = db.relationship('Milestone', backref='project', lazy=True, order_by='Milestone.id')
    attachments = db.relationship('Attachment', backref='project', lazy=True)
