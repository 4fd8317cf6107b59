from datetime import datetime

from .. import db


class Course(db.Model):
    __tablename__ = 'courses'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(120), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    short_description = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(50), nullable=False, index=True)
    organization = db.Column(db.String(120), nullable=True)
    level = db.Column(db.String(50), nullable=True)
    duration = db.Column(db.String(50), nullable=True)
    external_url = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)


class GigBook(db.Model):
    __tablename__ = 'gig_books'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    topic = db.Column(db.String(200), nullable=True)
    provider = db.Column(db.String(120), nullable=True)
    link = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)


class TrialProject(db.Model):
    __tablename__ = 'trial_projects'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(120), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    short_description = db.Column(db.Text, nullable=False)
    domain = db.Column(db.String(120), nullable=True)
    skills_required = db.Column(db.Text, nullable=True)
    difficulty = db.Column(db.String(50), nullable=True)
    estimated_hours = db.Column(db.Integer, nullable=True)
    budget_range = db.Column(db.String(120), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
