from flask import Blueprint, request, jsonify

from ..auth import ROLE_STUDENT, role_required
from ..notifications import Notifier, notify_safely
from ..schemas.catalog_schema import courses_schema, gig_books_schema, report_input_schema, trial_projects_schema
from ..schemas.assignment_schema import apply_input_schema
from ..schemas.input_schema import load_input
from ..schemas.project_schema import milestones_schema, project_details_schema
from ..schemas.submission_schema import submission_schema
from ..services.assignment_service import AssignmentService
from ..services.catalog_service import COURSE_CATEGORIES, CatalogService
from ..services.project_service import ProjectService
from ..services.submission_service import SubmissionService
from ..services.user_service import get_profile

student_blueprint = Blueprint('student_blueprint', __name__)

student_only = role_required(ROLE_STUDENT)


@student_blueprint.route('/profile', methods=['GET'])
@student_only
def profile(student):
    return jsonify(success=True, **get_profile(student)), 200


@student_blueprint.route('/projects', methods=['GET'])
def browse_projects():
    projects = ProjectService().list_all_projects()
    return jsonify(success=True, projects=project_details_schema.dump(projects)), 200


@student_blueprint.route('/project/<int:project_id>/milestones', methods=['GET'])
def project_milestones(project_id):
    milestones = ProjectService().list_project_milestones(project_id)
    return jsonify(success=True, milestones=milestones_schema.dump(milestones)), 200


@student_blueprint.route('/projects/apply', methods=['POST'])
@student_only
def apply_to_project(student):
    application = AssignmentService().apply(student, request.get_json(silent=True))
    return jsonify(success=True, application_id=application.id, status=application.status), 201


@student_blueprint.route('/projects/withdraw', methods=['POST'])
@student_only
def withdraw_application(student):
    fields = load_input(apply_input_schema, request.get_json(silent=True))
    AssignmentService().withdraw(student, fields['project_id'])
    return jsonify(success=True, message="Application withdrawn"), 200


@student_blueprint.route('/active-projects', methods=['GET'])
@student_only
def active_projects(student):
    return jsonify(success=True, projects=AssignmentService().list_student_assignments(student)), 200


@student_blueprint.route('/projects/<int:assignment_id>/milestones', methods=['GET'])
@student_only
def assignment_milestones(student, assignment_id):
    milestones = SubmissionService().list_milestone_status(student, assignment_id)
    return jsonify(success=True, milestones=milestones), 200


@student_blueprint.route('/milestones/<int:milestone_id>/submit', methods=['POST'])
@student_only
def submit_milestone(student, milestone_id):
    submission = SubmissionService().submit(student, milestone_id, request.get_json(silent=True))
    return jsonify(success=True, submission=submission_schema.dump(submission)), 201


def _course_list_view(category):
    def view():
        courses = CatalogService().list_courses(category)
        return jsonify(success=True, courses=courses_schema.dump(courses)), 200
    return view


for slug, category in COURSE_CATEGORIES.items():
    student_blueprint.add_url_rule(f'/{slug}', endpoint=slug, view_func=_course_list_view(category))


@student_blueprint.route('/courses/<string:category>', methods=['GET'])
def courses_by_category(category):
    courses = CatalogService().list_courses(category)
    return jsonify(success=True, courses=courses_schema.dump(courses)), 200


@student_blueprint.route('/gig-guide', methods=['GET'])
def gig_guide():
    books = CatalogService().list_gig_books()
    return jsonify(success=True, books=gig_books_schema.dump(books)), 200


@student_blueprint.route('/trial-projects', methods=['GET'])
def trial_projects():
    projects = CatalogService().list_trial_projects()
    return jsonify(success=True, projects=trial_projects_schema.dump(projects)), 200


@student_blueprint.route('/report', methods=['POST'])
def report():
    fields = load_input(report_input_schema, request.get_json(silent=True))
    notify_safely(Notifier().report_submitted, fields['name'], fields['email'],
                  fields['category'], fields['description'])
    return jsonify(success=True, message="Report submitted successfully."), 200
