from flask import Blueprint, request, jsonify

from ..auth import ROLE_ORGANIZATION, role_required
from ..notifications import Notifier, notify_safely
from ..schemas.assignment_schema import applicants_schema, assignment_schema
from ..schemas.catalog_schema import report_input_schema
from ..schemas.input_schema import load_input
from ..schemas.project_schema import milestones_schema, project_details_schema, project_schema, projects_schema
from ..schemas.submission_schema import submission_schema
from ..services.assignment_service import AssignmentService
from ..services.project_service import ProjectService, owns_project
from ..services.submission_service import SubmissionService, owns_milestone
from ..services.user_service import get_profile

organization_blueprint = Blueprint('organization_blueprint', __name__)

organization_only = role_required(ROLE_ORGANIZATION)
owned_project = role_required(ROLE_ORGANIZATION, owns=owns_project, missing="Project not found")
owned_milestone = role_required(ROLE_ORGANIZATION, owns=owns_milestone, missing="Milestone not found")


@organization_blueprint.route('/projects/create', methods=['POST'])
@organization_only
def create_project(org):
    project = ProjectService().create_project(org, request.get_json(silent=True))
    return jsonify(success=True, project_id=project.id, total_value=str(project.total_value)), 201


@organization_blueprint.route('/projects', methods=['GET'])
@organization_only
def list_projects(org):
    projects = ProjectService().list_projects(org)
    return jsonify(success=True, projects=projects_schema.dump(projects)), 200


@organization_blueprint.route('/projects/<int:project_id>', methods=['GET'])
@owned_project
def get_project(org, project_id):
    project, applications = ProjectService().get_project(org, project_id)
    project_data = project_schema.dump(project)
    project_data["milestones"] = milestones_schema.dump(project.milestones)
    return jsonify(success=True, project=project_data, applicants=applicants_schema.dump(applications)), 200


@organization_blueprint.route('/projects/<int:project_id>', methods=['DELETE'])
@owned_project
def delete_project(org, project_id):
    ProjectService().delete_project(org, project_id)
    return jsonify(success=True, message="Project deleted successfully"), 200


@organization_blueprint.route('/projects/<int:project_id>/applicants', methods=['GET'])
@owned_project
def list_applicants(org, project_id):
    applications = AssignmentService().list_applicants(org, project_id)
    return jsonify(success=True, applicants=applicants_schema.dump(applications)), 200


@organization_blueprint.route('/projects/<int:project_id>/assign', methods=['POST'])
@organization_blueprint.route('/projects/<int:project_id>/accept', methods=['POST'])
@owned_project
def assign_student(org, project_id):
    assignment = AssignmentService().assign(org, project_id, request.get_json(silent=True))
    return jsonify(success=True, assignment=assignment_schema.dump(assignment)), 201


@organization_blueprint.route('/active-work', methods=['GET'])
@organization_only
def active_work(org):
    return jsonify(success=True, active=AssignmentService().list_active_work(org)), 200


@organization_blueprint.route('/active-work/details', methods=['GET'])
@organization_only
def active_work_details(org):
    return jsonify(success=True, work=AssignmentService().list_active_work_details(org)), 200


@organization_blueprint.route('/assignments/<int:assignment_id>/milestones', methods=['GET'])
@organization_only
def assignment_milestones(org, assignment_id):
    milestones = SubmissionService().list_milestone_status(org, assignment_id)
    return jsonify(success=True, milestones=milestones), 200


@organization_blueprint.route('/milestones/<int:milestone_id>/accept', methods=['POST'])
@owned_milestone
def accept_milestone(org, milestone_id):
    submission = SubmissionService().accept(org, milestone_id, request.get_json(silent=True))
    return jsonify(success=True, submission=submission_schema.dump(submission)), 200


@organization_blueprint.route('/milestones/<int:milestone_id>/decline', methods=['POST'])
@owned_milestone
def decline_milestone(org, milestone_id):
    submission = SubmissionService().decline(org, milestone_id, request.get_json(silent=True))
    return jsonify(success=True, submission=submission_schema.dump(submission)), 200


@organization_blueprint.route('/profile', methods=['GET'])
@organization_only
def profile(org):
    return jsonify(success=True, org=get_profile(org)), 200


@organization_blueprint.route('/profile/projects', methods=['GET'])
@organization_only
def profile_projects(org):
    projects = ProjectService().list_projects(org)
    return jsonify(success=True, projects=project_details_schema.dump(projects)), 200


@organization_blueprint.route('/report', methods=['POST'])
def report():
    fields = load_input(report_input_schema, request.get_json(silent=True))
    notify_safely(Notifier().report_submitted, fields['name'], fields['email'],
                  f"ORG - {fields['category']}", fields['description'])
    return jsonify(success=True, message="Report sent successfully."), 200
