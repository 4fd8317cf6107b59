from flask import Blueprint, request, jsonify

from ..auth import ROLE_ADMIN, role_required
from ..errors import InvalidArgument
from ..schemas.catalog_schema import courses_schema, gig_books_schema, trial_projects_schema
from ..services.catalog_service import CatalogService

admin_blueprint = Blueprint('admin_blueprint', __name__)

admin_only = role_required(ROLE_ADMIN)


@admin_blueprint.route('/courses', methods=['GET'])
@admin_only
def list_courses(admin):
    category = request.args.get('category')
    if not category:
        raise InvalidArgument("Category required")
    courses = CatalogService().list_courses(category, include_inactive=True)
    return jsonify(success=True, courses=courses_schema.dump(courses)), 200


@admin_blueprint.route('/courses', methods=['POST'])
@admin_only
def add_course(admin):
    course = CatalogService().add_course(admin, request.get_json(silent=True))
    return jsonify(success=True, id=course.id), 201


@admin_blueprint.route('/courses/<int:course_id>', methods=['DELETE'])
@admin_only
def delete_course(admin, course_id):
    CatalogService().delete_course(admin, course_id)
    return jsonify(success=True), 200


@admin_blueprint.route('/gig-books', methods=['GET'])
@admin_only
def list_gig_books(admin):
    books = CatalogService().list_gig_books()
    return jsonify(success=True, books=gig_books_schema.dump(books)), 200


@admin_blueprint.route('/gig-books', methods=['POST'])
@admin_only
def add_gig_book(admin):
    book = CatalogService().add_gig_book(admin, request.get_json(silent=True))
    return jsonify(success=True, id=book.id), 201


@admin_blueprint.route('/gig-books/<int:book_id>', methods=['DELETE'])
@admin_only
def delete_gig_book(admin, book_id):
    CatalogService().delete_gig_book(admin, book_id)
    return jsonify(success=True), 200


@admin_blueprint.route('/trial-projects', methods=['GET'])
@admin_only
def list_trial_projects(admin):
    projects = CatalogService().list_trial_projects()
    return jsonify(success=True, projects=trial_projects_schema.dump(projects)), 200


@admin_blueprint.route('/trial-projects', methods=['POST'])
@admin_only
def add_trial_project(admin):
    trial = CatalogService().add_trial_project(admin, request.get_json(silent=True))
    return jsonify(success=True, id=trial.id), 201


@admin_blueprint.route('/trial-projects/<int:trial_id>', methods=['DELETE'])
@admin_only
def delete_trial_project(admin, trial_id):
    CatalogService().delete_trial_project(admin, trial_id)
    return jsonify(success=True), 200
