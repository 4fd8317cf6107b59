import pytest

from simplify import db
from simplify.errors import Conflict, Forbidden, InvalidArgument, NotFound
from simplify.models.application_model import Application
from simplify.models.assignment_model import Assignment
from simplify.services.assignment_service import AssignmentService
from tests.conftest import BrokenNotifier


class TestApply:
    def test_apply_creates_applied_application(self, assignments, sam, landing_page):
        student, _ = sam
        application = assignments.apply(student, {"project_id": landing_page.id, "message": "Pick me"})

        assert application.status == "applied"
        assert application.message == "Pick me"
        assert application.applied_at is not None

    def test_second_apply_conflicts(self, assignments, sam, landing_page):
        student, _ = sam
        assignments.apply(student, {"project_id": landing_page.id})
        with pytest.raises(Conflict, match="Already applied"):
            assignments.apply(student, {"project_id": landing_page.id})
        assert Application.query.count() == 1

    def test_apply_to_missing_project(self, assignments, sam):
        student, _ = sam
        with pytest.raises(NotFound):
            assignments.apply(student, {"project_id": 999})

    def test_organizations_can_not_apply(self, assignments, globex, landing_page):
        org, _ = globex
        with pytest.raises(Forbidden):
            assignments.apply(org, {"project_id": landing_page.id})

    def test_assigned_student_can_not_apply_again(self, assignments, sam, landing_page, sam_assigned):
        student, _ = sam
        with pytest.raises(Conflict, match="Already assigned"):
            assignments.apply(student, {"project_id": landing_page.id})

    def test_fractional_project_id_is_rejected(self, assignments, sam, landing_page):
        student, _ = sam
        with pytest.raises(InvalidArgument):
            assignments.apply(student, {"project_id": landing_page.id + 0.7})
        assert Application.query.count() == 0

    def test_withdraw_returns_pair_to_none(self, assignments, sam, landing_page):
        student, _ = sam
        assignments.apply(student, {"project_id": landing_page.id})
        assignments.withdraw(student, landing_page.id)

        assert Application.query.count() == 0
        assignments.apply(student, {"project_id": landing_page.id})
        assert Application.query.count() == 1

    def test_withdraw_without_application(self, assignments, sam, landing_page):
        student, _ = sam
        with pytest.raises(NotFound):
            assignments.withdraw(student, landing_page.id)


class TestAssign:
    def test_assign_consumes_application(self, assignments, notifier, acme, sam, landing_page):
        org, _ = acme
        student, _ = sam
        assignments.apply(student, {"project_id": landing_page.id})

        assignment = assignments.assign(org, landing_page.id, {"student_id": student.id, "role": "Designer"})

        assert assignment.status == "active"
        assert assignment.role == "Designer"
        assert assignment.assigned_by_org == org.id
        assert Application.query.filter_by(project_id=landing_page.id, student_id=student.id).count() == 0
        assert Assignment.query.filter_by(project_id=landing_page.id, student_id=student.id).count() == 1
        assert notifier.sent == [("student_assigned", "sam@example.com", "Landing Page")]

    def test_assign_without_application_is_allowed(self, assignments, acme, alex, landing_page):
        org, _ = acme
        student, _ = alex
        assignment = assignments.assign(org, landing_page.id, {"student_id": student.id})
        assert assignment.status == "active"

    def test_double_assignment_conflicts(self, assignments, acme, sam, landing_page, sam_assigned):
        org, _ = acme
        student, _ = sam
        with pytest.raises(Conflict):
            assignments.assign(org, landing_page.id, {"student_id": student.id})
        assert Assignment.query.count() == 1

    def test_only_owner_may_assign(self, assignments, globex, sam, landing_page):
        other, _ = globex
        student, _ = sam
        assignments.apply(student, {"project_id": landing_page.id})

        with pytest.raises(NotFound):
            assignments.assign(other, landing_page.id, {"student_id": student.id})
        assert Application.query.count() == 1
        assert Assignment.query.count() == 0

    def test_assigning_a_non_student(self, assignments, acme, globex, landing_page):
        org, _ = acme
        other, _ = globex
        with pytest.raises(NotFound):
            assignments.assign(org, landing_page.id, {"student_id": other.id})

    def test_notification_failure_does_not_fail_assignment(self, acme, sam, landing_page):
        org, _ = acme
        student, _ = sam
        service = AssignmentService(db.session, notifier=BrokenNotifier())

        assignment = service.assign(org, landing_page.id, {"student_id": student.id})

        assert assignment.status == "active"
        assert Assignment.query.count() == 1


class TestActiveWork:
    def test_active_work_lists_assignments_of_own_projects(self, assignments, acme, globex, sam_assigned):
        org, _ = acme
        other, _ = globex

        [row] = assignments.list_active_work(org)
        assert row["project_name"] == "Landing Page"
        assert row["name"] == "Sam"
        assert row["email"] == "sam@example.com"
        assert assignments.list_active_work(other) == []

    def test_details_left_join_milestones(self, assignments, submissions, acme, sam, landing_page, sam_assigned):
        org, _ = acme
        student, _ = sam
        design = landing_page.milestones[0]
        submissions.submit(student, design.id, {"assignment_id": sam_assigned.id,
                                                "submission_url": "https://example.com/design"})

        rows = assignments.list_active_work_details(org)

        assert [(r["milestone_title"], r["status"]) for r in rows] == [("Design", "submitted"), ("Build", None)]

    def test_student_sees_their_assignments(self, assignments, sam, alex, sam_assigned):
        student, _ = sam
        other, _ = alex
        [row] = assignments.list_student_assignments(student)
        assert row["assignment_id"] == sam_assigned.id
        assert row["org_name"] == "Acme"
        assert assignments.list_student_assignments(other) == []


class TestApplicationApi:
    def test_apply_list_and_assign(self, client, acme, sam, landing_page, headers):
        _, org_token = acme
        student, student_token = sam

        response = client.post("/student/projects/apply", headers=headers(student_token),
                               json={"project_id": landing_page.id})
        assert response.status_code == 201
        assert response.json["status"] == "applied"

        response = client.post("/student/projects/apply", headers=headers(student_token),
                               json={"project_id": landing_page.id})
        assert response.status_code == 409
        assert response.json == {"success": False, "error": "Already applied"}

        response = client.get(f"/organization/projects/{landing_page.id}/applicants", headers=headers(org_token))
        [applicant] = response.json["applicants"]
        assert applicant["student_id"] == student.id
        assert applicant["name"] == "Sam"

        response = client.post(f"/organization/projects/{landing_page.id}/accept", headers=headers(org_token),
                               json={"student_id": student.id})
        assert response.status_code == 201
        assert response.json["assignment"]["status"] == "active"

        response = client.get(f"/organization/projects/{landing_page.id}/applicants", headers=headers(org_token))
        assert response.json["applicants"] == []

        response = client.get("/student/active-projects", headers=headers(student_token))
        assert [p["project_name"] for p in response.json["projects"]] == ["Landing Page"]

    def test_applicants_of_foreign_project(self, client, globex, landing_page, headers):
        _, token = globex
        response = client.get(f"/organization/projects/{landing_page.id}/applicants", headers=headers(token))
        assert response.status_code == 404

    def test_withdraw_over_http(self, client, sam, landing_page, headers):
        _, token = sam
        client.post("/student/projects/apply", headers=headers(token), json={"project_id": landing_page.id})
        response = client.post("/student/projects/withdraw", headers=headers(token),
                               json={"project_id": landing_page.id})
        assert response.status_code == 200
        assert Application.query.count() == 0

    def test_fractional_ids_get_bad_request(self, client, acme, sam, landing_page, headers):
        _, org_token = acme
        student, student_token = sam

        response = client.post("/student/projects/apply", headers=headers(student_token),
                               json={"project_id": landing_page.id + 0.7})
        assert response.status_code == 400

        response = client.post(f"/organization/projects/{landing_page.id}/assign", headers=headers(org_token),
                               json={"student_id": student.id + 0.5})
        assert response.status_code == 400
        assert Assignment.query.count() == 0
