import pytest

from simplify import bcrypt
from simplify.errors import Conflict, InvalidArgument, Unauthorized
from simplify.models.user_model import User


class TestRegister:
    def test_register_hashes_password_and_issues_token(self, users, register):
        user, token = register("Sam", "Sam@Example.com", "student", collegeName="State College")

        assert user.email == "sam@example.com"
        assert user.password != "secret123"
        assert bcrypt.check_password_hash(user.password, "secret123")
        assert user.college_name == "State College"
        assert users.resolve(token).id == user.id

    def test_organization_does_not_keep_student_fields(self, register):
        org, _ = register("Acme", "acme@example.com", "organization", collegeName="Ignored", skills="x")
        assert org.college_name is None
        assert org.skills is None

    def test_duplicate_email_conflicts_once(self, register):
        register("Sam", "sam@example.com", "student")
        with pytest.raises(Conflict):
            register("Sam Again", "sam@example.com", "organization")
        assert User.query.filter_by(email="sam@example.com").count() == 1

    def test_login_ids_are_unique(self, register):
        first, _ = register("A", "a@example.com", "student")
        second, _ = register("B", "b@example.com", "student")
        assert first.login_id != second.login_id

    @pytest.mark.parametrize("role", ["admin", "mentor", ""])
    def test_rejects_roles_other_than_student_and_organization(self, register, role):
        with pytest.raises(InvalidArgument):
            register("Eve", "eve@example.com", role)

    def test_missing_fields(self, users):
        with pytest.raises(InvalidArgument):
            users.register({"email": "x@example.com", "password": "pw", "role": "student"})
        with pytest.raises(InvalidArgument):
            users.register(None)


class TestLogin:
    def test_login_updates_last_login(self, users, sam):
        student, _ = sam
        assert student.last_login_at is None

        user, token = users.login({"email": "sam@example.com", "password": "secret123"})

        assert user.id == student.id
        assert user.last_login_at is not None
        assert users.resolve(token).id == student.id

    def test_wrong_password_and_unknown_email_look_the_same(self, users, sam):
        with pytest.raises(Unauthorized) as wrong_password:
            users.login({"email": "sam@example.com", "password": "nope"})
        with pytest.raises(Unauthorized) as unknown_email:
            users.login({"email": "nobody@example.com", "password": "secret123"})

        assert wrong_password.value.message == unknown_email.value.message == "Invalid email or password"


class TestResolve:
    def test_garbage_token_resolves_to_none(self, users):
        assert users.resolve("not-a-token") is None
        assert users.resolve("") is None

    def test_rotating_login_id_revokes_old_tokens(self, users, sam):
        student, token = sam
        users.rotate_login_id(student)
        assert users.resolve(token) is None


class TestAuthApi:
    def test_register_login_me(self, client, headers):
        response = client.post("/auth/register", json={
            "name": "Sam", "email": "sam@example.com", "password": "secret123",
            "role": "student", "collegeName": "State College", "skills": "Python",
        })
        assert response.status_code == 201
        assert response.json["success"] is True

        response = client.post("/auth/login", json={"email": "sam@example.com", "password": "secret123"})
        assert response.status_code == 200
        body = response.json
        assert body["role"] == "student"
        assert body["name"] == "Sam"

        response = client.get("/auth/me", headers=headers(body["login_token"]))
        assert response.status_code == 200
        assert response.json["user"]["email"] == "sam@example.com"
        assert response.json["user"]["college_name"] == "State College"

    def test_token_accepted_from_query_string(self, client, sam):
        _, token = sam
        response = client.get(f"/auth/me?login_id={token}")
        assert response.status_code == 200

    def test_duplicate_registration_returns_conflict(self, client, sam):
        response = client.post("/auth/register", json={
            "name": "Sam", "email": "sam@example.com", "password": "x", "role": "student",
        })
        assert response.status_code == 409
        assert response.json == {"success": False, "error": "Email already registered"}

    def test_unregistered_email_gets_generic_401(self, client):
        response = client.post("/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
        assert response.status_code == 401
        assert response.json == {"success": False, "error": "Invalid email or password"}

    def test_me_without_token(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert response.json["success"] is False

    def test_me_with_tampered_token(self, client, sam, headers):
        _, token = sam
        tampered = token.rsplit(".", 1)[0] + ".bm90LXRoZS1zaWduYXR1cmU"
        response = client.get("/auth/me", headers=headers(tampered))
        assert response.status_code == 401

    def test_logout_revokes_token(self, client, sam, headers):
        _, token = sam
        assert client.post("/auth/logout", headers=headers(token)).status_code == 200
        assert client.get("/auth/me", headers=headers(token)).status_code == 401
