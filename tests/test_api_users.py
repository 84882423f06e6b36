"""Route tests for /users: admin-only listing and token-guarded CRUD."""

import unittest

from support import ApiTestCase


class TestListUsers(ApiTestCase):
    """GET /users: 401 without token, 403 for ROLE_USER, 200 with every user for ROLE_ADMIN."""

    def test_requires_token(self) -> None:
        self.assertEqual(self.client.get("/users").status_code, 401)

    def test_non_admin_is_forbidden(self) -> None:
        token = self.login("user", "user")
        response = self.client.get("/users", headers=self.bearer(token))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"message": "Access denied"})

    def test_admin_sees_full_list(self) -> None:
        self.client.post("/signup", json={"username": "alice", "password": "pw1"})
        token = self.login("admin", "admin")
        response = self.client.get("/users", headers=self.bearer(token))
        self.assertEqual(response.status_code, 200)
        usernames = [u["username"] for u in response.json()]
        self.assertEqual(usernames, ["admin", "user", "alice"])
        for item in response.json():
            self.assertNotIn("password", item)

    def test_custom_role_is_not_admin(self) -> None:
        role = self.client.post("/roles", json={"name": "ROLE_EDITOR"}).json()
        self.client.post("/users", json={"username": "ed", "password": "pw", "roleId": role["id"]})
        token = self.login("ed", "pw")
        self.assertEqual(self.client.get("/users", headers=self.bearer(token)).status_code, 403)


class TestUserCrud(ApiTestCase):
    """Create, read, update and delete users."""

    def setUp(self) -> None:
        super().setUp()
        self.headers = self.bearer(self.login("admin", "admin"))

    def _create(self, username: str = "bob", password: str = "pw", role: str = "ROLE_USER"):
        return self.client.post(
            "/users",
            json={"username": username, "password": password, "roleId": self.role_id(role)},
        )

    def test_create_returns_user_with_role(self) -> None:
        response = self._create(role="ROLE_ADMIN")
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["username"], "bob")
        self.assertEqual(body["roleId"], self.role_id("ROLE_ADMIN"))
        self.assertEqual(body["role"]["name"], "ROLE_ADMIN")
        self.assertNotIn("password", body)
        self.login("bob", "pw")

    def test_create_with_unknown_role_is_400(self) -> None:
        response = self.client.post(
            "/users", json={"username": "bob", "password": "pw", "roleId": 9999}
        )
        self.assertEqual(response.status_code, 400)

    def test_create_duplicate_username_is_400(self) -> None:
        self.assertEqual(self._create().status_code, 201)
        self.assertEqual(self._create().status_code, 400)

    def test_get_by_id(self) -> None:
        user_id = self._create().json()["id"]
        response = self.client.get(f"/users/{user_id}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "bob")

    def test_get_requires_token(self) -> None:
        user_id = self._create().json()["id"]
        self.assertEqual(self.client.get(f"/users/{user_id}").status_code, 401)

    def test_get_missing_is_404(self) -> None:
        response = self.client.get("/users/9999", headers=self.headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "User not found"})

    def test_non_integer_id_is_400(self) -> None:
        self.assertEqual(self.client.get("/users/abc", headers=self.headers).status_code, 400)

    def test_update_username_role_and_password(self) -> None:
        user_id = self._create().json()["id"]
        response = self.client.put(
            f"/users/{user_id}",
            json={"username": "robert", "password": "new-pw", "roleId": self.role_id("ROLE_ADMIN")},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["username"], "robert")
        self.assertEqual(body["role"]["name"], "ROLE_ADMIN")
        self.login("robert", "new-pw")
        old = self.client.post("/login", json={"username": "robert", "password": "pw"})
        self.assertEqual(old.status_code, 401)

    def test_partial_update_keeps_other_fields(self) -> None:
        user_id = self._create().json()["id"]
        response = self.client.put(
            f"/users/{user_id}", json={"username": "robert"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["role"]["name"], "ROLE_USER")
        self.login("robert", "pw")

    def test_update_requires_token(self) -> None:
        user_id = self._create().json()["id"]
        response = self.client.put(f"/users/{user_id}", json={"username": "mallory"})
        self.assertEqual(response.status_code, 401)
        unchanged = self.client.get(f"/users/{user_id}", headers=self.headers).json()
        self.assertEqual(unchanged["username"], "bob")

    def test_delete_requires_token(self) -> None:
        user_id = self._create().json()["id"]
        self.assertEqual(self.client.delete(f"/users/{user_id}").status_code, 401)
        self.assertEqual(self.client.get(f"/users/{user_id}", headers=self.headers).status_code, 200)

    def test_update_missing_is_404(self) -> None:
        response = self.client.put("/users/9999", json={"username": "x"}, headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_update_to_taken_username_is_400(self) -> None:
        user_id = self._create().json()["id"]
        response = self.client.put(
            f"/users/{user_id}", json={"username": "admin"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(), {"message": "User violates a uniqueness or role constraint"}
        )

    def test_update_to_unknown_role_is_400(self) -> None:
        user_id = self._create().json()["id"]
        response = self.client.put(
            f"/users/{user_id}", json={"roleId": 9999}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)

    def test_delete_then_get_is_404(self) -> None:
        user_id = self._create().json()["id"]
        deleted = self.client.delete(f"/users/{user_id}", headers=self.headers)
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(deleted.content, b"")
        self.assertEqual(self.client.get(f"/users/{user_id}", headers=self.headers).status_code, 404)

    def test_delete_missing_is_404(self) -> None:
        self.assertEqual(self.client.delete("/users/9999", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
