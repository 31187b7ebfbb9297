import unittest

from tests.base import AppTestCase


class TestAuthRegisterValidation(AppTestCase):
    def _post_register(self, **overrides):
        payload = {
            "username": "new_user",
            "full_name": "New User",
            "email": "new_user@example.com",
            "password": "pass12345",
        }
        payload.update(overrides)
        return self.client.post("/api/auth/register", json=payload)

    def test_register_and_login_success(self):
        register_response = self._post_register()
        self.assertEqual(register_response.status_code, 201)
        self.assertNotIn("password_hash", register_response.get_json())

        login_response = self.client.post(
            "/api/auth/login",
            json={"username": "new_user", "password": "pass12345"},
        )
        self.assertEqual(login_response.status_code, 200)
        body = login_response.get_json()
        self.assertIn("access_token", body)
        self.assertIn("refresh_token", body)

    def test_register_rejects_missing_password(self):
        response = self._post_register(password=None)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Missing fields")

    def test_register_rejects_blank_full_name(self):
        response = self._post_register(full_name="   ")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Missing fields")

    def test_register_rejects_bad_email(self):
        response = self._post_register(email="not-an-email")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Invalid email format")

    def test_register_rejects_short_password(self):
        response = self._post_register(password="short")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json()["error"],
            "Password must be at least 8 characters long",
        )

    def test_register_rejects_duplicate_username_and_email(self):
        self.assertEqual(self._post_register().status_code, 201)

        same_username = self._post_register(email="other@example.com")
        self.assertEqual(same_username.status_code, 400)
        self.assertEqual(same_username.get_json()["error"], "Username already exists")

        same_email = self._post_register(username="other_user")
        self.assertEqual(same_email.status_code, 400)
        self.assertEqual(same_email.get_json()["error"], "Email already exists")

    def test_register_rejects_invalid_json(self):
        response = self.client.post(
            "/api/auth/register",
            data="not-json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Invalid JSON body")

    def test_login_rejects_wrong_password(self):
        self._post_register()
        response = self.client.post(
            "/api/auth/login",
            json={"username": "new_user", "password": "wrong-pass"},
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["error"], "Invalid credentials")

    def test_refresh_returns_access_token(self):
        self._post_register()
        tokens = self.client.post(
            "/api/auth/login",
            json={"username": "new_user", "password": "pass12345"},
        ).get_json()

        response = self.client.post(
            "/api/auth/refresh",
            headers={"Authorization": f"Bearer {tokens['refresh_token']}"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.get_json()["access_token"])


if __name__ == "__main__":
    unittest.main()
