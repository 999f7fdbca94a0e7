import unittest

from tests.base import ApiTestCase


class UserApiTests(ApiTestCase):
    def test_register_creates_default_display(self):
        self.register("alice")
        response = self.client.get("/api/v1/displays/", params={"author": "alice"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["display_type"], "default")
        self.assertEqual(response.json()["author"], "alice")

    def test_duplicate_username_is_rejected(self):
        self.register("alice")
        response = self.client.post("/api/v1/users/", json={"username": "ALICE", "password": "x"})
        self.assertEqual(response.status_code, 409)
        self.assertIn("error", response.json())

    def test_invalid_username_is_rejected(self):
        response = self.client.post("/api/v1/users/", json={"username": "no spaces", "password": "x"})
        self.assertEqual(response.status_code, 422)

    def test_bad_login(self):
        self.register("alice")
        response = self.client.post("/api/v1/users/login", json={"username": "alice", "password": "wrong"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Invalid user login credentials provided."})

    def test_session_requires_login(self):
        response = self.client.get("/api/v1/users/session")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"error": "You must be logged in to complete this action."})

        headers = self.register("alice")
        response = self.client.get("/api/v1/users/session", headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["username"], "alice")

    def test_garbage_token_is_rejected(self):
        response = self.client.get("/api/v1/users/session", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(response.status_code, 403)

    def test_delete_account_removes_owned_records(self):
        alice = self.register("alice")
        bob = self.register("bob")
        post = self.create_post(bob)
        own_post = self.create_post(alice, "mine")

        self.client.post("/api/v1/incognitos/", headers=alice)
        self.client.post("/api/v1/profiles/", json={"handle": "al", "type": "personal"}, headers=alice)
        self.client.post(f"/api/v1/reactions/{post['id']}", json={"symbol": "like"}, headers=alice)
        self.client.post(f"/api/v1/reactions/{own_post['id']}", json={"symbol": "heart"}, headers=bob)

        response = self.client.delete("/api/v1/users/session", headers=alice)
        self.assertEqual(response.status_code, 200)

        self.assertEqual(self.client.get("/api/v1/profiles/").json(), [])
        self.assertEqual(self.client.get("/api/v1/reactions/").json(), [])
        self.assertEqual([p["id"] for p in self.client.get("/api/v1/posts/").json()], [post["id"]])
        displays = self.client.get("/api/v1/displays/").json()
        self.assertEqual([d["author"] for d in displays], ["bob"])
        response = self.client.get("/api/v1/displays/", params={"author": "alice"})
        self.assertEqual(response.status_code, 404)
        self.assertIn("userNotFound", response.json()["error"])

        # The old token no longer resolves to a user.
        self.assertEqual(self.client.get("/api/v1/incognitos/", headers=alice).status_code, 403)


if __name__ == "__main__":
    unittest.main()
