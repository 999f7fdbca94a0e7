import unittest

from tests.base import ApiTestCase


class IncognitoApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.register("alice")
        self.bob = self.register("bob")

    def open_session(self, headers):
        response = self.client.post("/api/v1/incognitos/", headers=headers)
        self.assertEqual(response.status_code, 201)
        return response.json()["incognito"]

    def test_requires_login(self):
        self.assertEqual(self.client.post("/api/v1/incognitos/").status_code, 403)
        self.assertEqual(self.client.get("/api/v1/incognitos/").status_code, 403)
        self.assertEqual(self.client.delete("/api/v1/incognitos/").status_code, 403)

    def test_list_only_own_sessions(self):
        first = self.open_session(self.alice)
        second = self.open_session(self.alice)
        self.open_session(self.bob)
        response = self.client.get("/api/v1/incognitos/", headers=self.alice)
        self.assertEqual([i["id"] for i in response.json()], [first["id"], second["id"]])
        self.assertTrue(all(i["user"] == "alice" for i in response.json()))

    def test_delete_single(self):
        first = self.open_session(self.alice)
        second = self.open_session(self.alice)
        response = self.client.delete("/api/v1/incognitos/", params={"id": first["id"]}, headers=self.alice)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Your incognito session was deleted successfully.")
        remaining = self.client.get("/api/v1/incognitos/", headers=self.alice).json()
        self.assertEqual([i["id"] for i in remaining], [second["id"]])

    def test_delete_single_errors(self):
        session = self.open_session(self.alice)
        response = self.client.delete("/api/v1/incognitos/", params={"id": session["id"]}, headers=self.bob)
        self.assertEqual(response.status_code, 403)
        response = self.client.delete("/api/v1/incognitos/", params={"id": "12345"}, headers=self.alice)
        self.assertEqual(response.status_code, 404)
        self.assertIn("incognitoNotFound", response.json()["error"])
        response = self.client.delete("/api/v1/incognitos/", params={"id": ""}, headers=self.alice)
        self.assertEqual(response.status_code, 400)

    def test_delete_all(self):
        self.open_session(self.alice)
        self.open_session(self.alice)
        bobs = self.open_session(self.bob)
        response = self.client.delete("/api/v1/incognitos/", headers=self.alice)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Your incognito sessions were deleted successfully.")
        self.assertEqual(self.client.get("/api/v1/incognitos/", headers=self.alice).json(), [])
        self.assertEqual(
            [i["id"] for i in self.client.get("/api/v1/incognitos/", headers=self.bob).json()],
            [bobs["id"]],
        )

    def test_delete_all_without_sessions(self):
        response = self.client.delete("/api/v1/incognitos/", headers=self.alice)
        self.assertEqual(response.status_code, 404)
        self.assertIn("incognitoNotFound", response.json()["error"])


if __name__ == "__main__":
    unittest.main()
