import unittest

from tests.base import ApiTestCase


class PostApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.register("alice")
        self.bob = self.register("bob")

    def test_create_and_get(self):
        post = self.create_post(self.alice, "hello")
        self.assertEqual(post["author"], "alice")
        response = self.client.get(f"/api/v1/posts/{post['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["content"], "hello")

    def test_content_bounds(self):
        response = self.client.post("/api/v1/posts/", json={"content": " "}, headers=self.alice)
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/api/v1/posts/", json={"content": "x" * 141}, headers=self.alice)
        self.assertEqual(response.status_code, 413)

    def test_missing_body(self):
        response = self.client.post("/api/v1/posts/", headers=self.alice)
        self.assertEqual(response.status_code, 422)
        self.assertIn("error", response.json())

    def test_only_author_deletes(self):
        post = self.create_post(self.alice)
        response = self.client.delete(f"/api/v1/posts/{post['id']}", headers=self.bob)
        self.assertEqual(response.status_code, 403)
        response = self.client.delete(f"/api/v1/posts/{post['id']}", headers=self.alice)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f"/api/v1/posts/{post['id']}").status_code, 404)

    def test_list_newest_first(self):
        first = self.create_post(self.alice, "one")
        second = self.create_post(self.bob, "two")
        ids = [p["id"] for p in self.client.get("/api/v1/posts/").json()]
        self.assertEqual(ids, [second["id"], first["id"]])


if __name__ == "__main__":
    unittest.main()
