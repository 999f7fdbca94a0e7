import asyncio
import unittest

from fritter_api.app.services.display_service import DisplayService
from tests.base import ApiTestCase


class DisplayApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.register("alice")
        self.bob = self.register("bob")
        self.display_id = self.client.get("/api/v1/displays/", params={"author": "alice"}).json()["id"]

    def test_list_all_displays(self):
        response = self.client.get("/api/v1/displays/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual({d["author"] for d in response.json()}, {"alice", "bob"})

    def test_author_query_errors(self):
        response = self.client.get("/api/v1/displays/", params={"author": ""})
        self.assertEqual(response.status_code, 400)
        response = self.client.get("/api/v1/displays/", params={"author": "carol"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.json(),
            {"error": {"userNotFound": "A user with username carol does not exist."}},
        )

    def test_update_display(self):
        response = self.client.put(
            f"/api/v1/displays/{self.display_id}", json={"display_type": "DARK"}, headers=self.alice
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "Your display was updated successfully.")
        self.assertEqual(body["display"]["display_type"], "dark")

    def test_update_rejects_unknown_type(self):
        response = self.client.put(
            f"/api/v1/displays/{self.display_id}", json={"display_type": "neon"}, headers=self.alice
        )
        self.assertEqual(response.status_code, 406)
        self.assertEqual(
            response.json()["error"], "Display type must be either `default`, `dark`, `accessible`."
        )

    def test_update_chain_order(self):
        # Not logged in beats everything else.
        response = self.client.put("/api/v1/displays/999", json={"display_type": "neon"})
        self.assertEqual(response.status_code, 403)
        # Missing display beats a bad type.
        response = self.client.put("/api/v1/displays/999", json={"display_type": "neon"}, headers=self.alice)
        self.assertEqual(response.status_code, 404)
        self.assertIn("displayNotFound", response.json()["error"])
        # Wrong owner beats a bad type.
        response = self.client.put(
            f"/api/v1/displays/{self.display_id}", json={"display_type": "neon"}, headers=self.bob
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "Cannot modify other users' displays.")

    def test_rejected_update_leaves_display_unchanged(self):
        before = asyncio.run(DisplayService.get_display(int(self.display_id)))
        response = self.client.put(
            f"/api/v1/displays/{self.display_id}", json={"display_type": "dark"}, headers=self.bob
        )
        self.assertEqual(response.status_code, 403)
        after = asyncio.run(DisplayService.get_display(int(self.display_id)))
        self.assertEqual(after, before)
        self.assertEqual(after.display_type, "default")

    def test_malformed_id_is_not_found(self):
        response = self.client.delete("/api/v1/displays/abc", headers=self.alice)
        self.assertEqual(response.status_code, 404)

    def test_out_of_range_id_is_not_found(self):
        huge = "99999999999999999999"
        response = self.client.delete(f"/api/v1/displays/{huge}", headers=self.alice)
        self.assertEqual(response.status_code, 404)
        self.assertIn("displayNotFound", response.json()["error"])

        response = self.client.get(f"/api/v1/posts/{huge}")
        self.assertEqual(response.status_code, 404)
        self.assertIn("postNotFound", response.json()["error"])

        response = self.client.get("/api/v1/reactions/", params={"post_id": huge})
        self.assertEqual(response.status_code, 404)

        response = self.client.delete("/api/v1/incognitos/", params={"id": huge}, headers=self.alice)
        self.assertEqual(response.status_code, 404)
        self.assertIn("incognitoNotFound", response.json()["error"])

        response = self.client.delete(f"/api/v1/profiles/{huge}", headers=self.alice)
        self.assertEqual(response.status_code, 404)
        self.assertIn("profileNotFound", response.json()["error"])

    def test_delete_then_create(self):
        response = self.client.delete(f"/api/v1/displays/{self.display_id}", headers=self.alice)
        self.assertEqual(response.status_code, 200)
        response = self.client.get("/api/v1/displays/", params={"author": "alice"})
        self.assertEqual(response.status_code, 404)
        self.assertIn("displayNotFound", response.json()["error"])

        response = self.client.post("/api/v1/displays/", json={"display_type": "accessible"}, headers=self.alice)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["display"]["display_type"], "accessible")

    def test_create_defaults_to_default_type(self):
        self.client.delete(f"/api/v1/displays/{self.display_id}", headers=self.alice)
        response = self.client.post("/api/v1/displays/", json={}, headers=self.alice)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["display"]["display_type"], "default")


if __name__ == "__main__":
    unittest.main()
