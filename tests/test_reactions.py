import asyncio
import unittest

from fritter_api.app.services.reaction_service import ReactionService
from fritter_api.app.services.user_service import UserService
from tests.base import ApiTestCase


class ReactionApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.register("alice")
        self.bob = self.register("bob")
        self.post = self.create_post(self.bob, "first post")

    def react(self, headers, symbol="like", post_id=None):
        return self.client.post(
            f"/api/v1/reactions/{post_id or self.post['id']}", json={"symbol": symbol}, headers=headers
        )

    def test_one_reaction_per_post_per_user(self):
        response = self.react(self.alice)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["reaction"]["symbol"], "like")
        self.assertEqual(response.json()["reaction"]["post_id"], self.post["id"])

        response = self.react(self.alice, "heart")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(
            response.json()["error"],
            "Cannot have more than one reaction per post per user. Please modify your reaction.",
        )

        # Another user may still react.
        self.assertEqual(self.react(self.bob, "dislike").status_code, 201)

        response = self.client.delete(f"/api/v1/reactions/{self.post['id']}", headers=self.alice)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.react(self.alice, "heart").status_code, 201)

    def test_create_errors(self):
        self.assertEqual(self.react({}).status_code, 403)
        response = self.react(self.alice, post_id="9999")
        self.assertEqual(response.status_code, 404)
        self.assertIn("postNotFound", response.json()["error"])
        response = self.react(self.alice, "love")
        self.assertEqual(response.status_code, 406)

    def test_update(self):
        self.react(self.alice)
        response = self.client.put(
            f"/api/v1/reactions/{self.post['id']}", json={"symbol": "HEART"}, headers=self.alice
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["reaction"]["symbol"], "heart")

        response = self.client.put(
            f"/api/v1/reactions/{self.post['id']}", json={"symbol": "heart"}, headers=self.bob
        )
        self.assertEqual(response.status_code, 404)
        self.assertIn("reactionNotFound", response.json()["error"])

        # Bob's rejected update neither touches Alice's reaction nor creates one.
        reactions = self.client.get("/api/v1/reactions/", params={"post_id": self.post["id"]}).json()
        self.assertEqual([(r["user"], r["symbol"]) for r in reactions], [("alice", "heart")])

    def test_rejected_update_leaves_reaction_unchanged(self):
        self.react(self.alice)
        alice_id = asyncio.run(UserService.get_by_username("alice")).id
        before = asyncio.run(ReactionService.find_by_user_and_post(alice_id, int(self.post["id"])))
        response = self.client.put(
            f"/api/v1/reactions/{self.post['id']}", json={"symbol": "love"}, headers=self.alice
        )
        self.assertEqual(response.status_code, 406)
        after = asyncio.run(ReactionService.find_by_user_and_post(alice_id, int(self.post["id"])))
        self.assertEqual(after, before)
        self.assertEqual(after.symbol, "like")

    def test_delete_without_reaction(self):
        response = self.client.delete(f"/api/v1/reactions/{self.post['id']}", headers=self.alice)
        self.assertEqual(response.status_code, 404)

    def test_list_filters(self):
        other = self.create_post(self.alice, "second post")
        self.react(self.alice)
        self.react(self.bob, post_id=other["id"])

        self.assertEqual(len(self.client.get("/api/v1/reactions/").json()), 2)

        response = self.client.get("/api/v1/reactions/", params={"post_id": self.post["id"]})
        self.assertEqual([r["user"] for r in response.json()], ["alice"])

        response = self.client.get("/api/v1/reactions/", params={"user": "bob"})
        self.assertEqual([r["post_id"] for r in response.json()], [other["id"]])

        self.assertEqual(self.client.get("/api/v1/reactions/", params={"post_id": "x"}).status_code, 404)
        self.assertEqual(self.client.get("/api/v1/reactions/", params={"user": "carol"}).status_code, 404)

    def test_deleting_post_removes_reactions(self):
        self.react(self.alice)
        response = self.client.delete(f"/api/v1/posts/{self.post['id']}", headers=self.bob)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/api/v1/reactions/").json(), [])


if __name__ == "__main__":
    unittest.main()
