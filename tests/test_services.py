import asyncio
import unittest
from datetime import timedelta

from fritter_api.app.core.db import MAX_ID, parse_id
from fritter_api.app.services.display_service import DisplayService
from fritter_api.app.services.incognito_service import IncognitoService
from fritter_api.app.services.post_service import PostService
from fritter_api.app.services.profile_service import ProfileService
from fritter_api.app.services.reaction_service import ReactionService
from fritter_api.app.services.user_service import UserService
from tests.base import DatabaseTestCase


class ParseIdTests(unittest.TestCase):
    def test_parse_id(self):
        self.assertEqual(parse_id("12"), 12)
        self.assertIsNone(parse_id(""))
        self.assertIsNone(parse_id("-1"))
        self.assertIsNone(parse_id("1a"))
        self.assertIsNone(parse_id("١٢"))
        self.assertIsNone(parse_id(None))
        self.assertEqual(parse_id(str(MAX_ID)), MAX_ID)
        self.assertIsNone(parse_id(str(MAX_ID + 1)))
        self.assertIsNone(parse_id("99999999999999999999"))


class ServiceTests(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        self.user = asyncio.run(UserService.create_user("alice", "secret"))

    def test_create_user_duplicate(self):
        with self.assertRaises(ValueError):
            asyncio.run(UserService.create_user("Alice", "other"))

    def test_authenticate(self):
        self.assertIsNotNone(asyncio.run(UserService.authenticate("alice", "secret")))
        self.assertIsNone(asyncio.run(UserService.authenticate("alice", "nope")))
        self.assertTrue(asyncio.run(UserService.set_password(self.user.id, "new")))
        self.assertIsNotNone(asyncio.run(UserService.authenticate("alice", "new")))

    def test_create_for_missing_owner(self):
        with self.assertRaises(ValueError):
            asyncio.run(DisplayService.create_display(999))
        with self.assertRaises(ValueError):
            asyncio.run(IncognitoService.create_incognito(999))
        with self.assertRaises(ValueError):
            asyncio.run(ProfileService.create_profile(999, "h", "personal", None))

    def test_profile_lookup_by_handle(self):
        first = asyncio.run(ProfileService.create_profile(self.user.id, "Same", "Personal", None))
        asyncio.run(ProfileService.create_profile(self.user.id, "same", "business", "b"))
        found = asyncio.run(ProfileService.get_by_handle("  SAME "))
        self.assertEqual(found.id, first.id)
        self.assertEqual(found.type, "personal")
        self.assertEqual(found.user.username, "alice")

    def test_update_keeps_omitted_fields(self):
        profile = asyncio.run(ProfileService.create_profile(self.user.id, "h", "private", "bio"))
        updated = asyncio.run(ProfileService.update_profile(profile.id, "h2"))
        self.assertEqual((updated.handle, updated.type, updated.bio), ("h2", "private", "bio"))

    def test_timestamps_are_stored_in_utc(self):
        display = asyncio.run(DisplayService.create_display(self.user.id, "dark"))
        self.assertEqual(display.date_modified.utcoffset(), timedelta(0))
        self.assertEqual(self.user.date_joined.utcoffset(), timedelta(0))
        updated = asyncio.run(DisplayService.update_display(display.id, "accessible"))
        self.assertGreater(updated.date_modified, display.date_modified)
        newest = asyncio.run(DisplayService.list_displays())[0]
        self.assertEqual(newest.id, display.id)

    def test_reaction_lookup_and_cascade(self):
        post = asyncio.run(PostService.create_post(self.user.id, "hi"))
        reaction = asyncio.run(ReactionService.create_reaction(self.user.id, post.id, "Like"))
        self.assertEqual(reaction.symbol, "like")
        found = asyncio.run(ReactionService.find_by_user_and_post(self.user.id, post.id))
        self.assertEqual(found.id, reaction.id)

        self.assertTrue(asyncio.run(PostService.delete_post(post.id)))
        self.assertIsNone(asyncio.run(ReactionService.get_reaction(reaction.id)))

    def test_delete_user_cascades(self):
        asyncio.run(IncognitoService.create_incognito(self.user.id))
        asyncio.run(ProfileService.create_profile(self.user.id, "h", "private", None))
        post = asyncio.run(PostService.create_post(self.user.id, "hi"))
        asyncio.run(ReactionService.create_reaction(self.user.id, post.id, "heart"))

        self.assertTrue(asyncio.run(UserService.delete_user(self.user.id)))
        self.assertEqual(asyncio.run(DisplayService.list_displays()), [])
        self.assertEqual(asyncio.run(IncognitoService.list_incognitos()), [])
        self.assertEqual(asyncio.run(ProfileService.list_profiles()), [])
        self.assertEqual(asyncio.run(ReactionService.list_reactions()), [])
        self.assertEqual(asyncio.run(PostService.list_posts()), [])
        self.assertFalse(asyncio.run(UserService.delete_user(self.user.id)))


if __name__ == "__main__":
    unittest.main()
