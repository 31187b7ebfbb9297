import random
import unittest

from app.errors import NotFoundError, ValidationError
from app.services import follow_service, media_service
from tests.base import AppTestCase


class TestMediaIdentifiers(unittest.TestCase):
    def test_image_url(self):
        self.assertEqual(
            media_service.media_identifiers("http://cdn.test/media/image/abc123.png"),
            ("abc123", "image"),
        )

    def test_video_detected_by_path(self):
        self.assertEqual(
            media_service.media_identifiers("http://cdn.test/media/video/abc123.bin"),
            ("abc123", "video"),
        )

    def test_video_detected_by_extension(self):
        for url in (
            "https://host/upload/v1/clip.mp4",
            "https://host/upload/v1/clip.mov",
            "https://host/upload/v1/clip.avi",
            "https://host/upload/v1/clip.webm",
        ):
            self.assertEqual(media_service.media_identifiers(url), ("clip", "video"))

    def test_query_string_is_ignored(self):
        self.assertEqual(
            media_service.media_identifiers("https://host/image/pic.jpg?x=1"),
            ("pic", "image"),
        )

    def test_unsupported_mimetype(self):
        with self.assertRaises(ValidationError):
            media_service.resource_type_for_mimetype("text/plain")


class TestSuggestionHelpers(unittest.TestCase):
    def test_sample_candidates_is_bounded_and_unique(self):
        rng = random.Random(7)
        sampled = follow_service.sample_candidates(range(100), 10, rng=rng)
        self.assertEqual(len(sampled), 10)
        self.assertEqual(len(set(sampled)), 10)
        self.assertTrue(set(sampled) <= set(range(100)))

    def test_sample_candidates_with_small_pool_returns_everything(self):
        sampled = follow_service.sample_candidates([3, 1, 2], 10, rng=random.Random(1))
        self.assertEqual(sorted(sampled), [1, 2, 3])

    def test_filter_followed(self):
        self.assertEqual(
            follow_service.filter_followed([5, 1, 9, 4, 7, 8], [1, 7], limit=3),
            [5, 9, 4],
        )


class TestGraphToggles(AppTestCase):
    def test_follow_toggle_keeps_both_sides_in_sync(self):
        alice_id = self._register("alice")
        bob_id = self._register("bob")

        from app.models.notification_model import Notification
        from app.models.user_model import User

        with self.app.app_context():
            self.assertEqual(follow_service.follow_unfollow(alice_id, bob_id), "followed")
            alice = self.db.session.get(User, alice_id)
            bob = self.db.session.get(User, bob_id)
            self.assertEqual(alice.following_ids, [bob_id])
            self.assertEqual(bob.follower_ids, [alice_id])

            self.assertEqual(follow_service.follow_unfollow(alice_id, bob_id), "unfollowed")
            self.db.session.expire_all()
            self.assertEqual(alice.following_ids, [])
            self.assertEqual(bob.follower_ids, [])
            self.assertEqual(Notification.query.filter_by(type="follow").count(), 1)

    def test_self_follow_is_rejected_even_for_unknown_ids(self):
        with self.app.app_context():
            with self.assertRaises(ValidationError):
                follow_service.follow_unfollow(404, 404)
            with self.assertRaises(NotFoundError):
                follow_service.follow_unfollow(404, 405)

    def test_sample_ids_except_is_bounded_and_skips_actor(self):
        alice_id = self._register("alice")
        other_ids = [self._register(f"user{i}") for i in range(12)]

        from app.repositories import user_repository

        with self.app.app_context():
            sampled = user_repository.sample_ids_except(alice_id, 10)
            everyone = user_repository.sample_ids_except(alice_id, 50)

        self.assertEqual(len(sampled), 10)
        self.assertEqual(len(set(sampled)), 10)
        self.assertTrue(set(sampled) <= set(other_ids))
        self.assertEqual(sorted(everyone), sorted(other_ids))

    def test_suggested_users_with_seeded_rng(self):
        alice_id = self._register("alice")
        other_ids = [self._register(f"user{i}") for i in range(12)]

        with self.app.app_context():
            suggested = follow_service.get_suggested_users(alice_id, rng=random.Random(3))
            suggested_ids = [user.id for user in suggested]

        self.assertEqual(len(suggested_ids), 4)
        self.assertTrue(set(suggested_ids) <= set(other_ids))


if __name__ == "__main__":
    unittest.main()
