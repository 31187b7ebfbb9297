import os
import tempfile
import unittest
from unittest.mock import patch


class FakeObject:
    def __init__(self, object_name):
        self.object_name = object_name


class FakeMinio:
    """In-memory stand-in for the handful of Minio calls the app makes."""

    def __init__(self):
        self.buckets = set()
        self.objects = {}
        self.removed = []

    def bucket_exists(self, bucket_name):
        return bucket_name in self.buckets

    def make_bucket(self, bucket_name):
        self.buckets.add(bucket_name)

    def put_object(self, bucket_name, object_name, data, length, content_type, part_size=0):
        payload = data.read() if length == -1 else data.read(length)
        self.objects[(bucket_name, object_name)] = (payload, content_type)

    def list_objects(self, bucket_name, prefix=None):
        return [
            FakeObject(name)
            for bucket, name in list(self.objects)
            if bucket == bucket_name and name.startswith(prefix or "")
        ]

    def remove_object(self, bucket_name, object_name):
        self.objects.pop((bucket_name, object_name), None)
        self.removed.append(object_name)


class FailingMinio:
    def bucket_exists(self, *args, **kwargs):
        raise RuntimeError("storage down")

    def list_objects(self, *args, **kwargs):
        raise RuntimeError("storage down")


class AppTestCase(unittest.TestCase):
    password = "pass12345"

    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from app import create_app
        from app.db import db

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": "test-secret-key-with-enough-length-for-hs256",
            "MINIO_PUBLIC_BASE_URL": "http://media.test",
            "MINIO_BUCKET": "media",
        })
        cls.client = cls.app.test_client()
        cls.db = db

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        with self.app.app_context():
            self.db.drop_all()
            self.db.create_all()

        self.minio = FakeMinio()
        self.minio_patch = patch(
            "app.services.media_service.get_minio_client",
            return_value=self.minio,
        )
        self.minio_patch.start()
        self.addCleanup(self.minio_patch.stop)

    def _register(self, username, full_name=None, email=None, password=None):
        response = self.client.post(
            "/api/auth/register",
            json={
                "username": username,
                "full_name": full_name or username.title(),
                "email": email or f"{username}@example.com",
                "password": password or self.password,
            },
        )
        self.assertEqual(response.status_code, 201, response.get_json())
        return response.get_json()["id"]

    def _auth_header(self, username, password=None):
        response = self.client.post(
            "/api/auth/login",
            json={"username": username, "password": password or self.password},
        )
        self.assertEqual(response.status_code, 200, response.get_json())
        return {"Authorization": f"Bearer {response.get_json()['access_token']}"}

    def _create_post(self, headers, text="hello"):
        response = self.client.post("/api/posts", json={"text": text}, headers=headers)
        self.assertEqual(response.status_code, 200, response.get_json())
        return response.get_json()
