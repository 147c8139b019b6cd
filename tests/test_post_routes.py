import os
import tempfile
import unittest


class TestPostRoutes(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from threadboard import create_app
        from threadboard.db import db
        from threadboard.repositories import user_repository

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": "test-secret-key-for-threadboard-suite",
        })
        cls.client = cls.app.test_client()
        cls.db = db
        cls.user_repository = user_repository

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
            self.alice_id = self.user_repository.create_user("alice").id
            self.bob_id = self.user_repository.create_user("bob").id

    def _auth_header(self, user_id):
        from flask_jwt_extended import create_access_token

        with self.app.app_context():
            token = create_access_token(identity=str(user_id))
        return {"Authorization": f"Bearer {token}"}

    def _create_post(self, user_id, **fields):
        payload = {"title": "a title", "body": "a body"}
        payload.update(fields)
        return self.client.post("/api/posts", json=payload, headers=self._auth_header(user_id))

    def test_create_post_requires_auth(self):
        response = self.client.post("/api/posts", json={"title": "t", "body": "b"})
        self.assertEqual(response.status_code, 401)

    def test_create_and_get_post(self):
        response = self._create_post(self.alice_id, allow_comments=False)
        self.assertEqual(response.status_code, 201)
        created = response.get_json()
        self.assertEqual(created["author_id"], self.alice_id)
        self.assertFalse(created["allow_comments"])

        get_resp = self.client.get(f"/api/posts/{created['id']}")
        self.assertEqual(get_resp.status_code, 200)
        self.assertEqual(get_resp.get_json()["title"], "a title")

    def test_create_post_rejects_invalid_json(self):
        response = self.client.post(
            "/api/posts",
            data="not-json",
            headers={**self._auth_header(self.alice_id), "Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Invalid JSON body")

    def test_create_post_rejects_missing_title(self):
        response = self._create_post(self.alice_id, title="  ")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Post title is required")

    def test_get_missing_post(self):
        self.assertEqual(self.client.get("/api/posts/404").status_code, 404)

    def test_list_posts_by_author(self):
        self._create_post(self.alice_id, title="one")
        self._create_post(self.bob_id, title="bob's")
        self._create_post(self.alice_id, title="two")

        response = self.client.get(f"/api/users/{self.alice_id}/posts")
        self.assertEqual(response.status_code, 200)
        titles = [post["title"] for post in response.get_json()]
        self.assertEqual(sorted(titles), ["one", "two"])

    def test_only_owner_can_update_or_delete(self):
        post_id = self._create_post(self.alice_id).get_json()["id"]

        response = self.client.patch(
            f"/api/posts/{post_id}",
            json={"title": "mine now"},
            headers=self._auth_header(self.bob_id),
        )
        self.assertEqual(response.status_code, 403)

        response = self.client.delete(
            f"/api/posts/{post_id}",
            headers=self._auth_header(self.bob_id),
        )
        self.assertEqual(response.status_code, 403)

    def test_partial_update(self):
        post_id = self._create_post(self.alice_id).get_json()["id"]

        response = self.client.patch(
            f"/api/posts/{post_id}",
            json={"allow_comments": False},
            headers=self._auth_header(self.alice_id),
        )
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertFalse(body["allow_comments"])
        self.assertEqual(body["title"], "a title")

    def test_update_with_nothing_to_change(self):
        post_id = self._create_post(self.alice_id).get_json()["id"]

        response = self.client.patch(
            f"/api/posts/{post_id}",
            json={},
            headers=self._auth_header(self.alice_id),
        )
        self.assertEqual(response.status_code, 400)

    def test_delete_post_removes_comments(self):
        headers = self._auth_header(self.alice_id)
        post_id = self._create_post(self.alice_id).get_json()["id"]
        comment_id = self.client.post(
            f"/api/posts/{post_id}/comments",
            json={"body": "soon gone"},
            headers=headers,
        ).get_json()["id"]

        response = self.client.delete(f"/api/posts/{post_id}", headers=headers)
        self.assertEqual(response.status_code, 200)

        self.assertEqual(self.client.get(f"/api/posts/{post_id}").status_code, 404)
        self.assertEqual(self.client.get(f"/api/comments/{comment_id}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
