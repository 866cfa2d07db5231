import unittest
from unittest import mock

import requests

from taskcal.backend.supabase import SupabaseClient
from taskcal.exceptions import AuthenticationError, BackendError


def make_response(ok=True, payload=None, status_code=200, text=""):
    response = mock.MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    return response


def make_session():
    session = mock.MagicMock()
    session.headers = {}
    return session


class TestSupabaseClient(unittest.TestCase):
    def test_anon_key_header(self):
        session = make_session()
        SupabaseClient("https://example.supabase.co/", "anon", session=session)
        self.assertEqual(session.headers["apikey"], "anon")

    def test_login_stores_token_and_user(self):
        session = make_session()
        session.post.return_value = make_response(
            payload={"access_token": "tok", "user": {"id": "u1", "email": "a@b.c"}}
        )
        client = SupabaseClient("https://example.supabase.co", "anon", session=session)

        client.login("a@b.c", "pw")

        self.assertEqual(client.token, "tok")
        self.assertEqual(client.user_id, "u1")
        self.assertEqual(session.headers["Authorization"], "Bearer tok")
        args, kwargs = session.post.call_args
        self.assertEqual(args[0], "https://example.supabase.co/auth/v1/token")
        self.assertEqual(kwargs["params"], {"grant_type": "password"})

    def test_login_rejected(self):
        session = make_session()
        session.post.return_value = make_response(ok=False, status_code=400)
        client = SupabaseClient("https://example.supabase.co", "anon", session=session)
        with self.assertRaises(AuthenticationError):
            client.login("a@b.c", "wrong")

    def test_network_failure_is_a_backend_error(self):
        session = make_session()
        session.post.side_effect = requests.ConnectionError("down")
        client = SupabaseClient("https://example.supabase.co", "anon", session=session)
        with self.assertRaises(BackendError):
            client.login("a@b.c", "pw")

    def test_select_requires_token(self):
        client = SupabaseClient("https://example.supabase.co", "anon", session=make_session())
        with self.assertRaises(AuthenticationError):
            client.list_tasks("ws-1")

    def test_list_tasks_filters_by_workspace(self):
        session = make_session()
        session.get.return_value = make_response(payload=[{"id": "t1"}])
        client = SupabaseClient(
            "https://example.supabase.co", "anon", access_token="tok", session=session
        )

        rows = client.list_tasks("ws-1")

        self.assertEqual(rows, [{"id": "t1"}])
        args, kwargs = session.get.call_args
        self.assertEqual(args[0], "https://example.supabase.co/rest/v1/tasks")
        self.assertEqual(kwargs["params"]["workspace_id"], "eq.ws-1")
        self.assertEqual(kwargs["params"]["select"], "*")

    def test_list_comments_without_tasks_skips_request(self):
        session = make_session()
        client = SupabaseClient(
            "https://example.supabase.co", "anon", access_token="tok", session=session
        )
        self.assertEqual(client.list_comments([]), [])
        session.get.assert_not_called()

    def test_failed_select_is_a_backend_error(self):
        session = make_session()
        session.get.return_value = make_response(ok=False, status_code=500)
        client = SupabaseClient(
            "https://example.supabase.co", "anon", access_token="tok", session=session
        )
        with self.assertRaises(BackendError):
            client.list_projects("ws-1")


if __name__ == "__main__":
    unittest.main(verbosity=2)
