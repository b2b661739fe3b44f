"""
Pytest configuration and fixtures for API testing.

By default the tests drive the Flask test client. Set TEST_BASE_URL to run
the same tests against a live server (started with BLOG_TEST_ROUTES=1).
"""
import pytest
import requests
import time
import os

from blogposts import PostStore, counter_ids, create_app

BASE_URL = os.environ.get('TEST_BASE_URL')


def wait_for_server(url: str, timeout: int = 30) -> bool:
    """Wait for the server to be ready."""
    start = time.time()
    while time.time() - start < timeout:
        try:
            r = requests.get(f"{url}/posts", timeout=2)
            if r.status_code == 200:
                return True
        except requests.exceptions.ConnectionError:
            pass
        time.sleep(0.5)
    return False


class LocalResponse:
    """Gives Flask test responses the parts of the requests.Response API the tests use."""

    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code
        self.headers = resp.headers
        self.text = resp.get_data(as_text=True)

    def json(self):
        return self._resp.get_json()


class APIClient:
    """API client - helper methods for API calls."""

    def __init__(self, base_url: str = None, test_client=None):
        self.base_url = base_url
        self.test_client = test_client

    def request(self, method: str, path: str, json=None, data=None):
        if self.test_client is not None:
            resp = self.test_client.open(path, method=method.upper(), json=json, data=data)
            return LocalResponse(resp)
        return requests.request(method, f"{self.base_url}{path}", json=json, data=data)

    def get(self, path: str):
        return self.request('get', path)

    def post(self, path: str, json: dict = None, data=None):
        return self.request('post', path, json=json, data=data)

    def put(self, path: str, json: dict = None, data=None):
        return self.request('put', path, json=json, data=data)

    def delete(self, path: str):
        return self.request('delete', path)

    def reset(self):
        """Clear all posts."""
        r = self.post('/test/reset')
        assert r.status_code == 200, f"Reset failed: {r.text}"

    def bulk_posts(self, posts: list) -> dict:
        """Insert multiple posts."""
        r = self.post('/test/bulk-posts', json={'posts': posts})
        assert r.status_code == 200, f"Bulk posts failed: {r.text}"
        return r.json()


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / 'logs.txt'


@pytest.fixture
def app(log_file):
    """App with counter ids, a fixed clock and the two example posts."""
    return create_app(
        {'TESTING': True, 'LOG_FILE': str(log_file)},
        store=PostStore(id_factory=counter_ids(), clock=lambda: 1700000000000),
    )


@pytest.fixture
def api(app):
    """API client fixture - in-process unless TEST_BASE_URL is set."""
    if BASE_URL:
        if not wait_for_server(BASE_URL):
            pytest.fail(f"Server at {BASE_URL} not ready after 30s")
        return APIClient(base_url=BASE_URL)
    return APIClient(test_client=app.test_client())


@pytest.fixture
def clean_db(api):
    """Empty the store before each test."""
    api.reset()
    yield
