"""
Shared fixtures: an app backed by a temporary data directory and an
in-process stand-in for the remote REST service.
"""
import json
import uuid
from urllib.parse import urlparse

import pytest
import requests

from lab_dashboard.core.remote_store import RemoteStore
from lab_dashboard.dashboard_app import DashboardApp


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self.content = b'' if body is None else json.dumps(body).encode('utf-8')

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.content)


class FakePostgrest:
    """Answers RemoteStore requests from in-memory tables"""

    def __init__(self):
        self.tables = {}
        self.calls = []
        self.fail_with = None

    def _rows(self, table):
        return self.tables.setdefault(table, [])

    @staticmethod
    def _matches(row, params):
        target = (params or {}).get('id')
        return target is None or f"eq.{row.get('id')}" == target

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({'method': method, 'url': url, 'params': params, 'json': json, 'headers': headers})
        if self.fail_with is not None:
            if isinstance(self.fail_with, Exception):
                raise self.fail_with
            return FakeResponse(self.fail_with, {'message': 'remote failure'})

        table = urlparse(url).path.rsplit('/', 1)[-1]
        rows = self._rows(table)

        if method == 'GET':
            return FakeResponse(200, list(rows))
        if method == 'POST':
            row = dict(json)
            row.setdefault('id', str(uuid.uuid4()))
            row.setdefault('created_at', '2024-05-01T00:00:00+00:00')
            rows.insert(0, row)
            return FakeResponse(201, [row])
        if method == 'PATCH':
            updated = []
            for row in rows:
                if self._matches(row, params):
                    row.update(json)
                    updated.append(row)
            return FakeResponse(200, updated)
        if method == 'DELETE':
            self.tables[table] = [r for r in rows if not self._matches(r, params)]
            return FakeResponse(204)
        return FakeResponse(405, {'message': 'method not allowed'})


@pytest.fixture
def fake_remote():
    return FakePostgrest()


@pytest.fixture
def app(tmp_path):
    """Dashboard with every collection in local storage"""
    dashboard = DashboardApp()
    app = dashboard.create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'RATELIMIT_ENABLED': False,
        'LOCAL_STORAGE_DIR': str(tmp_path / 'data'),
        'SUPABASE_URL': '',
        'SUPABASE_KEY': '',
    })
    return app


@pytest.fixture
def remote_app(tmp_path, fake_remote):
    """Dashboard whose remote tables are served by FakePostgrest"""
    dashboard = DashboardApp()
    app = dashboard.create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'RATELIMIT_ENABLED': False,
        'LOCAL_STORAGE_DIR': str(tmp_path / 'data'),
        'SUPABASE_URL': 'https://example.supabase.co',
        'SUPABASE_KEY': 'anon-key',
    })
    state = dashboard.state
    state.remote_store = RemoteStore('https://example.supabase.co', 'anon-key', session=fake_remote)
    state.repository.remote = state.remote_store
    return app


def _login(client):
    with client.session_transaction() as session:
        session['user'] = {'email': 'researcher@example.org'}
    return client


@pytest.fixture
def client(app):
    return _login(app.test_client())


@pytest.fixture
def anonymous_client(app):
    return app.test_client()


@pytest.fixture
def remote_client(remote_app):
    return _login(remote_app.test_client())


@pytest.fixture
def unreachable(fake_remote):
    """Make every remote call fail at the transport level"""
    fake_remote.fail_with = requests.exceptions.ConnectionError('connection refused')
    return fake_remote
