import os
import sys
import pytest

# Ensure the backend root (containing the `ryder` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from ryder import create_app, db, socketio
from ryder.errors import NotFoundError, PersistenceError


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['http://localhost:8080']
    NOTIFIER_QUEUE_SIZE = 8
    STRICT_STATUS_TRANSITIONS = False


class StrictConfig(TestConfig):
    STRICT_STATUS_TRANSITIONS = True


def _app(config):
    application = create_app(config)
    with application.app_context():
        # Ensure models are imported so tables are created
        import ryder.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def flask_app():
    yield from _app(TestConfig)


@pytest.fixture()
def strict_app():
    yield from _app(StrictConfig)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def seeded(client):
    """Two teams, one player each; returns their ids."""
    europe = client.post('/api/team/add', json={'name': 'Europe', 'color': '#003399'}).get_json()
    usa = client.post('/api/team/add', json={'name': 'USA', 'color': '#b22234'}).get_json()
    rory = client.post('/api/player/add', json={'name': 'Rory', 'hcp': 0.4, 'team_id': europe['id']}).get_json()
    scottie = client.post('/api/player/add', json={'name': 'Scottie', 'hcp': -1.2, 'team_id': usa['id']}).get_json()
    return {'europe': europe['id'], 'usa': usa['id'], 'rory': rory['id'], 'scottie': scottie['id']}


class FakeMatch:
    def __init__(self, record):
        self.id = record['id']
        self.status = record.get('status')
        self.holes = record.get('holes')


class FakeStore:
    """In-memory store with the same read/write surface as SqlStore."""

    def __init__(self, teams=None, matches=None, holes=None, failing=()):
        self.teams = teams or []
        self.matches = matches or []
        self.holes = holes or {}
        self.failing = set(failing)

    def list_teams(self):
        return [dict(t) for t in self.teams]

    def list_matches(self):
        return [dict(m) for m in self.matches]

    def get_match(self, match_id):
        for m in self.matches:
            if m['id'] == match_id:
                return FakeMatch(m)
        raise NotFoundError(f'Match {match_id} not found')

    def hole_results(self, match_id):
        if match_id in self.failing:
            raise PersistenceError(f'Could not load hole results for match {match_id}')
        return dict(self.holes.get(match_id, {}))

    def replace_hole_results(self, match_id, results):
        self.holes[match_id] = dict(results)

    def set_status(self, match_id, status):
        for m in self.matches:
            if m['id'] == match_id:
                m['status'] = status


@pytest.fixture()
def fake_store():
    return FakeStore
