import os
import sys
import pytest
import fakeredis

# Ensure the backend root (containing the `leaderboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from leaderboard import create_app, socketio

MASTER_TOKEN = 'master-secret'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    REDIS_URL = 'redis://localhost:6379/15'
    REDIS_SOCKET_TIMEOUT = 1
    REQUIRE_CREATION_TOKEN = True
    CREATION_TOKEN = MASTER_TOKEN
    CREATION_AUTH_SCHEME = 'Master'
    BOARD_AUTH_SCHEME = 'Bearer'
    MAX_PAGE_SIZE = 500
    CORS_ORIGINS = ['*']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def redis_server():
    return fakeredis.FakeServer()


@pytest.fixture()
def store(redis_server):
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture()
def flask_app(store):
    application = create_app(TestConfig, redis_client=store)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_app():
    def _make(redis_client, **overrides):
        config = type('OverrideConfig', (TestConfig,), overrides)
        return create_app(config, redis_client=redis_client)
    return _make


@pytest.fixture()
def master_headers():
    return {'Authorization': f'Master {MASTER_TOKEN}'}


@pytest.fixture()
def make_board(client, master_headers):
    def _make(name='speedrun', order='ASC'):
        res = client.post('/board/', json={'name': name, 'order': order}, headers=master_headers)
        assert res.status_code == 201
        return res.get_json()['data']
    return _make


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
