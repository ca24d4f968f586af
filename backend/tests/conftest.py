import os
import sys
import pytest

# Ensure the backend root (containing the `wordrace` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordrace import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    WTF_CSRF_ENABLED = False
    BCRYPT_LOG_ROUNDS = 4
    MATCH_PLACEHOLDER_WORD = 'FLUTTER'
    MATCH_WORDS = ''
    MATCH_TIME_LIMIT_SEC = 60
    MATCH_FINISH_ONCE = True


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import wordrace.models  # noqa: F401
        db.create_all()
    # Requests push their own app context so login state never leaks between clients
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(flask_app):
    with flask_app.app_context():
        yield flask_app
        db.session.remove()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def login_client(flask_app):
    """Return a factory producing test clients logged in as a fresh user."""
    def _login(username):
        c = flask_app.test_client()
        res = c.post('/users/add', json={'username': username, 'password': 'password'})
        assert res.status_code == 201
        res = c.post('/login', json={'username': username, 'password': 'password'})
        assert res.status_code == 200
        c.user_id = str(res.get_json()['user']['id'])
        return c
    return _login


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
