import os
import sys
import pytest

# Ensure the backend root (containing the `rocketshooter` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from rocketshooter import create_app, socketio
from rocketshooter.models import GameSession
from rocketshooter.services.game import lifecycle


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    GEMINI_API_KEY = 'test-key'
    GEMINI_MODEL = 'gemini-2.5-flash'
    GEMINI_API_URL = 'https://gemini.test/v1beta/models'
    FACT_TIMEOUT_SEC = 1
    TICK_INTERVAL_MS = 50
    SPAWN_BASE_INTERVAL_MS = 2000
    FACT_INTERVAL_MS = 10000


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
    from rocketshooter import socketio_events
    socketio_events._sessions.clear()


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
def session():
    return GameSession(sid='test-sid')


@pytest.fixture()
def running(session):
    lifecycle.start_game(session)
    return session


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=''):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._payload is None:
            raise ValueError('no json')
        return self._payload


class FakeGemini:
    """Stands in for requests.post and records every call."""

    def __init__(self):
        self.calls = []
        self.respond({'candidates': [{'content': {'parts': [{'text': 'Rockets carry their own oxidiser.'}]}}]})

    def respond(self, payload=None, status_code=200, text=''):
        self._result = FakeResponse(payload, status_code, text)

    def fail(self, exc):
        self._result = exc

    def post(self, url, **kwargs):
        self.calls.append({'url': url, **kwargs})
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


@pytest.fixture()
def fake_gemini(monkeypatch):
    import requests
    fake = FakeGemini()
    monkeypatch.setattr(requests, 'post', fake.post)
    return fake
