import pytest

from tasksvc.config import Settings
from tasksvc.store import TaskStore
from tasksvc.todo import create_app


@pytest.fixture
def settings():
    return Settings(seed=False)


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def app(store, settings):
    app = create_app(store=store, settings=settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_payload():
    return {"id": "3", "description": "x", "note": "y", "applications": ["a"]}
