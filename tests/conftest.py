import pytest

from returdesk import create_app, db
from returdesk.core.lifecycle import ReturnLifecycle
from returdesk.core.repository import InMemoryReturnRepository


@pytest.fixture
def app():
    app = create_app('returdesk.config.config.TestConfig')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repository():
    return InMemoryReturnRepository()


@pytest.fixture
def manager(repository):
    return ReturnLifecycle(repository)
