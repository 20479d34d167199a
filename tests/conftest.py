import pytest

from sorting_visualizer.app import RUNS, app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    RUNS.clear()
    yield flask_app
    RUNS.clear()


@pytest.fixture
def client(app):
    return app.test_client()
