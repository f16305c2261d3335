"""
Test configuration and fixtures
"""
import pytest
from flask import Flask

from page_window import init_app, paginator_from_request


def make_app(config=None):
    app = Flask(__name__)
    app.config.update(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret-key",
        }
    )
    if config:
        app.config.update(config)
    init_app(app)

    @app.route("/books/")
    def list_books():
        paginator = paginator_from_request(total_items=95)
        return {
            "current_page": paginator.current_page,
            "items_per_page": paginator.items_per_page,
            "num_pages": paginator.num_pages,
            "url_pattern": paginator.url_pattern,
            "previous_text": paginator.previous_text,
            "html": str(paginator.to_html()),
        }

    @app.route("/shelves/<int:shelf_id>/")
    def shelf_books(shelf_id):
        paginator = paginator_from_request(total_items=500)
        return {"url_pattern": paginator.url_pattern}

    return app


@pytest.fixture
def app():
    """Create a bare Flask application with the pagination helpers installed."""
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_factory():
    """Build an application with extra config applied before ``init_app``."""
    return make_app
