"""Pytest fixtures for Flask application testing."""

import os
from datetime import datetime

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


TEST_ARTICLES = [
    {
        "id": 1,
        "title": "First test post!",
        "style": "How-to",
        "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit.",
        "date_published": "2029-01-22T16:28:32.615Z",
    },
    {
        "id": 2,
        "title": "Second test post!",
        "style": "News",
        "content": "Natus consequuntur deserunt commodi, nobis qui inventore corrupti.",
        "date_published": "2100-05-22T16:28:32.615Z",
    },
    {
        "id": 3,
        "title": "Third test post!",
        "style": "Listicle",
        "content": "Possimus, voluptate? Necessitatibus, reiciendis? Cupiditate totam.",
        "date_published": "1919-12-22T16:28:32.615Z",
    },
    {
        "id": 4,
        "title": "Fourth test post!",
        "style": "Story",
        "content": "Earum molestiae accusamus veniam consectetur tempora.",
        "date_published": "1919-12-22T16:28:32.615Z",
    },
]

MALICIOUS_ARTICLE = {
    "id": 911,
    "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
    "style": "How-to",
    "content": (
        'Bad image <img src="https://url.to.file.which/does-not.exist" '
        'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
    ),
    "date_published": "2020-03-01T08:00:00.000Z",
}

SANITIZED_ARTICLE = {
    **MALICIOUS_ARTICLE,
    "title": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
    "content": (
        'Bad image <img src="https://url.to.file.which/does-not.exist">. '
        "But not <strong>all</strong> bad."
    ),
}


def _parse_date(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _insert_articles(db, rows):
    from blogful.models import Article

    for row in rows:
        db.session.add(Article(**{**row, "date_published": _parse_date(row["date_published"])}))
    db.session.commit()


@pytest.fixture
def app():
    """Create test application."""
    from blogful import create_app
    from blogful.config import TestConfig

    app = create_app(TestConfig)

    yield app


@pytest.fixture
def production_app():
    """Create test application running with production error handling."""
    from blogful import create_app
    from blogful.config import TestConfig

    class ProductionTestConfig(TestConfig):
        ENVIRONMENT = "production"

    return create_app(ProductionTestConfig)


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from blogful.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def articles(db):
    """Insert the standard test articles; returns their serialized form."""
    _insert_articles(db, TEST_ARTICLES)
    return [dict(article) for article in TEST_ARTICLES]


@pytest.fixture
def malicious_article(db):
    """Insert an article carrying script markup; returns its sanitized form."""
    _insert_articles(db, [MALICIOUS_ARTICLE])
    return dict(SANITIZED_ARTICLE)


@pytest.fixture
def users(db):
    """Insert test users."""
    from blogful.models import User

    rows = [
        User(
            id=1,
            fullname="Sam Gamgee",
            username="sam.gamgee@shire.com",
            nickname="Sam",
            date_created=_parse_date("2029-01-22T16:28:32.615Z"),
        ),
        User(
            id=2,
            fullname='Peregrin <script>alert("xss");</script> Took',
            username="peregrin.took@shire.com",
            nickname=None,
            date_created=_parse_date("2100-05-22T16:28:32.615Z"),
        ),
    ]
    db.session.add_all(rows)
    db.session.commit()
    return rows
