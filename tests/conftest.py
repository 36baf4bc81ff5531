from unittest.mock import MagicMock

import pytest

from app import create_app
from extensions import db

CSRF_TOKEN = "test-csrf-token"


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "S3_BUCKET": "test-bucket",
            "AWS_REGION": "eu-west-1",
            "S3_ENDPOINT_URL": None,
            "S3_PUBLIC_URL": None,
            "CORS_ENABLED": False,
            "TRAP_BAD_REQUEST_ERRORS": False,
        }
    )
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def s3_client(app):
    # Подменяем клиент boto3, чтобы тесты не обращались к сети
    client = MagicMock()
    app.extensions["s3_bucket"].client = client
    return client


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def csrf_token(client):
    with client.session_transaction() as sess:
        sess["csrf_token"] = CSRF_TOKEN
    return CSRF_TOKEN
