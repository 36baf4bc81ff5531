import io
from unittest.mock import MagicMock, patch

import pytest

from utils.storage import S3Bucket, StoredObject, create_s3_client, get_bucket


@pytest.fixture
def bucket():
    return S3Bucket(client=MagicMock(), name="media", region="eu-central-1")


def test_public_url_uses_virtual_hosted_style(bucket):
    assert bucket.public_url("cat.jpg") == "https://media.s3.eu-central-1.amazonaws.com/cat.jpg"


def test_public_url_quotes_key_but_keeps_slashes(bucket):
    url = bucket.public_url("docs/annual report #1.pdf")

    assert url == "https://media.s3.eu-central-1.amazonaws.com/docs/annual%20report%20%231.pdf"


def test_public_url_with_custom_endpoint():
    bucket = S3Bucket(
        client=MagicMock(),
        name="media",
        region="us-east-1",
        endpoint_url="http://localhost:9000/",
    )

    assert bucket.public_url("cat.jpg") == "http://localhost:9000/media/cat.jpg"


def test_public_url_prefers_public_base_url():
    bucket = S3Bucket(
        client=MagicMock(),
        name="media",
        region="us-east-1",
        endpoint_url="http://localhost:9000",
        public_base_url="https://cdn.example.com/files/",
    )

    assert bucket.public_url("cat.jpg") == "https://cdn.example.com/files/cat.jpg"


def test_write_uploads_with_acl_and_content_type(bucket):
    stream = io.BytesIO(b"bytes")

    stored = bucket.write("cat.jpg", stream, acl="public-read", content_type="image/jpeg")

    bucket.client.upload_fileobj.assert_called_once_with(
        stream,
        "media",
        "cat.jpg",
        ExtraArgs={"ACL": "public-read", "ContentType": "image/jpeg"},
    )
    assert stored == StoredObject(
        key="cat.jpg",
        public_url="https://media.s3.eu-central-1.amazonaws.com/cat.jpg",
    )


def test_write_without_content_type_sends_only_acl(bucket):
    bucket.write("notes", io.BytesIO(b"x"))

    _, kwargs = bucket.client.upload_fileobj.call_args
    assert kwargs["ExtraArgs"] == {"ACL": "public-read"}


def test_write_propagates_client_errors(bucket):
    bucket.client.upload_fileobj.side_effect = RuntimeError("connection reset")

    with pytest.raises(RuntimeError):
        bucket.write("cat.jpg", io.BytesIO(b"x"))


def test_create_s3_client_passes_explicit_credentials():
    config = {
        "AWS_REGION": "eu-west-1",
        "S3_ENDPOINT_URL": "http://localhost:9000",
        "AWS_ACCESS_KEY_ID": "key",
        "AWS_SECRET_ACCESS_KEY": "secret",
    }

    with patch("utils.storage.boto3.client") as boto_client:
        create_s3_client(config)

    boto_client.assert_called_once_with(
        "s3",
        region_name="eu-west-1",
        endpoint_url="http://localhost:9000",
        aws_access_key_id="key",
        aws_secret_access_key="secret",
    )


def test_create_s3_client_falls_back_to_default_credentials():
    config = {
        "AWS_REGION": "eu-west-1",
        "S3_ENDPOINT_URL": None,
        "AWS_ACCESS_KEY_ID": None,
        "AWS_SECRET_ACCESS_KEY": None,
    }

    with patch("utils.storage.boto3.client") as boto_client:
        create_s3_client(config)

    boto_client.assert_called_once_with("s3", region_name="eu-west-1")


def test_app_registers_configured_bucket(app):
    with app.app_context():
        bucket = get_bucket()

    assert bucket.name == "test-bucket"
    assert bucket.region == "eu-west-1"
    assert bucket.endpoint_url is None
