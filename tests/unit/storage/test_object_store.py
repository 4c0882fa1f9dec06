from io import BytesIO

import boto3
import pytest
from botocore.config import Config
from botocore.exceptions import ClientError
from botocore.stub import ANY, Stubber

from src.tubely.config import StorageSettings
from src.tubely.storage.object_store import S3ObjectStore
from src.tubely.storage.storage_errors import SigningError, StorageUploadError


def build_client():
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        config=Config(signature_version="s3v4"),
    )


def test_put_object_sends_bucket_key_and_content_type() -> None:
    client = build_client()
    store = S3ObjectStore(client)

    with Stubber(client) as stubber:
        stubber.add_response(
            "put_object",
            {},
            {"Bucket": "tubely", "Key": "landscape/a.mp4", "Body": ANY, "ContentType": "video/mp4"},
        )
        store.put_object(
            bucket="tubely", key="landscape/a.mp4", body=BytesIO(b"mp4"), content_type="video/mp4"
        )
        stubber.assert_no_pending_responses()


def test_put_object_client_error_becomes_upload_error() -> None:
    client = build_client()
    store = S3ObjectStore(client)

    with Stubber(client) as stubber:
        stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
        with pytest.raises(StorageUploadError, match="AccessDenied"):
            store.put_object(
                bucket="tubely", key="other/b.mp4", body=BytesIO(b"mp4"), content_type="video/mp4"
            )


def test_presign_get_embeds_expiry() -> None:
    store = S3ObjectStore(build_client())

    url = store.presign_get(bucket="tubely", key="portrait/c.mp4", expires_in=900)

    assert "portrait/c.mp4" in url
    assert "X-Amz-Expires=900" in url


@pytest.mark.parametrize(("bucket", "key"), [("", "k.mp4"), ("tubely", "")])
def test_presign_get_rejects_empty_parts(bucket: str, key: str) -> None:
    with pytest.raises(SigningError):
        S3ObjectStore(build_client()).presign_get(bucket=bucket, key=key, expires_in=900)


class _RejectingClient:
    def generate_presigned_url(self, **kwargs):
        raise ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "GetObject")


class _EmptyUrlClient:
    def generate_presigned_url(self, **kwargs):
        return ""


def test_presign_get_client_error_becomes_signing_error() -> None:
    with pytest.raises(SigningError, match="AccessDenied"):
        S3ObjectStore(_RejectingClient()).presign_get(bucket="b", key="k.mp4", expires_in=900)


def test_presign_get_empty_url_is_signing_error() -> None:
    with pytest.raises(SigningError, match="empty"):
        S3ObjectStore(_EmptyUrlClient()).presign_get(bucket="b", key="k.mp4", expires_in=900)


def test_from_settings_uses_region_and_endpoint() -> None:
    store = S3ObjectStore.from_settings(
        StorageSettings(
            bucket="tubely",
            region="eu-west-1",
            endpoint_url="http://localhost:9000",
            signed_url_ttl_seconds=900,
        )
    )

    assert store.client.meta.region_name == "eu-west-1"
    assert store.client.meta.endpoint_url == "http://localhost:9000"
