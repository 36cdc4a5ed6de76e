"""Integration tests for the blob gateway against MinIO.

These tests verify that MinIO is properly configured and accessible
when running in Docker Compose, and that presigned upload grants
issued by the gateway are accepted by a real S3 implementation.
"""
import os
from typing import Final

import boto3
import pytest
import urllib3
from botocore.client import BaseClient
from botocore.exceptions import ClientError

from server.apps.shares.exceptions import NotFoundInStorageError
from server.apps.shares.infrastructure.storage import FileStorage

_TEST_BUCKET: Final = 'shares'
_TEST_FILE_KEY: Final = '1700000000000_abc123_test-file.txt'
_TEST_FILE_CONTENT: Final = b'Hello from MinIO integration test!'


@pytest.fixture
def minio_settings() -> dict[str, str]:
    """Read MinIO connection settings from the environment.

    Returns:
        Endpoint and credentials for MinIO.
    """
    return {
        'endpoint_url': os.getenv('MINIO_ENDPOINT', 'http://minio:9000'),
        'access_key': os.getenv('MINIO_ROOT_USER', 'minioadmin'),
        'secret_key': os.getenv('MINIO_ROOT_PASSWORD', 'minioadmin'),
    }


@pytest.fixture
def s3_client(minio_settings: dict[str, str]) -> BaseClient:
    """Create S3 client for MinIO.

    Args:
        minio_settings: MinIO endpoint and credentials.

    Returns:
        Configured boto3 S3 client for MinIO.
    """
    return boto3.client(
        's3',
        endpoint_url=minio_settings['endpoint_url'],
        aws_access_key_id=minio_settings['access_key'],
        aws_secret_access_key=minio_settings['secret_key'],
        region_name='us-east-1',
    )


@pytest.fixture
def test_bucket(s3_client: BaseClient) -> str:
    """Ensure test bucket exists.

    Args:
        s3_client: boto3 S3 client.

    Returns:
        Name of the test bucket.
    """
    try:
        s3_client.head_bucket(Bucket=_TEST_BUCKET)
    except ClientError:
        s3_client.create_bucket(Bucket=_TEST_BUCKET)

    return _TEST_BUCKET


@pytest.fixture
def gateway(minio_settings: dict[str, str], test_bucket: str) -> FileStorage:
    """Create the blob gateway for MinIO.

    Args:
        minio_settings: MinIO endpoint and credentials.
        test_bucket: Name of the test bucket.

    Returns:
        FileStorage bound to the MinIO bucket.
    """
    return FileStorage(
        bucket_name=test_bucket,
        region_name='us-east-1',
        querystring_auth=False,
        addressing_style='path',
        **minio_settings,
    )


@pytest.mark.integration
def test_presigned_upload(
    gateway: FileStorage,
    s3_client: BaseClient,
    test_bucket: str,
) -> None:
    """Test a client can PUT bytes using an issued grant.

    Args:
        gateway: Blob gateway for MinIO.
        s3_client: boto3 S3 client.
        test_bucket: Name of the test bucket.
    """
    grant = gateway.issue_upload_grant(_TEST_FILE_KEY, 'text/plain', 3600)

    response = urllib3.PoolManager().request(
        'PUT',
        grant.url,
        body=_TEST_FILE_CONTENT,
        headers={'Content-Type': 'text/plain'},
    )
    assert response.status == 200

    head = s3_client.head_object(Bucket=test_bucket, Key=_TEST_FILE_KEY)
    assert head['ContentLength'] == len(_TEST_FILE_CONTENT)


@pytest.mark.integration
def test_stat_object(
    gateway: FileStorage,
    s3_client: BaseClient,
    test_bucket: str,
) -> None:
    """Test stat reads size and content type from MinIO.

    Args:
        gateway: Blob gateway for MinIO.
        s3_client: boto3 S3 client.
        test_bucket: Name of the test bucket.
    """
    s3_client.put_object(
        Bucket=test_bucket,
        Key=_TEST_FILE_KEY,
        Body=_TEST_FILE_CONTENT,
        ContentType='text/plain',
    )

    metadata = gateway.stat_object(_TEST_FILE_KEY)

    assert metadata.size_bytes == len(_TEST_FILE_CONTENT)
    assert metadata.content_type == 'text/plain'


@pytest.mark.integration
def test_stat_missing_object(
    gateway: FileStorage,
    s3_client: BaseClient,
    test_bucket: str,
) -> None:
    """Test stat of a deleted object raises NotFoundInStorageError.

    Args:
        gateway: Blob gateway for MinIO.
        s3_client: boto3 S3 client.
        test_bucket: Name of the test bucket.
    """
    s3_client.delete_object(Bucket=test_bucket, Key=_TEST_FILE_KEY)

    with pytest.raises(NotFoundInStorageError):
        gateway.stat_object(_TEST_FILE_KEY)


@pytest.mark.integration
def test_public_read_url(gateway: FileStorage) -> None:
    """Test public URL points at the MinIO endpoint.

    Args:
        gateway: Blob gateway for MinIO.
    """
    url = gateway.public_read_url(_TEST_FILE_KEY)

    assert url.startswith(gateway.endpoint_url)
    assert url.endswith(_TEST_FILE_KEY)
