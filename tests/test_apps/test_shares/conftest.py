"""Shared fixtures for shares app tests."""

from typing import Final

import boto3
import pytest
from moto import mock_aws

from server.apps.shares.infrastructure.storage import FileStorage
from server.apps.shares.models import FileRecord

TEST_BUCKET: Final = 'shares'

_STORAGE_OPTIONS: Final = {
    'bucket_name': TEST_BUCKET,
    'access_key': 'testing',
    'secret_key': 'testing',
    'region_name': 'us-east-1',
    'querystring_auth': False,
    'default_acl': None,
}


@pytest.fixture
def mock_s3():
    """Mock S3 service with shares bucket.

    Yields:
        boto3 S3 resource with shares bucket created.
    """
    with mock_aws():
        # Create S3 resource
        conn = boto3.resource('s3', region_name='us-east-1')

        # Create bucket
        conn.create_bucket(Bucket=TEST_BUCKET)

        yield conn


@pytest.fixture
def storage(mock_s3):
    """Blob gateway bound to the mocked bucket.

    Returns:
        FileStorage configured with fake credentials.
    """
    return FileStorage(**_STORAGE_OPTIONS)


@pytest.fixture
def default_storage_configured(settings, mock_s3):
    """Point the default storage at the mocked bucket.

    Used by tests that go through views or logic without passing
    a storage explicitly.
    """
    settings.STORAGES = {
        **settings.STORAGES,
        'default': {
            'BACKEND': (
                'server.apps.shares.infrastructure.storage.FileStorage'
            ),
            'OPTIONS': _STORAGE_OPTIONS,
        },
    }


@pytest.fixture
def upload_object(mock_s3):
    """Put an object into the mocked bucket, like a client upload would.

    Returns:
        Callable taking object name, body and optional content type.
    """
    def factory(
        object_name: str,
        body: bytes = b'test file content',
        content_type: str | None = None,
    ) -> None:
        extra = {'ContentType': content_type} if content_type else {}
        mock_s3.Bucket(TEST_BUCKET).put_object(
            Key=object_name,
            Body=body,
            **extra,
        )

    return factory


@pytest.fixture
def file_record(db):
    """Create a committed file record.

    Returns:
        FileRecord instance for testing.
    """
    return FileRecord.objects.create(
        slug='Ab3dEf7h',
        object_name='1700000000000_abc123_report.pdf',
        size_bytes=1024,
        content_type='application/pdf',
    )


@pytest.fixture
def default_storage_with_location(settings, mock_s3):
    """Point the default storage at a key prefix inside the mocked bucket.

    Object names resolving outside the prefix are refused by the backend.
    """
    settings.STORAGES = {
        **settings.STORAGES,
        'default': {
            'BACKEND': (
                'server.apps.shares.infrastructure.storage.FileStorage'
            ),
            'OPTIONS': {**_STORAGE_OPTIONS, 'location': 'uploads'},
        },
    }
