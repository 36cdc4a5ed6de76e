"""Custom storage backend for S3-compatible storage."""

import dataclasses
import datetime as dt
import logging
from typing import Final, final

from botocore.exceptions import ClientError
from django.core.files.storage import default_storage
from django.utils import timezone
from storages.backends.s3 import S3Storage

from server.apps.shares.exceptions import (
    ConfigurationError,
    NotFoundInStorageError,
)

logger = logging.getLogger(__name__)

# Error codes S3-compatible backends use for a missing key on HEAD
_MISSING_OBJECT_CODES: Final = frozenset(('404', 'NoSuchKey', 'NotFound'))


@final
@dataclasses.dataclass(frozen=True)
class UploadGrant:
    """Pre-authorized write target for a direct client upload."""

    url: str
    expires_at: dt.datetime


@final
@dataclasses.dataclass(frozen=True)
class ObjectMetadata:
    """Size and content type of a stored object."""

    size_bytes: int
    content_type: str | None


@final
class FileStorage(S3Storage):
    """Blob gateway over an S3-compatible bucket.

    Extends django-storages S3Storage with:
    - Presigned PUT grants so clients upload without proxying bytes
    - HEAD-based metadata lookups for finalized uploads
    - Unsigned public read URLs computed without a network call

    Credentials and bucket come from the constructor options
    (``STORAGES['default']['OPTIONS']``).
    """

    def issue_upload_grant(
        self,
        object_name: str,
        content_type: str,
        ttl_seconds: int,
    ) -> UploadGrant:
        """Create a presigned PUT URL for a single object.

        Args:
            object_name: Storage key the client will write to.
            content_type: Content type the client must send.
            ttl_seconds: Validity of the grant in seconds.

        Returns:
            UploadGrant with the URL and its absolute expiry time.

        Raises:
            ConfigurationError: If bucket or credentials are missing.
        """
        self._ensure_configured()
        expires_at = timezone.now() + dt.timedelta(seconds=ttl_seconds)
        try:
            url = self.connection.meta.client.generate_presigned_url(
                'put_object',
                Params={
                    'Bucket': self.bucket_name,
                    'Key': self._normalize_name(object_name),
                    'ContentType': content_type,
                },
                ExpiresIn=ttl_seconds,
                HttpMethod='PUT',
            )
        except Exception:
            logger.exception('Failed to issue upload grant: %s', object_name)
            raise
        logger.info(
            'Issued upload grant for %s (expires %s)',
            object_name,
            expires_at.isoformat(),
        )
        return UploadGrant(url=url, expires_at=expires_at)

    def stat_object(self, object_name: str) -> ObjectMetadata:
        """Fetch size and content type of a stored object.

        Args:
            object_name: Storage key to look up.

        Returns:
            ObjectMetadata with the stored size and content type.

        Raises:
            NotFoundInStorageError: If no object exists under that key.
            SuspiciousOperation: If the key escapes the bucket location.
            ClientError: For any other S3 failure.
        """
        try:
            response = self.connection.meta.client.head_object(
                Bucket=self.bucket_name,
                Key=self._normalize_name(object_name),
            )
        except ClientError as error:
            error_code = error.response.get('Error', {}).get('Code')
            if error_code in _MISSING_OBJECT_CODES:
                logger.warning('Object not found in storage: %s', object_name)
                raise NotFoundInStorageError(object_name) from error
            logger.exception('Failed to stat object: %s', object_name)
            raise

        return ObjectMetadata(
            size_bytes=response['ContentLength'],
            content_type=response.get('ContentType') or None,
        )

    def public_read_url(self, object_name: str) -> str:
        """Compute the public URL of a stored object.

        With ``querystring_auth`` disabled (or a custom domain set) the
        URL is built locally and carries no signature.

        Args:
            object_name: Storage key of the object.

        Returns:
            Fetchable URL for the object.
        """
        return self.url(object_name)

    def _ensure_configured(self) -> None:
        missing = [
            option
            for option, option_value in (
                ('bucket_name', self.bucket_name),
                ('access_key', self.access_key),
                ('secret_key', self.secret_key),
            )
            if not option_value
        ]
        if missing:
            logger.error(
                'Storage gateway is not configured, missing: %s',
                ', '.join(missing),
            )
            raise ConfigurationError(
                'Storage gateway is missing: {0}'.format(', '.join(missing)),
            )


def get_storage() -> FileStorage:
    """Get the configured default storage backend.

    Returns:
        FileStorage instance with proper S3 configuration.
    """
    return default_storage  # type: ignore[return-value]
