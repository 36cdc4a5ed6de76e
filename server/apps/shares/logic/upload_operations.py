"""Business logic for the upload handshake.

Uploads happen in three steps:

1. ``request_upload`` hands out a slug, an object name and a presigned
   URL. Nothing is persisted.
2. The client PUTs the bytes straight to object storage.
3. ``finalize_upload`` checks the stored object and commits the file
   record. It is the only durability boundary and is idempotent.
"""

import dataclasses
import logging
from typing import Final, final

from django.core.exceptions import ValidationError

from server.apps.shares.exceptions import PayloadTooLargeError
from server.apps.shares.infrastructure.identifiers import (
    new_object_name,
    new_slug,
)
from server.apps.shares.infrastructure.storage import FileStorage, get_storage
from server.apps.shares.logic.record_operations import (
    find_record,
    insert_record,
)

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES: Final = 200 * 1024 * 1024  # 209,715,200 bytes
UPLOAD_GRANT_TTL_SECONDS: Final = 3600


@final
@dataclasses.dataclass(frozen=True)
class UploadTicket:
    """Answer to an upload request: where and under which names to upload."""

    slug: str
    object_name: str
    upload_url: str
    max_bytes: int


@final
@dataclasses.dataclass(frozen=True)
class FinalizedUpload:
    """Committed upload as returned to the client."""

    link_path: str
    size_bytes: int
    content_type: str | None


def _require(field_name: str, field_value: str) -> None:
    if not field_value:
        raise ValidationError(f'{field_name} cannot be empty')


def request_upload(
    filename: str,
    content_type: str,
    storage: FileStorage | None = None,
) -> UploadTicket:
    """Reserve names for an upload and issue a direct upload grant.

    Args:
        filename: Original client filename.
        content_type: Content type the client will upload with.
        storage: Blob gateway; the default storage when omitted.

    Returns:
        UploadTicket with slug, object name, upload URL and size ceiling.

    Raises:
        ValidationError: If filename or content type is empty.
        ConfigurationError: If the gateway cannot issue a grant.
    """
    _require('filename', filename)
    _require('contentType', content_type)
    storage = storage or get_storage()

    slug = new_slug()
    object_name = new_object_name(filename)

    grant = storage.issue_upload_grant(
        object_name,
        content_type,
        UPLOAD_GRANT_TTL_SECONDS,
    )
    logger.info(
        'Upload requested: slug=%s, object=%s, type=%s',
        slug,
        object_name,
        content_type,
    )
    return UploadTicket(
        slug=slug,
        object_name=object_name,
        upload_url=grant.url,
        max_bytes=MAX_UPLOAD_BYTES,
    )


def finalize_upload(
    slug: str,
    object_name: str,
    storage: FileStorage | None = None,
) -> FinalizedUpload:
    """Commit metadata for an object the client has uploaded.

    If the slug is already committed, the stored record is returned
    as is and storage is not consulted, so clients may retry after a
    network failure.

    Args:
        slug: Slug issued by ``request_upload``.
        object_name: Object name issued by ``request_upload``.
        storage: Blob gateway; the default storage when omitted.

    Returns:
        FinalizedUpload with link path, size and content type.

    Raises:
        ValidationError: If slug or object name is empty.
        NotFoundInStorageError: If the object was never uploaded.
        PayloadTooLargeError: If the object exceeds MAX_UPLOAD_BYTES.
        ConflictError: If a concurrent finalize committed first.
    """
    _require('slug', slug)
    _require('objectName', object_name)

    existing = find_record(slug)
    if existing is not None:
        logger.info('Finalize is a replay, slug already committed: %s', slug)
        return FinalizedUpload(
            link_path=existing.link_path,
            size_bytes=existing.size_bytes,
            content_type=existing.content_type,
        )

    storage = storage or get_storage()
    metadata = storage.stat_object(object_name)

    if metadata.size_bytes > MAX_UPLOAD_BYTES:
        logger.warning(
            'Upload too large: slug=%s, object=%s, size=%d',
            slug,
            object_name,
            metadata.size_bytes,
        )
        raise PayloadTooLargeError(
            size_bytes=metadata.size_bytes,
            max_bytes=MAX_UPLOAD_BYTES,
        )

    record = insert_record(
        slug=slug,
        object_name=object_name,
        size_bytes=metadata.size_bytes,
        content_type=metadata.content_type,
    )
    return FinalizedUpload(
        link_path=record.link_path,
        size_bytes=record.size_bytes,
        content_type=record.content_type,
    )
