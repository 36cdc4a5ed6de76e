"""Business logic for file record persistence.

The database unique constraints on ``slug`` and ``object_name`` are
the only coordination between concurrent writers; no application
level locking happens here.
"""

import logging

from django.db import IntegrityError, transaction

from server.apps.shares.exceptions import ConflictError, LinkNotFoundError
from server.apps.shares.models import FileRecord

logger = logging.getLogger(__name__)


def insert_record(
    slug: str,
    object_name: str,
    size_bytes: int,
    content_type: str | None,
) -> FileRecord:
    """Create a file record.

    Args:
        slug: Public identifier (primary key).
        object_name: Storage key of the uploaded object.
        size_bytes: Object size in bytes.
        content_type: Content type reported by storage, may be None.

    Returns:
        Created FileRecord instance.

    Raises:
        ConflictError: If the slug or object name is already recorded.
    """
    try:
        with transaction.atomic():
            # force_insert: a duplicate primary key must fail, not update
            record = FileRecord(
                slug=slug,
                object_name=object_name,
                size_bytes=size_bytes,
                content_type=content_type,
            )
            record.save(force_insert=True)
    except IntegrityError as error:
        logger.warning(
            'Conflicting file record: slug=%s, object=%s',
            slug,
            object_name,
        )
        raise ConflictError(
            f'File record already exists for slug {slug} '
            f'or object {object_name}',
        ) from error

    logger.info(
        'File record created: slug=%s, object=%s, size=%d',
        slug,
        object_name,
        size_bytes,
    )
    return record


def find_record(slug: str) -> FileRecord | None:
    """Look up a file record by slug.

    Args:
        slug: Public identifier.

    Returns:
        FileRecord instance, or None if the slug is not committed.
    """
    return FileRecord.objects.filter(slug=slug).first()


def get_record(slug: str) -> FileRecord:
    """Get a file record by slug.

    Args:
        slug: Public identifier.

    Returns:
        FileRecord instance.

    Raises:
        LinkNotFoundError: If no record exists for the slug.
    """
    record = find_record(slug)
    if record is None:
        logger.info('File record not found: slug=%s', slug)
        raise LinkNotFoundError(slug)
    return record


def count_records() -> int:
    """Count all committed file records."""
    return FileRecord.objects.count()
