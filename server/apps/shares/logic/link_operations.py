"""Business logic for resolving share links and reporting stats."""

import dataclasses
import logging
from typing import final

from server.apps.shares.infrastructure.storage import FileStorage, get_storage
from server.apps.shares.logic.record_operations import (
    count_records,
    get_record,
)

logger = logging.getLogger(__name__)


@final
@dataclasses.dataclass(frozen=True)
class ResolvedLink:
    """Redirect target for a share link."""

    url: str
    content_type: str | None


@final
@dataclasses.dataclass(frozen=True)
class FileStats:
    """Aggregate numbers over committed files."""

    total_files: int


def resolve_link(
    slug: str,
    storage: FileStorage | None = None,
) -> ResolvedLink:
    """Resolve a slug to the public URL of its stored object.

    Args:
        slug: Public identifier from the share link.
        storage: Blob gateway; the default storage when omitted.

    Returns:
        ResolvedLink with the read URL and stored content type.

    Raises:
        LinkNotFoundError: If the slug is not committed.
    """
    record = get_record(slug)
    storage = storage or get_storage()
    url = storage.public_read_url(record.object_name)
    logger.debug('Resolved link %s -> %s', slug, record.object_name)
    return ResolvedLink(url=url, content_type=record.content_type)


def get_stats() -> FileStats:
    """Report the number of committed files."""
    return FileStats(total_files=count_records())
