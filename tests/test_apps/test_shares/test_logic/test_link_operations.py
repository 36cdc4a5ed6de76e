"""Tests for link resolution and stats."""

import pytest

from server.apps.shares.exceptions import LinkNotFoundError
from server.apps.shares.logic.link_operations import get_stats, resolve_link
from server.apps.shares.models import FileRecord


@pytest.mark.django_db
def test_resolve_link(file_record, storage):
    """Test slug resolves to the object URL and content type."""
    resolved = resolve_link(file_record.slug, storage)

    assert resolved.url.endswith(file_record.object_name)
    assert resolved.content_type == 'application/pdf'


@pytest.mark.django_db
def test_resolve_link_not_found(storage):
    """Test unknown slug raises LinkNotFoundError."""
    with pytest.raises(LinkNotFoundError):
        resolve_link('unknown1', storage)


@pytest.mark.django_db
def test_resolve_link_default_storage(file_record, default_storage_configured):
    """Test default storage is used when none is passed."""
    resolved = resolve_link(file_record.slug)

    assert file_record.object_name in resolved.url


@pytest.mark.django_db
def test_get_stats_empty(db):
    """Test stats on an empty table."""
    assert get_stats().total_files == 0


@pytest.mark.django_db
def test_get_stats_counts_records(file_record):
    """Test stats count every committed record."""
    FileRecord.objects.create(
        slug='Second01',
        object_name='second.txt',
        size_bytes=1,
        content_type=None,
    )

    assert get_stats().total_files == 2
